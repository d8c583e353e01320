"""
Backend Entry Point
Run with: python main.py
Or: uvicorn catalog.main:create_app --factory --reload
"""
import uvicorn

from catalog.core.config import settings

if __name__ == "__main__":
    uvicorn.run("catalog.main:create_app", factory=True, host=settings.HOST, port=settings.PORT, reload=settings.is_development)
