import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.core.config import settings
from catalog.core.logger import setup_logging
from catalog.routers import auth, products, content, contacts, faq
from catalog.schemas.common import ResponseModel
from catalog.storage import Storage, create_storage


logger = logging.getLogger("catalog.access")


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """
    Build the API around a storage backend.

    Without an explicit `storage`, the backend is chosen from DATABASE_URL.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Bilingual catalog API",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.storage = storage if storage is not None else create_storage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, specify your frontend domain
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        if request.url.path.startswith(settings.API_PREFIX) and request.method != "OPTIONS":
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} {process_time * 1000:.1f}ms"
            )
        return response

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ResponseModel(code=500, msg="Internal server error").model_dump(),
        )

    app.include_router(auth.router, prefix=settings.API_PREFIX)
    app.include_router(products.router, prefix=settings.API_PREFIX)
    app.include_router(content.router, prefix=settings.API_PREFIX)
    app.include_router(contacts.router, prefix=settings.API_PREFIX)
    app.include_router(faq.router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        return {"message": f"Welcome to {settings.APP_NAME}", "docs": "/docs"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app
