from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from catalog.core.config import settings
from catalog.core.security import decode_access_token
from catalog.storage.base import Storage


oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login")


def get_storage(request: Request) -> Storage:
    """The storage backend chosen at startup"""
    return request.app.state.storage


def get_current_admin(token: str = Depends(oauth2_scheme)) -> str:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_access_token(token)
    if payload is None:
        raise credentials_exception

    username = payload.get("sub")
    if username is None or payload.get("role") != "admin":
        raise credentials_exception

    return username
