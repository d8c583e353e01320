import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status

from catalog.core.config import settings
from catalog.core.deps import get_current_admin
from catalog.core.security import verify_admin_credentials, create_access_token
from catalog.schemas.common import ResponseModel
from catalog.schemas.user import AdminLogin, AdminInfo, Token


router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=ResponseModel[Token])
def login(credentials: AdminLogin):
    """Back office login against the configured admin account"""
    if not verify_admin_credentials(credentials.username, credentials.password):
        logger.warning(f"Login failed for user: {credentials.username}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect username or password")

    access_token = create_access_token(
        data={"sub": credentials.username, "role": "admin"},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    logger.info(f"Admin logged in: {credentials.username}")
    return ResponseModel(data=Token(token=access_token, username=credentials.username), msg="logged in")


@router.get("/me", response_model=ResponseModel[AdminInfo])
def me(admin: str = Depends(get_current_admin)):
    """Check that the bearer token is still valid"""
    return ResponseModel(data=AdminInfo(username=admin))
