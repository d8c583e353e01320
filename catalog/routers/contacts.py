import logging
from typing import List

from fastapi import APIRouter, Depends

from catalog.core.deps import get_storage, get_current_admin
from catalog.schemas.common import ResponseModel
from catalog.schemas.contact import ContactInfo, ContactInfoUpdate, KNOWN_PLATFORMS
from catalog.storage.base import Storage


router = APIRouter(prefix="/contacts", tags=["contacts"])
logger = logging.getLogger(__name__)


@router.get("", response_model=ResponseModel[List[ContactInfo]])
def get_contact_info(storage: Storage = Depends(get_storage)):
    """Active contact channels"""
    return ResponseModel(data=storage.get_contact_info())


@router.get("/all", response_model=ResponseModel[List[ContactInfo]])
def get_all_contact_info(
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    """Every contact channel, inactive included (admin)"""
    return ResponseModel(data=storage.get_all_contact_info())


@router.put("/{platform}", response_model=ResponseModel[ContactInfo])
def update_contact_info(
    platform: str,
    contact_in: ContactInfoUpdate,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    """Create or update the contact for a platform (admin)"""
    if platform not in KNOWN_PLATFORMS:
        logger.info(f"Storing contact for unlisted platform {platform!r}")
    return ResponseModel(data=storage.update_contact_info(platform, contact_in), msg="updated")
