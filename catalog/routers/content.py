from typing import List

from fastapi import APIRouter, Depends, HTTPException

from catalog.core.deps import get_storage, get_current_admin
from catalog.schemas.common import ResponseModel
from catalog.schemas.site import SiteContent, SiteContentUpdate
from catalog.storage.base import Storage


router = APIRouter(prefix="/content", tags=["site content"])


@router.get("", response_model=ResponseModel[List[SiteContent]])
def get_site_content(storage: Storage = Depends(get_storage)):
    return ResponseModel(data=storage.get_site_content())


@router.get("/{section}", response_model=ResponseModel[SiteContent])
def get_site_content_by_section(section: str, storage: Storage = Depends(get_storage)):
    content = storage.get_site_content_by_section(section)
    if not content:
        raise HTTPException(status_code=404, detail="Content not found")
    return ResponseModel(data=content)


@router.put("/{section}", response_model=ResponseModel[SiteContent])
def update_site_content(
    section: str,
    content_in: SiteContentUpdate,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    """Replace a section's content, creating the section if needed (admin)"""
    return ResponseModel(data=storage.update_site_content(section, content_in.content), msg="updated")
