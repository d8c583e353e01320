from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from catalog.core.deps import get_storage, get_current_admin
from catalog.schemas.common import ResponseModel
from catalog.schemas.faq import FaqItem, FaqItemCreate, FaqItemUpdate
from catalog.storage.base import Storage


router = APIRouter(prefix="/faq", tags=["faq"])


@router.get("", response_model=ResponseModel[List[FaqItem]])
def get_faq_items(storage: Storage = Depends(get_storage)):
    """Active FAQ items in display order"""
    return ResponseModel(data=storage.get_faq_items())


@router.get("/all", response_model=ResponseModel[List[FaqItem]])
def get_all_faq_items(
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    return ResponseModel(data=storage.get_all_faq_items())


@router.get("/{id}", response_model=ResponseModel[FaqItem])
def get_faq_item(id: str, storage: Storage = Depends(get_storage)):
    item = storage.get_faq_item(id)
    if not item:
        raise HTTPException(status_code=404, detail="FAQ item not found")
    return ResponseModel(data=item)


@router.post("", response_model=ResponseModel[FaqItem], status_code=status.HTTP_201_CREATED)
def create_faq_item(
    item_in: FaqItemCreate,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    return ResponseModel(code=201, data=storage.create_faq_item(item_in), msg="created")


@router.put("/{id}", response_model=ResponseModel[FaqItem])
def update_faq_item(
    id: str,
    item_in: FaqItemUpdate,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    item = storage.update_faq_item(id, item_in)
    if not item:
        raise HTTPException(status_code=404, detail="FAQ item not found")
    return ResponseModel(data=item, msg="updated")


@router.delete("/{id}", response_model=ResponseModel)
def delete_faq_item(
    id: str,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    if not storage.delete_faq_item(id):
        raise HTTPException(status_code=404, detail="FAQ item not found")
    return ResponseModel(msg="deleted")
