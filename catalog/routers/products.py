import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog.core.deps import get_storage, get_current_admin
from catalog.schemas.common import ResponseModel
from catalog.schemas.product import Product, ProductCreate, ProductUpdate
from catalog.storage.base import Storage


router = APIRouter(prefix="/products", tags=["products"])
logger = logging.getLogger(__name__)


@router.get("", response_model=ResponseModel[List[Product]])
def get_products(
    quality: Optional[Literal["high", "medium", "low", "all"]] = Query(None, description="Quality tier, or 'all'"),
    storage: Storage = Depends(get_storage),
):
    """List active products, newest first"""
    return ResponseModel(data=storage.get_products(quality))


@router.get("/{id}", response_model=ResponseModel[Product])
def get_product(id: str, storage: Storage = Depends(get_storage)):
    product = storage.get_product(id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ResponseModel(data=product)


@router.post("", response_model=ResponseModel[Product], status_code=status.HTTP_201_CREATED)
def create_product(
    product_in: ProductCreate,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    """Create a product (admin)"""
    product = storage.create_product(product_in)
    logger.info(f"Product {product.id} created by {admin}")
    return ResponseModel(code=201, data=product, msg="created")


@router.put("/{id}", response_model=ResponseModel[Product])
def update_product(
    id: str,
    product_in: ProductUpdate,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    """Update the provided fields of a product (admin)"""
    product = storage.update_product(id, product_in)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ResponseModel(data=product, msg="updated")


@router.delete("/{id}", response_model=ResponseModel)
def delete_product(
    id: str,
    storage: Storage = Depends(get_storage),
    admin: str = Depends(get_current_admin),
):
    """Delete a product (admin)"""
    if not storage.delete_product(id):
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Product {id} deleted by {admin}")
    return ResponseModel(msg="deleted")
