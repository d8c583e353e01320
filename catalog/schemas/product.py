from datetime import datetime
from typing import List, Optional

from catalog.schemas.common import CamelModel, BilingualText, BilingualList, QualityTier


class ProductCreate(CamelModel):
    name: BilingualText
    description: BilingualText
    quality: QualityTier
    # Left as None, these receive storage defaults
    images: Optional[List[str]] = None
    videos: Optional[List[str]] = None
    specifications: Optional[BilingualList] = None
    is_active: Optional[bool] = None


class ProductUpdate(CamelModel):
    name: Optional[BilingualText] = None
    description: Optional[BilingualText] = None
    quality: Optional[QualityTier] = None
    images: Optional[List[str]] = None
    videos: Optional[List[str]] = None
    specifications: Optional[BilingualList] = None
    is_active: Optional[bool] = None


class Product(CamelModel):
    id: str
    name: BilingualText
    description: BilingualText
    quality: QualityTier
    images: List[str]
    videos: List[str]
    specifications: BilingualList
    is_active: bool
    created_at: datetime
    updated_at: datetime
