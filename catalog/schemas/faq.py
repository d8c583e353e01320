from datetime import datetime
from typing import Optional

from catalog.schemas.common import CamelModel, BilingualText


class FaqItemCreate(CamelModel):
    question: BilingualText
    answer: BilingualText
    order: Optional[int] = None
    is_active: Optional[bool] = None


class FaqItemUpdate(CamelModel):
    question: Optional[BilingualText] = None
    answer: Optional[BilingualText] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class FaqItem(CamelModel):
    id: str
    question: BilingualText
    answer: BilingualText
    order: int
    is_active: bool
    updated_at: datetime
