from enum import Enum
from typing import Generic, TypeVar, Optional, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ResponseModel(BaseModel, Generic[T]):
    """Standard API response model"""
    code: int = 200
    data: Optional[T] = None
    msg: str = "success"


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; either spelling is accepted on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class BilingualText(CamelModel):
    # A missing language renders as the empty fallback
    en: str = ""
    my: str = ""


class BilingualList(CamelModel):
    en: List[str] = []
    my: List[str] = []


class QualityTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
