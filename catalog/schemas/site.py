from datetime import datetime
from typing import Any

from catalog.schemas.common import CamelModel


class SiteContentUpdate(CamelModel):
    content: Any  # opaque {en: ..., my: ...} payload


class SiteContent(CamelModel):
    id: str
    section: str
    content: Any
    updated_at: datetime
