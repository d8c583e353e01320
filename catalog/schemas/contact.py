from datetime import datetime
from typing import Optional

from catalog.schemas.common import CamelModel


# Platforms the storefront knows how to render; others are stored as-is
KNOWN_PLATFORMS = ("telegram", "whatsapp", "messenger")


class ContactInfoUpdate(CamelModel):
    url: Optional[str] = None
    qr_code: Optional[str] = None
    is_active: Optional[bool] = None


class ContactInfo(CamelModel):
    id: str
    platform: str
    url: str
    qr_code: Optional[str] = None
    is_active: bool
    updated_at: datetime
