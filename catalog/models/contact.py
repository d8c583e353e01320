from sqlalchemy import Column, String, DateTime, Text, Boolean
from catalog.core.database import Base


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(String(36), primary_key=True)
    platform = Column(String(50), unique=True, nullable=False)  # telegram, whatsapp, messenger, ...
    url = Column(String(500), nullable=False, default="")
    qr_code = Column(Text, nullable=True)  # image URL or data URI
    is_active = Column(Boolean, nullable=False, default=True)
    updated_at = Column(DateTime, nullable=False)
