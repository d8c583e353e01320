from sqlalchemy import Column, String, DateTime, Boolean, JSON
from catalog.core.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    name = Column(JSON, nullable=False)  # {en, my}
    description = Column(JSON, nullable=False)  # {en, my}
    quality = Column(String(20), nullable=False, index=True)  # high | medium | low
    images = Column(JSON, nullable=False, default=list)
    videos = Column(JSON, nullable=False, default=list)
    specifications = Column(JSON, nullable=False)  # {en: [...], my: [...]}

    # Status
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    # Timestamps, assigned by the storage layer
    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)
