from sqlalchemy import Column, String, DateTime, JSON
from catalog.core.database import Base


class SiteContent(Base):
    __tablename__ = "site_content"

    id = Column(String(36), primary_key=True)
    section = Column(String(100), unique=True, nullable=False)  # about, how-to-order, ...
    content = Column(JSON, nullable=False)  # {en: any, my: any}
    updated_at = Column(DateTime, nullable=False)
