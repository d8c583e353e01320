from sqlalchemy import Column, String, DateTime, Integer, Boolean, JSON
from catalog.core.database import Base


class FaqItem(Base):
    __tablename__ = "faq_items"

    id = Column(String(36), primary_key=True)
    question = Column(JSON, nullable=False)  # {en, my}
    answer = Column(JSON, nullable=False)  # {en, my}
    order = Column("order", Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    # created_at is not exposed; it breaks ties between equal `order` values
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
