"""
Relational storage backend (SQLAlchemy).

One table per entity kind, one session per operation. Filters and ordering
are pushed down to SQL; partial updates read the row, merge, and write it
back. Uniqueness of username, platform and section is enforced by the
database. Engine failures propagate to the caller, except in the delete
operations, which report them as False.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from catalog import models
from catalog.schemas.contact import ContactInfo, ContactInfoUpdate
from catalog.schemas.faq import FaqItem, FaqItemCreate, FaqItemUpdate
from catalog.schemas.product import Product, ProductCreate, ProductUpdate
from catalog.schemas.site import SiteContent
from catalog.schemas.user import User, UserCreate
from catalog.storage import lifecycle
from catalog.storage.base import Storage, QUALITY_ALL, ProductChanges, ContactChanges, FaqChanges

logger = logging.getLogger(__name__)


class DbStorage(Storage):

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # User methods

    def get_user(self, id: str) -> Optional[User]:
        with self.session_factory() as db:
            row = db.get(models.User, id)
            return User.model_validate(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self.session_factory() as db:
            row = db.query(models.User).filter(models.User.username == username).first()
            return User.model_validate(row) if row else None

    def create_user(self, user: UserCreate) -> User:
        # A duplicate username raises IntegrityError to the caller
        row = models.User(
            **lifecycle.dump(user),
            id=lifecycle.new_id(),
            created_at=lifecycle.now(),
        )
        return self._insert(row, User)

    # Product methods

    def get_products(self, quality: Optional[str] = None) -> List[Product]:
        with self.session_factory() as db:
            query = db.query(models.Product).filter(models.Product.is_active == True)  # noqa: E712
            if quality and quality != QUALITY_ALL:
                query = query.filter(models.Product.quality == quality)
            rows = query.order_by(models.Product.created_at.desc()).all()
            return [Product.model_validate(row) for row in rows]

    def get_product(self, id: str) -> Optional[Product]:
        with self.session_factory() as db:
            row = db.get(models.Product, id)
            return Product.model_validate(row) if row else None

    def create_product(self, product: ProductCreate) -> Product:
        timestamp = lifecycle.now()
        row = models.Product(
            **lifecycle.with_defaults(lifecycle.dump(product), lifecycle.PRODUCT_DEFAULTS),
            id=lifecycle.new_id(),
            created_at=timestamp,
            updated_at=timestamp,
        )
        return self._insert(row, Product)

    def update_product(self, id: str, changes: ProductChanges) -> Optional[Product]:
        return self._update(models.Product, Product, id, lifecycle.to_changes(changes, ProductUpdate))

    def delete_product(self, id: str) -> bool:
        return self._delete(models.Product, id)

    def count_products(self) -> int:
        """Every stored product, inactive ones included."""
        with self.session_factory() as db:
            return db.query(models.Product).count()

    # Site content methods

    def get_site_content(self) -> List[SiteContent]:
        with self.session_factory() as db:
            rows = db.query(models.SiteContent).order_by(models.SiteContent.section).all()
            return [SiteContent.model_validate(row) for row in rows]

    def get_site_content_by_section(self, section: str) -> Optional[SiteContent]:
        with self.session_factory() as db:
            row = self._find_by_key(db, models.SiteContent.section, section)
            return SiteContent.model_validate(row) if row else None

    def update_site_content(self, section: str, content: Any) -> SiteContent:
        content = lifecycle.dump({"content": content})["content"]
        return self._upsert(
            SiteContent,
            models.SiteContent.section,
            section,
            create=lambda: models.SiteContent(
                id=lifecycle.new_id(),
                section=section,
                content=content,
                updated_at=lifecycle.now(),
            ),
            changes={"content": content},
        )

    # Contact info methods

    def get_contact_info(self) -> List[ContactInfo]:
        with self.session_factory() as db:
            rows = (
                db.query(models.ContactInfo)
                .filter(models.ContactInfo.is_active == True)  # noqa: E712
                .order_by(models.ContactInfo.platform)
                .all()
            )
            return [ContactInfo.model_validate(row) for row in rows]

    def get_all_contact_info(self) -> List[ContactInfo]:
        with self.session_factory() as db:
            rows = db.query(models.ContactInfo).order_by(models.ContactInfo.platform).all()
            return [ContactInfo.model_validate(row) for row in rows]

    def update_contact_info(self, platform: str, changes: ContactChanges) -> ContactInfo:
        changes = lifecycle.to_changes(changes, ContactInfoUpdate)
        return self._upsert(
            ContactInfo,
            models.ContactInfo.platform,
            platform,
            create=lambda: models.ContactInfo(
                **{**lifecycle.CONTACT_DEFAULTS, **changes},
                id=lifecycle.new_id(),
                platform=platform,
                updated_at=lifecycle.now(),
            ),
            changes=changes,
        )

    # FAQ methods

    def get_faq_items(self) -> List[FaqItem]:
        with self.session_factory() as db:
            rows = (
                self._faq_query(db)
                .filter(models.FaqItem.is_active == True)  # noqa: E712
                .all()
            )
            return [FaqItem.model_validate(row) for row in rows]

    def get_all_faq_items(self) -> List[FaqItem]:
        with self.session_factory() as db:
            return [FaqItem.model_validate(row) for row in self._faq_query(db).all()]

    def get_faq_item(self, id: str) -> Optional[FaqItem]:
        with self.session_factory() as db:
            row = db.get(models.FaqItem, id)
            return FaqItem.model_validate(row) if row else None

    def create_faq_item(self, item: FaqItemCreate) -> FaqItem:
        timestamp = lifecycle.now()
        row = models.FaqItem(
            **lifecycle.with_defaults(lifecycle.dump(item), lifecycle.FAQ_DEFAULTS),
            id=lifecycle.new_id(),
            created_at=timestamp,
            updated_at=timestamp,
        )
        return self._insert(row, FaqItem)

    def update_faq_item(self, id: str, changes: FaqChanges) -> Optional[FaqItem]:
        return self._update(models.FaqItem, FaqItem, id, lifecycle.to_changes(changes, FaqItemUpdate))

    def delete_faq_item(self, id: str) -> bool:
        return self._delete(models.FaqItem, id)

    # Helpers

    @staticmethod
    def _faq_query(db: Session):
        # created_at keeps insertion order among equal `order` values
        return db.query(models.FaqItem).order_by(models.FaqItem.order, models.FaqItem.created_at)

    @staticmethod
    def _find_by_key(db: Session, column, value: str):
        return db.execute(select(column.class_).where(column == value).limit(1)).scalars().first()

    def _insert(self, row, schema: Type):
        with self.session_factory() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
            return schema.model_validate(row)

    def _update(self, model, schema: Type, id: str, changes: Dict[str, Any]):
        with self.session_factory() as db:
            row = db.get(model, id)
            if row is None:
                return None

            for key, value in changes.items():
                setattr(row, key, value)
            row.updated_at = lifecycle.touch(row.updated_at)

            db.commit()
            db.refresh(row)
            return schema.model_validate(row)

    def _upsert(self, schema: Type, column, key: str, create: Callable[[], Any], changes: Dict[str, Any]):
        """
        Find the row holding `key` in a unique column and update it, or insert it.

        If a concurrent writer inserts the same key between the lookup and our
        insert, the unique constraint rejects ours and we update theirs.
        """
        with self.session_factory() as db:
            row = self._find_by_key(db, column, key)

            if row is None:
                row = create()
                db.add(row)
                try:
                    db.commit()
                    db.refresh(row)
                    return schema.model_validate(row)
                except IntegrityError:
                    db.rollback()
                    logger.warning(f"{column.class_.__tablename__} row for {key!r} appeared concurrently, updating it")
                    row = self._find_by_key(db, column, key)
                    if row is None:
                        raise

            for attr, value in changes.items():
                setattr(row, attr, value)
            row.updated_at = lifecycle.touch(row.updated_at)
            db.commit()
            db.refresh(row)
            return schema.model_validate(row)

    def _delete(self, model, id: str) -> bool:
        with self.session_factory() as db:
            try:
                deleted = db.query(model).filter(model.id == id).delete(synchronize_session=False)
                db.commit()
                return deleted > 0
            except SQLAlchemyError:
                db.rollback()
                logger.exception(f"Error deleting {model.__tablename__} row {id}")
                return False
