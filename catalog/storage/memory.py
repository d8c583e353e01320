"""
In-memory storage backend.

One insertion-ordered dict per entity kind, keyed by id, living as long as the
instance. Reads scan and sort; the dataset is small. Mutations are not
synchronised, callers must not interleave writes from several threads.
Direct inserts do not enforce uniqueness of `username`.
"""

import logging
from typing import Any, Dict, List, Optional, TypeVar

from pydantic import BaseModel

from catalog.schemas.contact import ContactInfo, ContactInfoUpdate
from catalog.schemas.faq import FaqItem, FaqItemCreate, FaqItemUpdate
from catalog.schemas.product import Product, ProductCreate, ProductUpdate
from catalog.schemas.site import SiteContent
from catalog.schemas.user import User, UserCreate
from catalog.storage import lifecycle
from catalog.storage.base import Storage, QUALITY_ALL, ProductChanges, ContactChanges, FaqChanges

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _copy(entity: M) -> M:
    return entity.model_copy(deep=True)


class MemStorage(Storage):

    def __init__(self, seed: bool = True):
        self.users: Dict[str, User] = {}
        self.products: Dict[str, Product] = {}
        self.site_content: Dict[str, SiteContent] = {}
        self.contact_info: Dict[str, ContactInfo] = {}
        self.faq_items: Dict[str, FaqItem] = {}

        if seed:
            from catalog.storage.seed import seed_storage
            seed_storage(self)

    # User methods

    def get_user(self, id: str) -> Optional[User]:
        user = self.users.get(id)
        return _copy(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return _copy(user)
        return None

    def create_user(self, user: UserCreate) -> User:
        new_user = User.model_validate({
            **lifecycle.dump(user),
            "id": lifecycle.new_id(),
            "created_at": lifecycle.now(),
        })
        self.users[new_user.id] = new_user
        return _copy(new_user)

    # Product methods

    def get_products(self, quality: Optional[str] = None) -> List[Product]:
        products = [p for p in self.products.values() if p.is_active]
        if quality and quality != QUALITY_ALL:
            products = [p for p in products if p.quality.value == quality]
        products.sort(key=lambda p: p.created_at, reverse=True)
        return [_copy(p) for p in products]

    def get_product(self, id: str) -> Optional[Product]:
        product = self.products.get(id)
        return _copy(product) if product else None

    def create_product(self, product: ProductCreate) -> Product:
        timestamp = lifecycle.now()
        new_product = Product.model_validate({
            **lifecycle.with_defaults(lifecycle.dump(product), lifecycle.PRODUCT_DEFAULTS),
            "id": lifecycle.new_id(),
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        self.products[new_product.id] = new_product
        return _copy(new_product)

    def update_product(self, id: str, changes: ProductChanges) -> Optional[Product]:
        changes = lifecycle.to_changes(changes, ProductUpdate)
        existing = self.products.get(id)
        if existing is None:
            return None

        updated = self._merge(Product, existing, changes)
        self.products[id] = updated
        return _copy(updated)

    def delete_product(self, id: str) -> bool:
        return self.products.pop(id, None) is not None

    # Site content methods

    def get_site_content(self) -> List[SiteContent]:
        return [_copy(c) for c in self.site_content.values()]

    def get_site_content_by_section(self, section: str) -> Optional[SiteContent]:
        existing = self._find(self.site_content, "section", section)
        return _copy(existing) if existing else None

    def update_site_content(self, section: str, content: Any) -> SiteContent:
        existing = self._find(self.site_content, "section", section)
        content = lifecycle.dump({"content": content})["content"]

        if existing:
            updated = self._merge(SiteContent, existing, {"content": content})
        else:
            updated = SiteContent(
                id=lifecycle.new_id(),
                section=section,
                content=content,
                updated_at=lifecycle.now(),
            )
        self.site_content[updated.id] = updated
        return _copy(updated)

    # Contact info methods

    def get_contact_info(self) -> List[ContactInfo]:
        return [_copy(c) for c in self.contact_info.values() if c.is_active]

    def get_all_contact_info(self) -> List[ContactInfo]:
        return [_copy(c) for c in self.contact_info.values()]

    def update_contact_info(self, platform: str, changes: ContactChanges) -> ContactInfo:
        changes = lifecycle.to_changes(changes, ContactInfoUpdate)
        existing = self._find(self.contact_info, "platform", platform)

        if existing:
            updated = self._merge(ContactInfo, existing, changes)
        else:
            updated = ContactInfo.model_validate({
                **lifecycle.CONTACT_DEFAULTS,
                **changes,
                "id": lifecycle.new_id(),
                "platform": platform,
                "updated_at": lifecycle.now(),
            })
        self.contact_info[updated.id] = updated
        return _copy(updated)

    # FAQ methods

    def get_faq_items(self) -> List[FaqItem]:
        return [item for item in self.get_all_faq_items() if item.is_active]

    def get_all_faq_items(self) -> List[FaqItem]:
        # sorted() is stable, so equal orders keep insertion order
        return [_copy(item) for item in sorted(self.faq_items.values(), key=lambda item: item.order)]

    def get_faq_item(self, id: str) -> Optional[FaqItem]:
        item = self.faq_items.get(id)
        return _copy(item) if item else None

    def create_faq_item(self, item: FaqItemCreate) -> FaqItem:
        new_item = FaqItem.model_validate({
            **lifecycle.with_defaults(lifecycle.dump(item), lifecycle.FAQ_DEFAULTS),
            "id": lifecycle.new_id(),
            "updated_at": lifecycle.now(),
        })
        self.faq_items[new_item.id] = new_item
        return _copy(new_item)

    def update_faq_item(self, id: str, changes: FaqChanges) -> Optional[FaqItem]:
        changes = lifecycle.to_changes(changes, FaqItemUpdate)
        existing = self.faq_items.get(id)
        if existing is None:
            return None

        updated = self._merge(FaqItem, existing, changes)
        self.faq_items[id] = updated
        return _copy(updated)

    def delete_faq_item(self, id: str) -> bool:
        return self.faq_items.pop(id, None) is not None

    # Helpers

    @staticmethod
    def _find(collection: Dict[str, M], field: str, value: str) -> Optional[M]:
        for entity in collection.values():
            if getattr(entity, field) == value:
                return entity
        return None

    @staticmethod
    def _merge(model: type, existing: M, changes: Dict[str, Any]) -> M:
        return model.model_validate({
            **existing.model_dump(),
            **changes,
            "updated_at": lifecycle.touch(existing.updated_at),
        })
