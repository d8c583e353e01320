"""
Storage interface (Abstract Base Class).

Defines the operations every backend supports over the five entity kinds,
independent of where the data lives. Not-found is signalled with None (or
False for deletes), never with an exception.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Union

from catalog.schemas.contact import ContactInfo, ContactInfoUpdate
from catalog.schemas.faq import FaqItem, FaqItemCreate, FaqItemUpdate
from catalog.schemas.product import Product, ProductCreate, ProductUpdate
from catalog.schemas.site import SiteContent
from catalog.schemas.user import User, UserCreate


# Product filter value meaning "every tier"
QUALITY_ALL = "all"

ProductChanges = Union[ProductUpdate, Mapping[str, Any]]
ContactChanges = Union[ContactInfoUpdate, Mapping[str, Any]]
FaqChanges = Union[FaqItemUpdate, Mapping[str, Any]]


class Storage(ABC):
    """
    Abstract storage for the catalog.

    Partial updates merge the provided fields over the stored entity and
    refresh `updated_at`. List-valued fields are replaced whole.
    """

    # User methods

    @abstractmethod
    def get_user(self, id: str) -> Optional[User]:
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    def create_user(self, user: UserCreate) -> User:
        pass

    # Product methods

    @abstractmethod
    def get_products(self, quality: Optional[str] = None) -> List[Product]:
        """
        List active products, newest first.

        Args:
            quality: Tier to filter on; None or "all" disables the filter

        Returns:
            Active products matching the filter
        """
        pass

    @abstractmethod
    def get_product(self, id: str) -> Optional[Product]:
        pass

    @abstractmethod
    def create_product(self, product: ProductCreate) -> Product:
        """
        Store a new product.

        Omitted images/videos default to [], specifications to
        {en: [], my: []} and is_active to True.
        """
        pass

    @abstractmethod
    def update_product(self, id: str, changes: ProductChanges) -> Optional[Product]:
        pass

    @abstractmethod
    def delete_product(self, id: str) -> bool:
        """Returns False when nothing was deleted"""
        pass

    # Site content methods

    @abstractmethod
    def get_site_content(self) -> List[SiteContent]:
        pass

    @abstractmethod
    def get_site_content_by_section(self, section: str) -> Optional[SiteContent]:
        pass

    @abstractmethod
    def update_site_content(self, section: str, content: Any) -> SiteContent:
        """Replace the content of a section, creating the section if needed"""
        pass

    # Contact info methods

    @abstractmethod
    def get_contact_info(self) -> List[ContactInfo]:
        """Active contacts only"""
        pass

    @abstractmethod
    def get_all_contact_info(self) -> List[ContactInfo]:
        pass

    @abstractmethod
    def update_contact_info(self, platform: str, changes: ContactChanges) -> ContactInfo:
        """
        Upsert the contact for a platform.

        A new row starts from url="", qr_code=None, is_active=True with
        `changes` merged on top.
        """
        pass

    # FAQ methods

    @abstractmethod
    def get_faq_items(self) -> List[FaqItem]:
        """Active items by `order`, insertion order on ties"""
        pass

    @abstractmethod
    def get_all_faq_items(self) -> List[FaqItem]:
        pass

    @abstractmethod
    def get_faq_item(self, id: str) -> Optional[FaqItem]:
        pass

    @abstractmethod
    def create_faq_item(self, item: FaqItemCreate) -> FaqItem:
        pass

    @abstractmethod
    def update_faq_item(self, id: str, changes: FaqChanges) -> Optional[FaqItem]:
        pass

    @abstractmethod
    def delete_faq_item(self, id: str) -> bool:
        pass
