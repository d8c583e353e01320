# Models module
from catalog.models.user import User
from catalog.models.product import Product
from catalog.models.site import SiteContent
from catalog.models.contact import ContactInfo
from catalog.models.faq import FaqItem

__all__ = ["User", "Product", "SiteContent", "ContactInfo", "FaqItem"]
