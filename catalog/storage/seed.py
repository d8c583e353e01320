"""
Illustrative catalog used for development and demos.
"""
import logging

from catalog.schemas.faq import FaqItemCreate
from catalog.schemas.product import ProductCreate
from catalog.storage.base import Storage

logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    {
        "name": {"en": "Premium OG Kush", "my": "ပရီမီယံ OG Kush"},
        "description": {
            "en": "Premium grade OG Kush with exceptional quality and potency. Carefully cultivated and processed to ensure maximum satisfaction.",
            "my": "အရည်အသွေးမြင့် OG Kush ထူးထူးခြားခြား အရည်အသွေးနှင့် စွမ်းအားရှိသော။",
        },
        "quality": "high",
        "images": [
            "https://images.unsplash.com/photo-1536939459926-301728717817?auto=format&fit=crop&w=400&h=700",
            "https://images.unsplash.com/photo-1612277795421-9bc7706a4a34?auto=format&fit=crop&w=400&h=700",
        ],
        "specifications": {
            "en": ["Quality: Premium High Grade", "Type: Indica Dominant Hybrid", "Origin: Indoor cultivation"],
            "my": ["အရည်အသွေး: ပရီမီယံမြင့်မားသောအဆင့်", "မူလ: အိမ်တွင်းစိုက်ပျိုးမှု"],
        },
    },
    {
        "name": {"en": "White Widow Elite", "my": "White Widow အထူး"},
        "description": {
            "en": "Elite strain of White Widow known for its balanced effects and crystal-covered buds.",
            "my": "White Widow ၏ အထူးမျိုးရိုး။",
        },
        "quality": "high",
        "images": [
            "https://images.unsplash.com/photo-1605117882932-f9e32b03fea9?auto=format&fit=crop&w=400&h=700",
        ],
        "specifications": {
            "en": ["Quality: Elite Grade", "Type: Balanced Hybrid"],
            "my": ["အရည်အသွေး: အထူးအဆင့်"],
        },
    },
    {
        "name": {"en": "Blue Dream Standard", "my": "Blue Dream စံ"},
        "description": {
            "en": "Standard quality Blue Dream with balanced effects, suited to any time of day.",
            "my": "Blue Dream စံအရည်အသွေး။",
        },
        "quality": "medium",
        "images": [
            "https://images.unsplash.com/photo-1544966503-7cc5ac882d5f?auto=format&fit=crop&w=400&h=700",
        ],
        "specifications": {
            "en": ["Quality: Standard Grade", "Effect: Versatile"],
            "my": ["အရည်အသွေး: စံအဆင့်"],
        },
    },
]

SAMPLE_CONTACTS = {
    "telegram": "https://t.me/yeyint_cannabis",
    "whatsapp": "https://wa.me/959123456789",
    "messenger": "https://m.me/yeyint.cannabis",
}

SAMPLE_FAQ = [
    {
        "question": {"en": "How do I place an order?", "my": "မှာယူမှုကို ဘယ်လိုလုပ်ရမလဲ?"},
        "answer": {
            "en": "Contact us directly through any of our messaging platforms (Telegram, WhatsApp, or Messenger) with your product inquiry.",
            "my": "ကျွန်ုပ်တို့၏ မက်ဆေ့ချ် ပလပ်ဖောင်းများ (Telegram, WhatsApp, သို့မဟုတ် Messenger) မှတစ်ဆင့် တိုက်ရိုက်ဆက်သွယ်ပါ။",
        },
        "order": 1,
    },
    {
        "question": {"en": "What payment methods do you accept?", "my": "မည်သည့်ငွေပေးချေမှုနည်းလမ်းများကို လက်ခံပါသလဲ?"},
        "answer": {
            "en": "Payment details will be discussed directly with our sales team through your preferred messaging platform.",
            "my": "ငွေပေးချေမှုအသေးစိတ်များကို ကျွန်ုပ်တို့၏ရောင်းချရေးအဖွဲ့နှင့် တိုက်ရိုက်ဆွေးနွေးပါမည်။",
        },
        "order": 2,
    },
    {
        "question": {"en": "How do you ensure product quality?", "my": "ပစ္စည်းများအရည်အသွေးကို ဘယ်လိုအာမခံပါသလဲ?"},
        "answer": {
            "en": "We check every product before it is offered and guarantee customer satisfaction.",
            "my": "ထုတ်ကုန်တိုင်းအတွက် အရည်အသွေးစစ်ဆေးမှုများ ပြုလုပ်ပါသည်။",
        },
        "order": 3,
    },
]


def seed_storage(storage: Storage) -> None:
    """Insert the sample catalog through the public storage operations"""
    for product in SAMPLE_PRODUCTS:
        storage.create_product(ProductCreate.model_validate(product))

    for platform, url in SAMPLE_CONTACTS.items():
        storage.update_contact_info(platform, {"url": url, "is_active": True})

    for item in SAMPLE_FAQ:
        storage.create_faq_item(FaqItemCreate.model_validate(item))

    logger.info(
        f"Seeded {len(SAMPLE_PRODUCTS)} products, {len(SAMPLE_CONTACTS)} contacts, "
        f"{len(SAMPLE_FAQ)} FAQ items"
    )
