"""
Storage layer - one interface, two interchangeable backends.

The backend is picked once at startup from DATABASE_URL and handed to the
application explicitly.
"""
import logging

from catalog.core.config import Settings
from catalog.storage.base import Storage, QUALITY_ALL
from catalog.storage.memory import MemStorage
from catalog.storage.database import DbStorage

logger = logging.getLogger(__name__)

__all__ = ["Storage", "MemStorage", "DbStorage", "QUALITY_ALL", "create_storage"]


def create_storage(settings: Settings) -> Storage:
    """Persistent storage when DATABASE_URL is configured, in-memory otherwise"""
    if settings.use_database:
        from catalog.core.database import build_engine, build_session_factory, init_db

        engine = build_engine(settings.DATABASE_URL)
        init_db(engine)
        logger.info(f"Using database storage ({engine.url.render_as_string(hide_password=True)})")
        return DbStorage(build_session_factory(engine))

    logger.info("DATABASE_URL not set, using in-memory storage")
    return MemStorage(seed=settings.SEED_SAMPLE_DATA)
