#!/usr/bin/env python3
"""
Seed the configured database with the sample catalog.

Usage:
    DATABASE_URL=postgresql://... python scripts/seed_db.py

Does nothing when the database already holds products.
"""

import logging
import sys
import os

# Add the project root to the import path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

try:
    from catalog.core.config import settings
    from catalog.core.logger import setup_logging
    from catalog.storage import create_storage
    from catalog.storage.seed import seed_storage
except ImportError as e:
    print("Failed to import the project; run from the project root with dependencies installed.")
    print(f"   Error: {e}")
    sys.exit(1)

logger = logging.getLogger("catalog.scripts.seed_db")


def main() -> int:
    setup_logging()

    if not settings.use_database:
        logger.error("DATABASE_URL is not set; nothing to seed")
        return 1

    storage = create_storage(settings)
    if storage.count_products():
        logger.info("Database already has products, skipping seed")
        return 0

    seed_storage(storage)
    logger.info("Database seeded successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
