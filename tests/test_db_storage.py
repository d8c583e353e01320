"""
Tests specific to the database backend: engine failures, unique
constraints and the upsert race fallback.
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from catalog.core.database import Base
from catalog.schemas.product import ProductCreate
from catalog.schemas.user import UserCreate
from catalog.storage import DbStorage


@pytest.fixture
def product_payload(sample_product_data):
    return ProductCreate.model_validate(sample_product_data)


class TestUniqueness:

    def test_duplicate_username_raises(self, db_storage):
        db_storage.create_user(UserCreate(username="admin", password="a"))

        with pytest.raises(IntegrityError):
            db_storage.create_user(UserCreate(username="admin", password="b"))

    def test_memory_backend_admits_duplicate_usernames(self, memory_storage):
        first = memory_storage.create_user(UserCreate(username="admin", password="a"))
        second = memory_storage.create_user(UserCreate(username="admin", password="b"))

        assert first.id != second.id
        assert memory_storage.get_user_by_username("admin").id == first.id


class TestEngineFailures:

    def test_delete_reports_failure_as_false(self, db_storage, db_engine, product_payload):
        product = db_storage.create_product(product_payload)
        Base.metadata.drop_all(bind=db_engine)

        assert db_storage.delete_product(product.id) is False
        assert db_storage.delete_faq_item("anything") is False

    def test_other_operations_propagate(self, db_storage, db_engine, product_payload):
        Base.metadata.drop_all(bind=db_engine)

        with pytest.raises(OperationalError):
            db_storage.get_products()
        with pytest.raises(OperationalError):
            db_storage.create_product(product_payload)
        with pytest.raises(OperationalError):
            db_storage.update_contact_info("telegram", {"url": "https://t.me/x"})


class TestUpsertRace:

    def test_insert_conflict_falls_back_to_update(self, db_storage, monkeypatch):
        created = db_storage.update_contact_info("telegram", {"url": "https://t.me/first"})

        # The first lookup misses the row, as if another writer inserted it
        # between our lookup and our insert.
        original = DbStorage._find_by_key
        calls = []

        def stale_find(db, column, value):
            calls.append(value)
            if len(calls) == 1:
                return None
            return original(db, column, value)

        monkeypatch.setattr(DbStorage, "_find_by_key", staticmethod(stale_find))
        contact = db_storage.update_contact_info("telegram", {"url": "https://t.me/second"})
        monkeypatch.undo()

        assert len(calls) == 2
        assert contact.id == created.id
        assert contact.url == "https://t.me/second"
        assert len(db_storage.get_all_contact_info()) == 1

    def test_site_content_section_is_unique(self, db_storage, monkeypatch):
        db_storage.update_site_content("about", {"en": "v1", "my": "v1"})

        original = DbStorage._find_by_key
        calls = []

        def stale_find(db, column, value):
            calls.append(value)
            return None if len(calls) == 1 else original(db, column, value)

        monkeypatch.setattr(DbStorage, "_find_by_key", staticmethod(stale_find))
        section = db_storage.update_site_content("about", {"en": "v2", "my": "v2"})
        monkeypatch.undo()

        assert section.content == {"en": "v2", "my": "v2"}
        assert len(db_storage.get_site_content()) == 1


def test_state_survives_new_storage_instance(db_engine, db_storage, product_payload):
    from catalog.core.database import build_session_factory

    product = db_storage.create_product(product_payload)

    reopened = DbStorage(build_session_factory(db_engine))

    assert reopened.get_product(product.id) == product


def test_count_products_includes_inactive(db_storage, product_payload):
    assert db_storage.count_products() == 0

    product = db_storage.create_product(product_payload)
    db_storage.update_product(product.id, {"isActive": False})

    assert db_storage.get_products() == []
    assert db_storage.count_products() == 1
