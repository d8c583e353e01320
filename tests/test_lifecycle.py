"""
Tests for the shared entity lifecycle rules.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from catalog.schemas.common import QualityTier
from catalog.schemas.contact import ContactInfoUpdate
from catalog.schemas.faq import FaqItemUpdate
from catalog.schemas.product import ProductUpdate
from catalog.storage import lifecycle


class TestClock:

    def test_now_strictly_increases(self):
        stamps = [lifecycle.now() for _ in range(1000)]
        assert all(later > earlier for earlier, later in zip(stamps, stamps[1:]))

    def test_now_is_naive(self):
        assert lifecycle.now().tzinfo is None

    def test_touch_passes_a_future_previous_value(self):
        previous = lifecycle.now() + timedelta(seconds=30)
        assert lifecycle.touch(previous) > previous

    def test_touch_without_previous(self):
        assert lifecycle.touch(None) is not None


def test_new_id_is_unique():
    assert len({lifecycle.new_id() for _ in range(100)}) == 100


class TestDefaults:

    def test_fills_missing_and_none(self):
        values = lifecycle.with_defaults({"images": None}, lifecycle.PRODUCT_DEFAULTS)

        assert values["images"] == []
        assert values["videos"] == []
        assert values["specifications"] == {"en": [], "my": []}
        assert values["is_active"] is True

    def test_keeps_falsy_values(self):
        values = lifecycle.with_defaults({"is_active": False, "order": 0}, lifecycle.FAQ_DEFAULTS)

        assert values["is_active"] is False
        assert values["order"] == 0

    def test_defaults_are_copied(self):
        first = lifecycle.with_defaults({}, lifecycle.PRODUCT_DEFAULTS)
        first["images"].append("a.jpg")
        first["specifications"]["en"].append("x")

        second = lifecycle.with_defaults({}, lifecycle.PRODUCT_DEFAULTS)

        assert second["images"] == []
        assert second["specifications"] == {"en": [], "my": []}
        assert lifecycle.PRODUCT_DEFAULTS["images"] == []


class TestChanges:

    def test_drops_unknown_and_immutable_fields(self):
        changes = lifecycle.to_changes(
            {"id": "x", "created_at": "2020-01-01", "bogus": 1, "is_active": False},
            ProductUpdate,
        )
        assert changes == {"is_active": False}

    def test_none_is_absent_except_for_nullable_fields(self):
        assert lifecycle.to_changes({"url": None}, ContactInfoUpdate) == {}
        assert lifecycle.to_changes({"qr_code": None}, ContactInfoUpdate) == {"qr_code": None}

    def test_schema_payload_only_includes_set_fields(self):
        assert lifecycle.to_changes(ProductUpdate(is_active=False), ProductUpdate) == {"is_active": False}
        assert lifecycle.to_changes(ContactInfoUpdate(), ContactInfoUpdate) == {}
        assert lifecycle.to_changes(ContactInfoUpdate(qr_code=None), ContactInfoUpdate) == {"qr_code": None}

    def test_camel_case_payload_is_normalised(self):
        update = ProductUpdate.model_validate({"isActive": True, "specifications": {"en": ["a"]}})

        assert lifecycle.to_changes(update, ProductUpdate) == {
            "is_active": True,
            "specifications": {"en": ["a"], "my": []},
        }

    def test_camel_case_mapping_is_normalised(self):
        assert lifecycle.to_changes({"isActive": False}, ContactInfoUpdate) == {"is_active": False}
        assert lifecycle.to_changes({"qrCode": None}, ContactInfoUpdate) == {"qr_code": None}
        assert lifecycle.to_changes({"isActive": True, "order": 3}, FaqItemUpdate) == {"is_active": True, "order": 3}

    def test_invalid_mapping_raises(self):
        with pytest.raises(ValidationError):
            lifecycle.to_changes({"quality": "ultra"}, ProductUpdate)
        with pytest.raises(ValidationError):
            lifecycle.to_changes({"order": "first"}, FaqItemUpdate)

    def test_enums_become_plain_values(self):
        changes = lifecycle.to_changes({"quality": QualityTier.LOW}, ProductUpdate)

        assert changes == {"quality": "low"}
        assert type(changes["quality"]) is str
