"""
Entity lifecycle rules shared by every storage backend.

Identifiers and timestamps are assigned here, never by callers. Timestamps are
naive UTC and strictly increasing within the process, so `created_at` orders
inserts and `updated_at` advances on every mutation.
"""
import copy
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel


TICK = timedelta(microseconds=1)

PRODUCT_DEFAULTS: Dict[str, Any] = {
    "images": [],
    "videos": [],
    "specifications": {"en": [], "my": []},
    "is_active": True,
}

FAQ_DEFAULTS: Dict[str, Any] = {
    "order": 0,
    "is_active": True,
}

CONTACT_DEFAULTS: Dict[str, Any] = {
    "url": "",
    "qr_code": None,
    "is_active": True,
}

# Columns that may legitimately be set to null
NULLABLE_FIELDS = frozenset({"qr_code"})

_clock_lock = threading.Lock()
_last_issued: Optional[datetime] = None


def new_id() -> str:
    return str(uuid.uuid4())


def now() -> datetime:
    """Current naive-UTC time, strictly later than any value issued before."""
    global _last_issued
    with _clock_lock:
        current = datetime.now(timezone.utc).replace(tzinfo=None)
        if _last_issued is not None and current <= _last_issued:
            current = _last_issued + TICK
        _last_issued = current
        return current


def touch(previous: Optional[datetime]) -> datetime:
    """A fresh `updated_at` that is strictly later than `previous`."""
    current = now()
    if previous is not None:
        previous = previous.replace(tzinfo=None)
        if current <= previous:
            current = previous + TICK
    return current


def with_defaults(values: Mapping[str, Any], defaults: Mapping[str, Any]) -> Dict[str, Any]:
    """Fill omitted or None fields from a deep copy of `defaults`."""
    merged = dict(values)
    for key, default in defaults.items():
        if merged.get(key) is None and not (key in NULLABLE_FIELDS and key in merged):
            merged[key] = copy.deepcopy(default)
    return merged


def dump(payload: Union[BaseModel, Mapping[str, Any]], exclude_unset: bool = False) -> Dict[str, Any]:
    """Plain JSON-compatible dict with snake_case keys."""
    if isinstance(payload, BaseModel):
        values = payload.model_dump(mode="json")
        if exclude_unset:
            # Top level only: a nested bilingual value is always stored whole
            values = {key: value for key, value in values.items() if key in payload.model_fields_set}
        return values
    return {key: _plain(value) for key, value in payload.items()}


def to_changes(payload: Union[BaseModel, Mapping[str, Any]], schema: Type[BaseModel]) -> Dict[str, Any]:
    """
    Normalise a sparse update to the mutable fields it actually sets.

    A mapping is validated against `schema` first, so either key spelling is
    accepted and bad values raise `ValidationError` before anything is written.
    Keys outside `schema` (id, created_at) are dropped. Absent fields are
    preserved by the caller. An explicit None only clears nullable columns;
    elsewhere it is treated as absent. List-valued fields are replaced whole.
    """
    if not isinstance(payload, schema):
        values = dict(payload) if isinstance(payload, Mapping) else payload.model_dump(exclude_unset=True)
        payload = schema.model_validate(values)
    changes = {}
    for key, value in dump(payload, exclude_unset=True).items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        changes[key] = value
    return changes



def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (str, int, float, bool)) or value is None:
        # str-based enums collapse to their value
        return getattr(value, "value", value)
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
