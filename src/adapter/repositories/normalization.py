"""
Read-side cleanup of documents written by older clients.

Older registrations stored misspelled keys, explicit nulls for unset fields
and timestamps as epoch numbers or {"seconds", "nanoseconds"} maps; entities
expect canonical field names, absent optional fields and datetimes.
"""

from datetime import datetime, UTC
from typing import Any, Dict

LEGACY_FIELD_NAMES: Dict[str, Dict[str, str]] = {
    "tenants": {"adress": "address"},
    "barbershops": {"adress": "address"},
    "users": {"is_suspended": "isSuspended", "is_deleted": "isDeleted"},
}

TIMESTAMP_FIELDS = frozenset(
    {
        "created_at",
        "createdAt",
        "updated_at",
        "paidAt",
        "requested_at",
        "completed_at",
        "payment_deadline",
    }
)

# Epoch values above this are milliseconds (year 5138 in seconds)
_MILLIS_THRESHOLD = 10**11


def normalize_timestamp(value: Any) -> Any:
    """Convert epoch numbers and timestamp maps to aware datetimes"""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        seconds = value / 1000 if abs(value) >= _MILLIS_THRESHOLD else value
        return datetime.fromtimestamp(seconds, UTC)
    if isinstance(value, dict):
        seconds = value.get("seconds", value.get("_seconds"))
        if isinstance(seconds, (int, float)):
            nanos = value.get("nanoseconds", value.get("_nanoseconds")) or 0
            return datetime.fromtimestamp(seconds + nanos / 1e9, UTC)
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _normalize_values(data: Any) -> Any:
    """Normalize timestamps and drop null map entries so entity defaults apply"""
    if isinstance(data, list):
        return [_normalize_values(item) for item in data]
    if not isinstance(data, dict):
        return data
    normalized = {}
    for key, value in data.items():
        if value is None:
            continue
        if key in TIMESTAMP_FIELDS:
            normalized[key] = normalize_timestamp(value)
        else:
            normalized[key] = _normalize_values(value)
    return normalized


def normalize_document(collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of data with canonical field names, no nulls and datetimes"""
    normalized = dict(data)
    for legacy, canonical in LEGACY_FIELD_NAMES.get(collection, {}).items():
        if legacy in normalized:
            value = normalized.pop(legacy)
            if normalized.get(canonical) in (None, ""):
                normalized[canonical] = value
    return _normalize_values(normalized)
