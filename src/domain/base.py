import secrets
import string
from datetime import UTC, datetime
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict

DOCUMENT_ID_ALPHABET = string.ascii_letters + string.digits
DOCUMENT_ID_LENGTH = 20


def generate_document_id() -> str:
    return "".join(secrets.choice(DOCUMENT_ID_ALPHABET) for _ in range(DOCUMENT_ID_LENGTH))


class DocumentModel(BaseModel):
    """
    Base for every entity persisted as a schemaless document.

    Field aliases carry the stored (wire) names shared with the mobile apps,
    attributes use Python names. Unknown stored fields are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    COLLECTION: ClassVar[str] = ""

    @classmethod
    def document_path(cls, document_id: str) -> str:
        return f"{cls.COLLECTION}/{document_id}"

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude={"id"})


def set_field_path(data: Dict[str, Any], path: str, value: Any) -> None:
    """Assign ``value`` at a dotted path, creating intermediate maps."""
    keys = path.split(".")
    target = data
    for key in keys[:-1]:
        child = target.get(key)
        if not isinstance(child, dict):
            child = {}
            target[key] = child
        target = child
    target[keys[-1]] = value


def as_utc(value: Optional[datetime]) -> datetime:
    """Aware UTC datetime for ordering; missing values sort as the epoch."""
    if value is None:
        return datetime.fromtimestamp(0, UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def get_field_path(data: Optional[Dict[str, Any]], path: str) -> Any:
    """Read the value at a dotted path, or None when any segment is missing."""
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
