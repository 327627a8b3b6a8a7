"""
Document Store Gateway - application layer port.

The only abstraction through which use cases touch the document database:
point reads, queries and atomic multi-document write batches.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


class _ServerTimestamp:
    """Resolved to the commit time when a batch is applied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


class ArrayUnion:
    """Appends each element not already present in the stored array."""

    def __init__(self, *elements: Any):
        self.elements = list(elements)

    def __eq__(self, other) -> bool:
        return isinstance(other, ArrayUnion) and other.elements == self.elements

    def __repr__(self) -> str:
        return f"ArrayUnion({self.elements!r})"


Filter = Tuple[str, str, Any]

FILTER_OPERATORS = ("==", "!=", "in", "array_contains")


@dataclass
class DocumentSnapshot:
    path: str
    id: str
    exists: bool
    data: Dict[str, Any] = field(default_factory=dict)


class WriteBatch(ABC):
    """
    Atomic multi-document write.

    Writes are staged in memory and applied all-or-nothing by ``commit``.
    A batch may be committed only once.
    """

    @abstractmethod
    def set(self, path: str, data: Dict[str, Any]) -> "WriteBatch":
        """Create or overwrite a document"""
        pass

    @abstractmethod
    def update(self, path: str, data: Dict[str, Any]) -> "WriteBatch":
        """Merge fields (dotted paths allowed) into an existing document"""
        pass

    @abstractmethod
    def delete(self, path: str) -> "WriteBatch":
        """Delete a document; deleting a missing document is not an error"""
        pass

    @abstractmethod
    def require(self, path: str, field_name: str, expected: Any) -> "WriteBatch":
        """Fail the whole batch unless the stored field still equals expected"""
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        pass


class DocumentStore(ABC):
    """Transactional key-document store interface"""

    @abstractmethod
    async def get_document(self, path: str) -> DocumentSnapshot:
        pass

    @abstractmethod
    async def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[DocumentSnapshot]:
        pass

    @abstractmethod
    async def count(self, collection: str) -> int:
        pass

    @abstractmethod
    def batch(self) -> WriteBatch:
        pass
