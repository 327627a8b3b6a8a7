"""In-memory WriteBatch that records staged writes for assertions."""

from typing import Any, Dict, List, Optional, Tuple

from src.app.services.document_store import WriteBatch


class RecordingBatch(WriteBatch):
    def __init__(self, commit_error: Optional[Exception] = None):
        self.writes: List[Tuple[str, str, Optional[Dict[str, Any]]]] = []
        self.preconditions: List[Tuple[str, str, Any]] = []
        self.commit_error = commit_error
        self.commit_calls = 0

    def set(self, path: str, data: Dict[str, Any]) -> "RecordingBatch":
        self.writes.append(("set", path, data))
        return self

    def update(self, path: str, data: Dict[str, Any]) -> "RecordingBatch":
        self.writes.append(("update", path, data))
        return self

    def delete(self, path: str) -> "RecordingBatch":
        self.writes.append(("delete", path, None))
        return self

    def require(self, path: str, field_name: str, expected: Any) -> "RecordingBatch":
        self.preconditions.append((path, field_name, expected))
        return self

    @property
    def size(self) -> int:
        return len(self.writes)

    @property
    def committed(self) -> bool:
        return self.commit_calls > 0 and self.commit_error is None

    async def commit(self) -> None:
        self.commit_calls += 1
        if self.commit_error is not None:
            raise self.commit_error

    def paths(self, op: Optional[str] = None) -> List[str]:
        return [path for kind, path, _ in self.writes if op is None or kind == op]

    def data_for(self, path: str) -> Dict[str, Any]:
        for _, written, data in self.writes:
            if written == path:
                return data
        raise KeyError(path)
