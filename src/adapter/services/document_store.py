"""
SQL-backed document store.

Documents are JSON rows in a single table; a WriteBatch applies all its
writes in one database transaction so a batch is all-or-nothing.
"""

import copy
import logging
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic_core import to_jsonable_python
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.models.stored_document import StoredDocument
from src.app.errors import DocumentNotFoundError, DocumentStoreError, PreconditionFailedError
from src.app.services.document_store import (
    ArrayUnion,
    DocumentSnapshot,
    DocumentStore,
    FILTER_OPERATORS,
    Filter,
    SERVER_TIMESTAMP,
    WriteBatch,
)
from src.domain.base import get_field_path, set_field_path

logger = logging.getLogger(__name__)


def split_path(path: str) -> Tuple[str, str]:
    """Split "<collection>/<id>" into its parts"""
    segments = path.strip("/").split("/")
    if len(segments) < 2 or len(segments) % 2 != 0 or not all(segments):
        raise ValueError(f"Invalid document path: {path!r}")
    return "/".join(segments[:-1]), segments[-1]


def _resolve(value: Any, current: Any, now: datetime) -> Any:
    """Replace write sentinels with concrete, JSON-compatible values"""
    if value is SERVER_TIMESTAMP:
        return now.isoformat()
    if isinstance(value, ArrayUnion):
        merged = list(current) if isinstance(current, list) else []
        for element in to_jsonable_python(value.elements):
            if element not in merged:
                merged.append(element)
        return merged
    if isinstance(value, dict):
        existing = current if isinstance(current, dict) else {}
        return {key: _resolve(item, existing.get(key), now) for key, item in value.items()}
    return to_jsonable_python(value)


def _matches(data: Dict[str, Any], filters: Sequence[Filter]) -> bool:
    for field_path, op, expected in filters:
        actual = get_field_path(data, field_path)
        if op == "==" and actual != expected:
            return False
        if op == "!=" and actual == expected:
            return False
        if op == "in" and actual not in expected:
            return False
        if op == "array_contains" and (not isinstance(actual, list) or expected not in actual):
            return False
    return True


def _snapshot(row: StoredDocument) -> DocumentSnapshot:
    return DocumentSnapshot(path=row.path, id=row.doc_id, exists=True, data=copy.deepcopy(row.data))


class SqlAlchemyWriteBatch(WriteBatch):
    """WriteBatch applied inside one SQLAlchemy transaction"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._writes: List[Tuple[str, str, Optional[Dict[str, Any]]]] = []
        self._preconditions: List[Tuple[str, str, Any]] = []
        self._committed = False

    def set(self, path: str, data: Dict[str, Any]) -> "SqlAlchemyWriteBatch":
        split_path(path)
        self._writes.append(("set", path, dict(data)))
        return self

    def update(self, path: str, data: Dict[str, Any]) -> "SqlAlchemyWriteBatch":
        split_path(path)
        self._writes.append(("update", path, dict(data)))
        return self

    def delete(self, path: str) -> "SqlAlchemyWriteBatch":
        split_path(path)
        self._writes.append(("delete", path, None))
        return self

    def require(self, path: str, field_name: str, expected: Any) -> "SqlAlchemyWriteBatch":
        split_path(path)
        self._preconditions.append((path, field_name, to_jsonable_python(expected)))
        return self

    @property
    def size(self) -> int:
        return len(self._writes)

    async def _load(self, path: str) -> Optional[StoredDocument]:
        stmt = (
            select(StoredDocument)
            .where(StoredDocument.path == path)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def commit(self) -> None:
        if self._committed:
            raise DocumentStoreError("Write batch already committed")
        self._committed = True

        now = datetime.now(UTC)
        rows: Dict[str, Optional[StoredDocument]] = {}

        async def row_for(path: str) -> Optional[StoredDocument]:
            if path not in rows:
                rows[path] = await self._load(path)
            return rows[path]

        try:
            for path, field_name, expected in self._preconditions:
                row = await row_for(path)
                actual = get_field_path(row.data, field_name) if row else None
                if actual != expected:
                    raise PreconditionFailedError(path, field_name, expected, actual)

            for op, path, data in self._writes:
                row = await row_for(path)
                if op == "set":
                    resolved = _resolve(data, None, now)
                    if row is None:
                        collection, doc_id = split_path(path)
                        row = StoredDocument(
                            path=path, collection=collection, doc_id=doc_id, data=resolved
                        )
                        rows[path] = row
                    else:
                        row.data = resolved
                        row.updated_at = now
                    self.session.add(row)
                elif op == "update":
                    if row is None:
                        raise DocumentNotFoundError(path)
                    merged = copy.deepcopy(row.data)
                    for field_path, value in data.items():
                        current = get_field_path(merged, field_path)
                        set_field_path(merged, field_path, _resolve(value, current, now))
                    row.data = merged
                    row.updated_at = now
                    self.session.add(row)
                elif row is not None:
                    await self.session.delete(row)
                    rows[path] = None

            await self.session.commit()
        except DocumentStoreError:
            await self.session.rollback()
            raise
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("Write batch failed: %s", exc)
            raise DocumentStoreError(f"Write batch failed: {exc}") from exc


class SqlAlchemyDocumentStore(DocumentStore):
    """DocumentStore implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_document(self, path: str) -> DocumentSnapshot:
        _, doc_id = split_path(path)
        try:
            row = await self.session.get(StoredDocument, path)
        except SQLAlchemyError as exc:
            raise DocumentStoreError(f"Read failed for {path}: {exc}") from exc
        if row is None:
            return DocumentSnapshot(path=path, id=doc_id, exists=False)
        return _snapshot(row)

    async def query(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[DocumentSnapshot]:
        for _, op, _ in filters:
            if op not in FILTER_OPERATORS:
                raise ValueError(f"Unsupported filter operator: {op}")

        stmt = select(StoredDocument).where(StoredDocument.collection == collection)
        try:
            result = await self.session.exec(stmt)
            rows = result.all()
        except SQLAlchemyError as exc:
            raise DocumentStoreError(f"Query failed on {collection}: {exc}") from exc

        snapshots = [_snapshot(row) for row in rows if _matches(row.data, filters)]
        if order_by:
            def sort_key(snapshot: DocumentSnapshot):
                value = get_field_path(snapshot.data, order_by)
                return (value is None, value)

            snapshots.sort(key=sort_key, reverse=descending)
        if limit is not None:
            snapshots = snapshots[:limit]
        return snapshots

    async def count(self, collection: str) -> int:
        stmt = (
            select(func.count())
            .select_from(StoredDocument)
            .where(StoredDocument.collection == collection)
        )
        try:
            result = await self.session.exec(stmt)
        except SQLAlchemyError as exc:
            raise DocumentStoreError(f"Count failed on {collection}: {exc}") from exc
        return result.one()

    def batch(self) -> SqlAlchemyWriteBatch:
        return SqlAlchemyWriteBatch(self.session)
