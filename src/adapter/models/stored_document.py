"""
StoredDocument Entity

One row per document of the schemaless document store.
"""

from datetime import datetime, UTC

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class StoredDocument(SQLModel, table=True):
    """
    StoredDocument - a JSON document addressed by its slash-separated path.

    Business Rules:
    - path is "<collection>/<doc_id>", collection may itself be nested
      ("tenants/abc/documents")
    - data holds JSON-compatible values only; timestamps are ISO strings
    - rows are only written through a write batch
    """

    __tablename__ = "documents"

    path: str = Field(primary_key=True, max_length=512)
    collection: str = Field(max_length=400)
    doc_id: str = Field(max_length=128)
    data: dict = Field(default_factory=dict, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (Index("idx_documents_collection", "collection"),)
