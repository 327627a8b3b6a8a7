from typing import List

from src.adapter.repositories.normalization import normalize_document
from src.app.repositories.review_repository import IReviewRepository
from src.app.services.document_store import DocumentStore
from src.domain.base import as_utc
from src.domain.entities import AppRating


class ReviewRepository(IReviewRepository):
    """App rating repository implementation over the document store"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_newest_first(self) -> List[AppRating]:
        snapshots = await self.store.query(AppRating.COLLECTION)
        ratings = [
            AppRating.model_validate(
                {**normalize_document(AppRating.COLLECTION, snapshot.data), "id": snapshot.id}
            )
            for snapshot in snapshots
        ]
        # createdAt mixes legacy formats, so order after normalizing
        ratings.sort(key=lambda rating: as_utc(rating.created_at), reverse=True)
        return ratings
