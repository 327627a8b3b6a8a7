from typing import List, Optional

from src.adapter.repositories.normalization import normalize_document
from src.app.repositories.user_repository import IUserRepository
from src.app.services.document_store import DocumentSnapshot, DocumentStore
from src.domain.entities import User


def to_user(snapshot: DocumentSnapshot) -> User:
    data = normalize_document(User.COLLECTION, snapshot.data)
    return User.model_validate({**data, "id": snapshot.id})


class UserRepository(IUserRepository):
    """User repository implementation over the document store"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID (auth identity uid)"""
        if not user_id:
            return None
        snapshot = await self.store.get_document(User.document_path(user_id))
        if not snapshot.exists:
            return None
        return to_user(snapshot)

    async def list_visible(self) -> List[User]:
        """List users not marked as deleted"""
        snapshots = await self.store.query(User.COLLECTION)
        users = [to_user(snapshot) for snapshot in snapshots]
        return [user for user in users if not user.is_deleted]

    async def count(self) -> int:
        return await self.store.count(User.COLLECTION)
