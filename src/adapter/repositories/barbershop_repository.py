from typing import List, Optional

from src.adapter.repositories.normalization import normalize_document
from src.app.repositories.barbershop_repository import IBarbershopRepository
from src.app.services.document_store import DocumentSnapshot, DocumentStore
from src.domain.entities import Barbershop


def to_barbershop(snapshot: DocumentSnapshot) -> Barbershop:
    data = normalize_document(Barbershop.COLLECTION, snapshot.data)
    return Barbershop.model_validate({**data, "id": snapshot.id})


class BarbershopRepository(IBarbershopRepository):
    """Barbershop repository implementation over the document store"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_by_id(self, shop_id: str) -> Optional[Barbershop]:
        """Get barbershop by ID"""
        if not shop_id:
            return None
        snapshot = await self.store.get_document(Barbershop.document_path(shop_id))
        if not snapshot.exists:
            return None
        return to_barbershop(snapshot)

    async def list_all(self) -> List[Barbershop]:
        snapshots = await self.store.query(Barbershop.COLLECTION)
        return [to_barbershop(snapshot) for snapshot in snapshots]

    async def count(self) -> int:
        return await self.store.count(Barbershop.COLLECTION)
