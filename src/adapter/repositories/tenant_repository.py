import logging
from typing import Iterable, List, Optional

from src.adapter.repositories.normalization import normalize_document
from src.app.repositories.tenant_repository import ITenantRepository
from src.app.services.document_store import DocumentSnapshot, DocumentStore
from src.domain.entities import Tenant, TenantStatus

logger = logging.getLogger(__name__)


def to_tenant(snapshot: DocumentSnapshot) -> Tenant:
    data = normalize_document(Tenant.COLLECTION, snapshot.data)
    return Tenant.model_validate({**data, "id": snapshot.id})


class TenantRepository(ITenantRepository):
    """Tenant repository implementation over the document store"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_by_id(self, tenant_id: str) -> Optional[Tenant]:
        """Get tenant by ID"""
        if not tenant_id:
            return None
        snapshot = await self.store.get_document(Tenant.document_path(tenant_id))
        if not snapshot.exists:
            return None
        return to_tenant(snapshot)

    async def list_by_statuses(self, statuses: Iterable[TenantStatus]) -> List[Tenant]:
        """List tenants whose status is one of statuses"""
        values = [TenantStatus(status).value for status in statuses]
        snapshots = await self.store.query(Tenant.COLLECTION, [("status", "in", values)])
        return [to_tenant(snapshot) for snapshot in snapshots]

    async def list_by_shop_id(self, shop_id: str) -> List[Tenant]:
        """List tenants provisioned with the given barbershop"""
        snapshots = await self.store.query(Tenant.COLLECTION, [("shop_id", "==", shop_id)])
        return [to_tenant(snapshot) for snapshot in snapshots]

    async def get_document_content(self, path: str) -> Optional[str]:
        """Get the base64 content stored at a document reference"""
        try:
            snapshot = await self.store.get_document(path.strip("/"))
        except ValueError:
            logger.warning("Malformed document reference %r", path)
            return None
        if not snapshot.exists:
            return None
        return snapshot.data.get("content_base64") or None
