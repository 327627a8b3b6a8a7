from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from src.domain.entities import Tenant, TenantStatus


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: str) -> Optional[Tenant]:
        """Get tenant by ID"""
        pass

    @abstractmethod
    async def list_by_statuses(self, statuses: Iterable[TenantStatus]) -> List[Tenant]:
        """List tenants whose status is one of statuses"""
        pass

    @abstractmethod
    async def list_by_shop_id(self, shop_id: str) -> List[Tenant]:
        """List tenants provisioned with the given barbershop"""
        pass

    @abstractmethod
    async def get_document_content(self, path: str) -> Optional[str]:
        """Get the base64 content of an uploaded legal document"""
        pass
