"""
Use Case: List Registrations

Pending-review applications for the approval inbox, newest first.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc
from src.domain.lifecycle import SUBMITTED_STATUSES

from .dtos import TenantListResponse, summarize_tenant


class ListRegistrationsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[TenantListResponse]:
        async with self.uow:
            tenants = await self.uow.tenants.list_by_statuses(SUBMITTED_STATUSES)

        tenants.sort(key=lambda t: as_utc(t.created_at), reverse=True)
        items = [summarize_tenant(t) for t in tenants]
        return Return.ok(TenantListResponse(items=items, total=len(items)))
