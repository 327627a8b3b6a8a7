"""
Use Case: List Refund Requests

Tenants waiting for a cancellation refund, most recent request first.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc
from src.domain.entities import TenantStatus

from .dtos import TenantListResponse, summarize_tenant


def _requested_at(tenant):
    request = tenant.cancellation_request
    return as_utc(request.requested_at if request else None)


class ListRefundRequestsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[TenantListResponse]:
        async with self.uow:
            tenants = await self.uow.tenants.list_by_statuses(
                [TenantStatus.cancellation_requested]
            )

        tenants.sort(key=_requested_at, reverse=True)
        items = [summarize_tenant(t) for t in tenants]
        return Return.ok(TenantListResponse(items=items, total=len(items)))
