"""
Use Case: Dashboard Stats

Counts and subscription revenue shown on the operator dashboard.
"""

from typing import Iterable

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenants.dtos import summarize_tenant
from src.domain.base import as_utc
from src.domain.entities import Tenant, TenantStatus, VerificationStatus
from src.domain.lifecycle import SUBMITTED_STATUSES

from .dtos import DashboardStatsResponse

RECENT_TENANTS_LIMIT = 5


def format_idr(amount: float) -> str:
    """Format as Indonesian rupiah without decimals, e.g. Rp 1.500.000"""
    return "Rp " + f"{amount:,.0f}".replace(",", ".")


def _awaits_decision(tenant: Tenant) -> bool:
    if tenant.has_payment_proof:
        return True
    if tenant.payment and tenant.payment.verification_status == VerificationStatus.pending:
        return True
    return tenant.status in (TenantStatus.waiting_proof, TenantStatus.payment_submitted)


def _revenue(tenants: Iterable[Tenant]) -> float:
    return sum(tenant.revenue_amount for tenant in tenants)


class GetDashboardStatsUseCase:
    """
    Business Logic:
    1. Count barbershops and users
    2. Pending: tenants in a pending status that have a proof, a pending
       verification, or status waiting_proof / payment_submitted
    3. Revenue: sum over active tenants of invoice amount, else
       registration fee, else 0
    4. Five most recent pending tenants
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DashboardStatsResponse]:
        async with self.uow:
            shop_count = await self.uow.barbershops.count()
            user_count = await self.uow.users.count()
            pending = await self.uow.tenants.list_by_statuses(SUBMITTED_STATUSES)
            active = await self.uow.tenants.list_by_statuses([TenantStatus.active])

        waiting = [t for t in pending if _awaits_decision(t)]
        recent = sorted(pending, key=lambda t: as_utc(t.created_at), reverse=True)
        amount = _revenue(active)

        return Return.ok(
            DashboardStatsResponse(
                active_tenants=shop_count,
                waiting_approval=len(waiting),
                total_users=user_count,
                revenue=format_idr(amount),
                revenue_amount=amount,
                transactions=len(active),
                recent_tenants=[summarize_tenant(t) for t in recent[:RECENT_TENANTS_LIMIT]],
            )
        )
