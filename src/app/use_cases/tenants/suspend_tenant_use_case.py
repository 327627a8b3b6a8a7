"""
Use Case: Suspend Tenant

Suspends an active tenant and, in the same batch, deactivates its
barbershop and suspends the shop owner.
"""

import logging

from libs.result import Error, Result, Return
from src.app.errors import PreconditionFailedError
from src.app.services.transitions import (
    stage_notification,
    stage_shop_activation,
    stage_transition,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import OperatorContext, Tenant
from src.domain.lifecycle import TenantLifecycle

from .dtos import TenantTransitionResponse

logger = logging.getLogger(__name__)


class SuspendTenantUseCase:
    """
    Suspend an active tenant.

    Business Logic:
    1. Validate status is active and a reason is given
    2. Tenant -> suspended with history entry
    3. Linked barbershop -> inactive and closed
    4. Shop owner -> suspended
    5. Notify the applicant
    6. Commit as one batch

    Invariant kept: shop inactive <=> owner suspended <=> tenant suspended
    """

    def __init__(self, uow: UnitOfWork, lifecycle: TenantLifecycle = None):
        self.uow = uow
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, tenant: Tenant, reason: str
    ) -> Result[TenantTransitionResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        planned = self.lifecycle.suspend(tenant, reason)
        if planned.is_err():
            return planned
        plan = planned.value

        async with self.uow:
            batch = self.uow.batch()
            stage_transition(batch, tenant, plan)

            if tenant.shop_id:
                shop = await self.uow.barbershops.get_by_id(tenant.shop_id)
                if shop is None:
                    logger.warning(
                        "Tenant %s references missing barbershop %s", tenant.id, tenant.shop_id
                    )
                else:
                    owner = await self.uow.users.get_by_id(shop.admin_uid)
                    stage_shop_activation(batch, shop, owner, is_active=False)

            stage_notification(
                batch,
                self.uow.new_id(),
                user_id=tenant.owner_uid,
                title="Langganan Ditangguhkan",
                body=(
                    f'Barbershop "{tenant.business_name}" ditangguhkan.\n'
                    f"Alasan: {reason.strip()}"
                ),
            )
            try:
                await batch.commit()
            except PreconditionFailedError:
                return Return.err(
                    Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                )

        logger.info("Tenant %s suspended by %s", tenant.id, operator.uid)
        return Return.ok(
            TenantTransitionResponse(
                tenant_id=tenant.id, status=plan.to_status.value, shop_id=tenant.shop_id
            )
        )
