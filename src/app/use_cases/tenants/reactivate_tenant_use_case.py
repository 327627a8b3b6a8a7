"""
Use Case: Reactivate Tenant

Inverse of suspension: tenant, barbershop and owner become active again.
"""

import logging

from libs.result import Error, Result, Return
from src.app.errors import PreconditionFailedError
from src.app.services.transitions import stage_shop_activation, stage_transition
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import OperatorContext, Tenant
from src.domain.lifecycle import TenantLifecycle

from .dtos import TenantTransitionResponse

logger = logging.getLogger(__name__)


class ReactivateTenantUseCase:
    def __init__(self, uow: UnitOfWork, lifecycle: TenantLifecycle = None):
        self.uow = uow
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, tenant: Tenant, note: str = ""
    ) -> Result[TenantTransitionResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        planned = self.lifecycle.reactivate(tenant, note)
        if planned.is_err():
            return planned
        plan = planned.value

        async with self.uow:
            batch = self.uow.batch()
            stage_transition(batch, tenant, plan)

            if tenant.shop_id:
                shop = await self.uow.barbershops.get_by_id(tenant.shop_id)
                if shop is not None:
                    owner = await self.uow.users.get_by_id(shop.admin_uid)
                    stage_shop_activation(batch, shop, owner, is_active=True)

            try:
                await batch.commit()
            except PreconditionFailedError:
                return Return.err(
                    Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                )

        logger.info("Tenant %s reactivated by %s", tenant.id, operator.uid)
        return Return.ok(
            TenantTransitionResponse(
                tenant_id=tenant.id, status=plan.to_status.value, shop_id=tenant.shop_id
            )
        )
