"""
Use Case: Toggle Barbershop Status

Activates or deactivates a barbershop together with its owner account and
its tenant subscription.
"""

import logging

from libs.result import Error, Result, Return
from src.app.errors import PreconditionFailedError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import OperatorContext
from src.domain.lifecycle import TenantLifecycle

from .dtos import BarbershopStatusResponse
from .shop_status import stage_shop_status

logger = logging.getLogger(__name__)


class ToggleBarbershopStatusUseCase:
    """
    Business Logic:
    1. Load barbershop (BARBERSHOP_NOT_FOUND otherwise)
    2. Set isActive; deactivation also closes the shop
    3. Set owner isSuspended to the inverse of isActive
    4. Suspend / reactivate linked tenants with history entries
    5. Commit as one batch
    """

    def __init__(self, uow: UnitOfWork, lifecycle: TenantLifecycle = None):
        self.uow = uow
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, shop_id: str, is_active: bool, reason: str = ""
    ) -> Result[BarbershopStatusResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        async with self.uow:
            shop = await self.uow.barbershops.get_by_id(shop_id)
            if shop is None:
                return Return.err(Error("BARBERSHOP_NOT_FOUND", "Barbershop not found"))

            batch = self.uow.batch()
            staged = await stage_shop_status(
                self.uow, self.lifecycle, batch, shop, is_active, reason
            )
            if staged.is_err():
                return staged

            try:
                await batch.commit()
            except PreconditionFailedError:
                return Return.err(
                    Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                )

        logger.info(
            "Barbershop %s set active=%s by %s", shop_id, is_active, operator.uid
        )
        return staged
