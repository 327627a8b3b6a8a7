"""
Use Case: Approve Refund

Completes a cancellation request: records the proof of transfer and the
admin note, and moves the tenant to cancelled. The linked barbershop is
deactivated and its owner suspended in the same batch.
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


class ApproveRefundUseCase:
    """
    Approve the refund of a tenant in cancellation_requested.

    Errors:
        - INVALID_STATUS: tenant did not request cancellation
        - REFUND_PROOF_REQUIRED / REFUND_NOTE_REQUIRED
        - TENANT_STATE_CHANGED: concurrent modification
    """

    def __init__(self, uow: UnitOfWork, lifecycle: TenantLifecycle = None):
        self.uow = uow
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, tenant: Tenant, proof: str, note: str
    ) -> Result[TenantTransitionResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        planned = self.lifecycle.approve_refund(
            tenant, proof=proof, note=note, processed_by=operator.uid
        )
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
                title="Refund Diproses",
                body=(
                    f'Refund untuk "{tenant.business_name}" telah ditransfer.\n'
                    f"Catatan: {note.strip()}"
                ),
            )
            try:
                await batch.commit()
            except PreconditionFailedError:
                return Return.err(
                    Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                )

        logger.info("Refund approved for tenant %s by %s", tenant.id, operator.uid)
        return Return.ok(
            TenantTransitionResponse(
                tenant_id=tenant.id, status=plan.to_status.value, shop_id=tenant.shop_id
            )
        )
