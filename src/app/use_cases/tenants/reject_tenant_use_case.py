"""
Use Case: Reject Tenant

Rejects a pending application with a reason and notifies the applicant.
"""

import logging

from libs.result import Error, Result, Return
from src.app.errors import PreconditionFailedError
from src.app.services.transitions import stage_notification, stage_transition
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import OperatorContext, Tenant
from src.domain.lifecycle import TenantLifecycle

from .dtos import TenantTransitionResponse

logger = logging.getLogger(__name__)


class RejectTenantUseCase:
    """
    Reject a pending-review tenant.

    Business Logic:
    1. Validate status is pending review and reason is not blank
    2. Mark payment and invoice rejected, record reason, append history
    3. Notify the applicant
    4. Commit as one batch
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

        planned = self.lifecycle.reject(tenant, reason)
        if planned.is_err():
            return planned
        plan = planned.value

        async with self.uow:
            batch = self.uow.batch()
            stage_transition(batch, tenant, plan)
            stage_notification(
                batch,
                self.uow.new_id(),
                user_id=tenant.owner_uid,
                title="Pendaftaran Ditolak",
                body=(
                    f'Maaf, pendaftaran "{tenant.business_name}" ditolak.\n'
                    f"Alasan: {reason.strip()}"
                ),
            )
            try:
                await batch.commit()
            except PreconditionFailedError:
                return Return.err(
                    Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                )

        logger.info("Tenant %s rejected by %s", tenant.id, operator.uid)
        return Return.ok(
            TenantTransitionResponse(tenant_id=tenant.id, status=plan.to_status.value)
        )
