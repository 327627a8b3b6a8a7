"""
Use Case: Delete Tenant

Permanently removes a tenant document and its barbershop. The owner's
profile is kept but unlinked from the removed shop.
"""

import logging

from libs.result import Error, Result, Return
from src.app.errors import PreconditionFailedError
from src.app.services.document_store import SERVER_TIMESTAMP
from src.app.services.transitions import stage_transition
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import Barbershop, OperatorContext, Tenant, User
from src.domain.lifecycle import TenantLifecycle

from .dtos import DeleteTenantResponse

logger = logging.getLogger(__name__)


class DeleteTenantUseCase:
    """
    Hard-delete a tenant in active, rejected, suspended or cancelled.

    Business Logic:
    1. Validate status is deletable
    2. Delete tenant document (guarded by its current status)
    3. Delete linked barbershop, if any
    4. Clear barbershop_id on the shop owner's profile
    5. Commit as one batch

    No history entry is written: the document carrying the history is gone.
    """

    def __init__(self, uow: UnitOfWork, lifecycle: TenantLifecycle = None):
        self.uow = uow
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, tenant: Tenant
    ) -> Result[DeleteTenantResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        planned = self.lifecycle.delete(tenant)
        if planned.is_err():
            return planned

        async with self.uow:
            batch = self.uow.batch()
            stage_transition(batch, tenant, planned.value)

            deleted_shop_id = None
            if tenant.shop_id:
                shop = await self.uow.barbershops.get_by_id(tenant.shop_id)
                batch.delete(Barbershop.document_path(tenant.shop_id))
                deleted_shop_id = tenant.shop_id
                if shop is not None:
                    owner = await self.uow.users.get_by_id(shop.admin_uid)
                    if owner is not None:
                        batch.update(
                            User.document_path(owner.id),
                            {"barbershop_id": None, "updated_at": SERVER_TIMESTAMP},
                        )

            try:
                await batch.commit()
            except PreconditionFailedError:
                return Return.err(
                    Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                )

        logger.info(
            "Tenant %s deleted by %s (barbershop=%s)", tenant.id, operator.uid, deleted_shop_id
        )
        return Return.ok(
            DeleteTenantResponse(tenant_id=tenant.id, deleted_shop_id=deleted_shop_id)
        )
