"""
Use Case: Delete Barbershop

Cascading hard delete: the shop, every tenant provisioned with it, and the
owner's profile document.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import Barbershop, OperatorContext, Tenant, User

from .dtos import DeleteBarbershopResponse

logger = logging.getLogger(__name__)


class DeleteBarbershopUseCase:
    """
    Business Logic:
    1. Read the shop to learn admin_uid
    2. Query tenants whose shop_id is this shop
    3. Batch-delete shop, tenants and owner profile

    The owner's auth identity is not touched; use DeleteUserUseCase for that.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, operator: OperatorContext, shop_id: str
    ) -> Result[DeleteBarbershopResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        async with self.uow:
            shop = await self.uow.barbershops.get_by_id(shop_id)
            if shop is None:
                return Return.err(Error("BARBERSHOP_NOT_FOUND", "Barbershop not found"))

            tenants = await self.uow.tenants.list_by_shop_id(shop_id)

            batch = self.uow.batch()
            batch.delete(Barbershop.document_path(shop_id))
            for tenant in tenants:
                batch.delete(Tenant.document_path(tenant.id))
            if shop.admin_uid:
                batch.delete(User.document_path(shop.admin_uid))

            await batch.commit()

        logger.info(
            "Barbershop %s deleted by %s (tenants=%s owner=%s)",
            shop_id,
            operator.uid,
            [t.id for t in tenants],
            shop.admin_uid,
        )
        return Return.ok(
            DeleteBarbershopResponse(
                shop_id=shop_id,
                deleted_tenant_ids=[t.id for t in tenants],
                deleted_owner_id=shop.admin_uid or None,
            )
        )
