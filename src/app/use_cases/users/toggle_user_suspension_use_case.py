"""
Toggle User Suspension Use Case

Suspends or reactivates a user account. For a shop owner the barbershop
and tenant subscription follow in the same batch.
"""

import logging

from libs.result import Error, Result, Return
from src.app.errors import PreconditionFailedError
from src.app.services.document_store import SERVER_TIMESTAMP
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.app.use_cases.barbershops.shop_status import stage_shop_status
from src.domain.entities import OperatorContext, User, UserRole
from src.domain.lifecycle import TenantLifecycle

from .dtos import UserSuspensionResponse

logger = logging.getLogger(__name__)


class ToggleUserSuspensionUseCase:
    """
    Business Rules:
    - Operators cannot suspend themselves
    - Suspension never changes the role
    - admin_owner with a barbershop: shop isActive, owner isSuspended and
      linked tenant status change atomically
    - Anyone else: only isSuspended changes
    """

    def __init__(self, uow: UnitOfWork, lifecycle: TenantLifecycle = None):
        self.uow = uow
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, user_id: str, suspended: bool, reason: str = ""
    ) -> Result[UserSuspensionResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        if user_id == operator.uid:
            return Return.err(
                Error("CANNOT_MODIFY_SELF", "Operators cannot suspend themselves")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            batch = self.uow.batch()
            shop = None
            tenants_updated = []
            if user.role == UserRole.admin_owner and user.barbershop_id:
                shop = await self.uow.barbershops.get_by_id(user.barbershop_id)

            if shop is not None:
                staged = await stage_shop_status(
                    self.uow, self.lifecycle, batch, shop, not suspended, reason
                )
                if staged.is_err():
                    return staged
                tenants_updated = staged.value.tenants_updated
                if staged.value.owner_id != user.id:
                    batch.update(
                        User.document_path(user.id),
                        {"isSuspended": suspended, "updated_at": SERVER_TIMESTAMP},
                    )
            else:
                batch.update(
                    User.document_path(user.id),
                    {"isSuspended": suspended, "updated_at": SERVER_TIMESTAMP},
                )

            try:
                await batch.commit()
            except PreconditionFailedError:
                return Return.err(
                    Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                )

        logger.info("User %s suspended=%s by %s", user_id, suspended, operator.uid)
        return Return.ok(
            UserSuspensionResponse(
                user_id=user_id,
                is_suspended=suspended,
                shop_id=shop.id if shop else None,
                tenants_updated=tenants_updated,
            )
        )
