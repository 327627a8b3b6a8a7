"""
Delete User Use Case

Permanently removes a user: auth identity first, then the profile document.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.identity_provider import AuthAdminClient
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import OperatorContext, User

from .dtos import DeleteUserResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Business Rules:
    - Operators cannot delete themselves
    - A user who still owns a barbershop cannot be deleted; delete the
      barbershop first so shop and owner never point at a missing document
    - The auth identity is deleted through the privileged callable; an
      identity that no longer exists counts as deleted, so a retry after a
      failed document delete is safe
    - The profile document is deleted only after the identity is gone
    """

    def __init__(self, uow: UnitOfWork, auth_admin: AuthAdminClient):
        self.uow = uow
        self.auth_admin = auth_admin

    async def execute(
        self, operator: OperatorContext, user_id: str
    ) -> Result[DeleteUserResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        if user_id == operator.uid:
            return Return.err(
                Error("CANNOT_MODIFY_SELF", "Operators cannot delete themselves")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.barbershop_id:
                shop = await self.uow.barbershops.get_by_id(user.barbershop_id)
                if shop is not None and shop.admin_uid == user.id:
                    return Return.err(
                        Error(
                            "USER_OWNS_BARBERSHOP",
                            f"User {user_id} still owns barbershop {shop.id}",
                        )
                    )

            auth_deleted = await self.auth_admin.delete_auth_identity(user_id, operator)

            batch = self.uow.batch()
            batch.delete(User.document_path(user_id))
            await batch.commit()

        logger.info("User %s deleted by %s", user_id, operator.uid)
        return Return.ok(DeleteUserResponse(user_id=user_id, auth_deleted=auth_deleted))
