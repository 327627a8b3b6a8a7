"""
Change User Role Use Case

Reassigns a user's authorization tier.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.document_store import SERVER_TIMESTAMP
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import OperatorContext, User, UserRole

from .dtos import ChangeRoleResponse

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a user's role.

    Business Rules:
    - Only super admins can change roles
    - An operator cannot change their own role
    - Target user must exist
    - Role must be one of super_admin, admin_owner, customer
    - Single-document write, no other side effects
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, operator: OperatorContext, user_id: str, new_role: str
    ) -> Result[ChangeRoleResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        try:
            role = UserRole(new_role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {new_role}. Must be one of: super_admin, admin_owner, customer",
                )
            )

        if user_id == operator.uid:
            return Return.err(
                Error("CANNOT_MODIFY_SELF", "Operators cannot change their own role")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            old_role = user.role.value
            if user.role != role:
                batch = self.uow.batch()
                batch.update(
                    User.document_path(user_id),
                    {"role": role.value, "updated_at": SERVER_TIMESTAMP},
                )
                await batch.commit()

        logger.info("User %s role %s -> %s by %s", user_id, old_role, role.value, operator.uid)
        return Return.ok(
            ChangeRoleResponse(user_id=user_id, old_role=old_role, new_role=role.value)
        )
