"""
List Users Use Case

All user profiles not marked as deleted, newest first.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import as_utc

from .dtos import UserInfo, UserListResponse


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UserListResponse]:
        async with self.uow:
            users = await self.uow.users.list_visible()

        users.sort(key=lambda u: as_utc(u.created_at), reverse=True)

        items = [
            UserInfo(
                id=user.id,
                name=user.name,
                email=user.email,
                role=user.role.value,
                barbershop_id=user.barbershop_id,
                phone_number=user.phone_number,
                is_suspended=user.is_suspended,
                created_at=user.created_at.isoformat() if user.created_at else None,
            )
            for user in users
        ]
        return Return.ok(UserListResponse(items=items, total=len(items)))
