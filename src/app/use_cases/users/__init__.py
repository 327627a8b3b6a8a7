"""User management use cases."""

from .change_role_use_case import ChangeRoleUseCase
from .toggle_user_suspension_use_case import ToggleUserSuspensionUseCase
from .delete_user_use_case import DeleteUserUseCase
from .list_users_use_case import ListUsersUseCase
from .dtos import (
    ChangeRoleCommand,
    ChangeRoleResponse,
    DeleteUserResponse,
    UserInfo,
    UserListResponse,
    UserSuspensionCommand,
    UserSuspensionResponse,
)

__all__ = [
    "ChangeRoleUseCase",
    "ToggleUserSuspensionUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "ChangeRoleCommand",
    "ChangeRoleResponse",
    "DeleteUserResponse",
    "UserInfo",
    "UserListResponse",
    "UserSuspensionCommand",
    "UserSuspensionResponse",
]
