from fastapi import APIRouter, Depends, status

from src.api.error import error_to_exception
from src.app.services.identity_provider import AuthAdminClient
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    ChangeRoleCommand,
    ChangeRoleResponse,
    ChangeRoleUseCase,
    DeleteUserResponse,
    DeleteUserUseCase,
    ListUsersUseCase,
    ToggleUserSuspensionUseCase,
    UserListResponse,
    UserSuspensionCommand,
    UserSuspensionResponse,
)
from src.depends import (
    get_auth_admin,
    get_current_operator,
    get_super_admin,
    get_unit_of_work,
)
from src.domain.entities import OperatorContext

router = APIRouter(prefix="/users", tags=["User"])


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.patch(
    "/{user_id}/role", status_code=status.HTTP_200_OK, response_model=ChangeRoleResponse
)
async def change_role(
    user_id: str,
    request: ChangeRoleCommand,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a user's role

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: INSUFFICIENT_ROLE, CANNOT_MODIFY_SELF
        - 404 Not Found: USER_NOT_FOUND
    """
    result = await ChangeRoleUseCase(uow).execute(operator, user_id, request.role)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.patch(
    "/{user_id}/suspension",
    status_code=status.HTTP_200_OK,
    response_model=UserSuspensionResponse,
)
async def set_user_suspension(
    user_id: str,
    request: UserSuspensionCommand,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ToggleUserSuspensionUseCase(uow)
    result = await use_case.execute(operator, user_id, request.suspended, request.reason)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.delete(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=DeleteUserResponse
)
async def delete_user(
    user_id: str,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_admin: AuthAdminClient = Depends(get_auth_admin),
):
    """Delete the user's login identity, then the profile document"""
    result = await DeleteUserUseCase(uow, auth_admin).execute(operator, user_id)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value
