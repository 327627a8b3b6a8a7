from fastapi import APIRouter, Depends, status

from src.api.error import error_to_exception
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.barbershops import (
    BarbershopInfo,
    BarbershopListResponse,
    BarbershopStatusCommand,
    BarbershopStatusResponse,
    DeleteBarbershopResponse,
    DeleteBarbershopUseCase,
    GetBarbershopUseCase,
    ListBarbershopsUseCase,
    ToggleBarbershopStatusUseCase,
    UpdateBarbershopCommand,
    UpdateBarbershopResponse,
    UpdateBarbershopUseCase,
)
from src.depends import get_current_operator, get_super_admin, get_unit_of_work
from src.domain.entities import OperatorContext

router = APIRouter(prefix="/barbershops", tags=["Barbershop"])


@router.get("", status_code=status.HTTP_200_OK, response_model=BarbershopListResponse)
async def list_barbershops(
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListBarbershopsUseCase(uow).execute()
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.get("/{shop_id}", status_code=status.HTTP_200_OK, response_model=BarbershopInfo)
async def get_barbershop(
    shop_id: str,
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetBarbershopUseCase(uow).execute(shop_id)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.patch(
    "/{shop_id}", status_code=status.HTTP_200_OK, response_model=UpdateBarbershopResponse
)
async def update_barbershop(
    shop_id: str,
    request: UpdateBarbershopCommand,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Edit a barbershop profile.

    Omitted fields are left unchanged. Changing is_active cascades to the
    owner and the linked tenants.

    Raises:
        - 400 Bad Request: NAME_REQUIRED, ADDRESS_REQUIRED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BARBERSHOP_NOT_FOUND
        - 409 Conflict: SUBSCRIPTION_CANCELLED, TENANT_STATE_CHANGED
    """
    result = await UpdateBarbershopUseCase(uow).execute(operator, shop_id, request)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.patch(
    "/{shop_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=BarbershopStatusResponse,
)
async def set_barbershop_status(
    shop_id: str,
    request: BarbershopStatusCommand,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Activate or deactivate a barbershop.

    The owner's suspension flag and every linked tenant follow the shop in
    the same write.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: BARBERSHOP_NOT_FOUND
        - 409 Conflict: SUBSCRIPTION_CANCELLED, TENANT_STATE_CHANGED
    """
    use_case = ToggleBarbershopStatusUseCase(uow)
    result = await use_case.execute(operator, shop_id, request.is_active, request.reason)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.delete(
    "/{shop_id}", status_code=status.HTTP_200_OK, response_model=DeleteBarbershopResponse
)
async def delete_barbershop(
    shop_id: str,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a barbershop with its tenants and owner profile"""
    result = await DeleteBarbershopUseCase(uow).execute(operator, shop_id)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value
