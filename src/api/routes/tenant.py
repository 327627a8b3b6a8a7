from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from src.api.error import error_to_exception
from src.app.services.identity_provisioner import IdentityProvisioner
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenants import (
    ApproveRefundCommand,
    ApproveRefundUseCase,
    ApproveTenantResponse,
    ApproveTenantUseCase,
    DeleteTenantResponse,
    DeleteTenantUseCase,
    GetTenantDocumentsUseCase,
    GetTenantUseCase,
    ListRefundRequestsUseCase,
    ListRegistrationsUseCase,
    ReactivateTenantCommand,
    ReactivateTenantUseCase,
    RejectTenantCommand,
    RejectTenantUseCase,
    SuspendTenantCommand,
    SuspendTenantUseCase,
    TenantDocumentsResponse,
    TenantListResponse,
    TenantTransitionResponse,
)
from src.depends import (
    get_current_operator,
    get_identity_provisioner,
    get_super_admin,
    get_unit_of_work,
)
from src.domain.entities import OperatorContext, Tenant

router = APIRouter(tags=["Tenant"])


async def load_tenant(uow: UnitOfWork, tenant_id: str) -> Tenant:
    result = await GetTenantUseCase(uow).execute(tenant_id)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.get(
    "/registrations", status_code=status.HTTP_200_OK, response_model=TenantListResponse
)
async def list_registrations(
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Tenant applications still under review, newest first"""
    result = await ListRegistrationsUseCase(uow).execute()
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.get(
    "/refund-requests", status_code=status.HTTP_200_OK, response_model=TenantListResponse
)
async def list_refund_requests(
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Cancellation requests awaiting a refund, newest request first"""
    result = await ListRefundRequestsUseCase(uow).execute()
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.get("/tenants/{tenant_id}", status_code=status.HTTP_200_OK)
async def get_tenant(
    tenant_id: str,
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Dict[str, Any]:
    """
    Tenant detail.

    The generated owner password is only ever returned by the approve
    endpoint.
    """
    tenant = await load_tenant(uow, tenant_id)
    return tenant.model_dump(mode="json", exclude={"temp_password"})


@router.get(
    "/tenants/{tenant_id}/documents",
    status_code=status.HTTP_200_OK,
    response_model=TenantDocumentsResponse,
)
async def get_tenant_documents(
    tenant_id: str,
    operator: OperatorContext = Depends(get_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    tenant = await load_tenant(uow, tenant_id)
    result = await GetTenantDocumentsUseCase(uow).execute(tenant)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.post(
    "/tenants/{tenant_id}/approve",
    status_code=status.HTTP_200_OK,
    response_model=ApproveTenantResponse,
)
async def approve_tenant(
    tenant_id: str,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
    provisioner: IdentityProvisioner = Depends(get_identity_provisioner),
):
    """
    Approve a tenant application and provision its infrastructure.

    Creates the owner's login identity, barbershop, user profile and
    notification, and activates the tenant in one atomic write.

    Raises:
        - 400 Bad Request: PAYMENT_PROOF_REQUIRED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: TENANT_NOT_FOUND
        - 409 Conflict: INVALID_STATUS, EMAIL_ALREADY_IN_USE, TENANT_STATE_CHANGED
        - 502 Bad Gateway: identity provider failure
    """
    tenant = await load_tenant(uow, tenant_id)
    result = await ApproveTenantUseCase(uow, provisioner).execute(operator, tenant)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.post(
    "/tenants/{tenant_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=TenantTransitionResponse,
)
async def reject_tenant(
    tenant_id: str,
    request: RejectTenantCommand,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    tenant = await load_tenant(uow, tenant_id)
    result = await RejectTenantUseCase(uow).execute(operator, tenant, request.reason)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.post(
    "/tenants/{tenant_id}/refund",
    status_code=status.HTTP_200_OK,
    response_model=TenantTransitionResponse,
)
async def approve_refund(
    tenant_id: str,
    request: ApproveRefundCommand,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    tenant = await load_tenant(uow, tenant_id)
    result = await ApproveRefundUseCase(uow).execute(
        operator, tenant, request.proof, request.note
    )
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.post(
    "/tenants/{tenant_id}/suspend",
    status_code=status.HTTP_200_OK,
    response_model=TenantTransitionResponse,
)
async def suspend_tenant(
    tenant_id: str,
    request: SuspendTenantCommand,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    tenant = await load_tenant(uow, tenant_id)
    result = await SuspendTenantUseCase(uow).execute(operator, tenant, request.reason)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.post(
    "/tenants/{tenant_id}/reactivate",
    status_code=status.HTTP_200_OK,
    response_model=TenantTransitionResponse,
)
async def reactivate_tenant(
    tenant_id: str,
    request: ReactivateTenantCommand = ReactivateTenantCommand(),
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    tenant = await load_tenant(uow, tenant_id)
    result = await ReactivateTenantUseCase(uow).execute(operator, tenant, request.note)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value


@router.delete(
    "/tenants/{tenant_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteTenantResponse,
)
async def delete_tenant(
    tenant_id: str,
    operator: OperatorContext = Depends(get_current_operator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Permanently remove a tenant and its barbershop"""
    tenant = await load_tenant(uow, tenant_id)
    result = await DeleteTenantUseCase(uow).execute(operator, tenant)
    if result.is_err():
        raise error_to_exception(result.error)
    return result.value
