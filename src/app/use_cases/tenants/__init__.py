"""Tenant lifecycle use cases."""

from .approve_tenant_use_case import ApproveTenantUseCase
from .reject_tenant_use_case import RejectTenantUseCase
from .approve_refund_use_case import ApproveRefundUseCase
from .suspend_tenant_use_case import SuspendTenantUseCase
from .reactivate_tenant_use_case import ReactivateTenantUseCase
from .delete_tenant_use_case import DeleteTenantUseCase
from .get_tenant_use_case import GetTenantUseCase
from .get_tenant_documents_use_case import GetTenantDocumentsUseCase
from .list_registrations_use_case import ListRegistrationsUseCase
from .list_refund_requests_use_case import ListRefundRequestsUseCase
from .dtos import (
    ApproveRefundCommand,
    ApproveTenantResponse,
    DeleteTenantResponse,
    ReactivateTenantCommand,
    RejectTenantCommand,
    SuspendTenantCommand,
    TenantDocumentsResponse,
    TenantListResponse,
    TenantSummary,
    TenantTransitionResponse,
)

__all__ = [
    "ApproveTenantUseCase",
    "RejectTenantUseCase",
    "ApproveRefundUseCase",
    "SuspendTenantUseCase",
    "ReactivateTenantUseCase",
    "DeleteTenantUseCase",
    "GetTenantUseCase",
    "GetTenantDocumentsUseCase",
    "ListRegistrationsUseCase",
    "ListRefundRequestsUseCase",
    "ApproveRefundCommand",
    "ApproveTenantResponse",
    "DeleteTenantResponse",
    "ReactivateTenantCommand",
    "RejectTenantCommand",
    "SuspendTenantCommand",
    "TenantDocumentsResponse",
    "TenantListResponse",
    "TenantSummary",
    "TenantTransitionResponse",
]
