"""
Tenant Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the tenant lifecycle.
Provides type safety and clear contracts between layers.
"""

from typing import List, Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RejectTenantCommand(BaseModel):
    """Rejection of a pending application"""

    reason: str


class ApproveRefundCommand(BaseModel):
    """Refund of a cancelled subscription"""

    proof: str  # proof-of-transfer reference or base64 payload
    note: str


class SuspendTenantCommand(BaseModel):
    reason: str


class ReactivateTenantCommand(BaseModel):
    note: str = ""


# ============================================================================
# Response DTOs
# ============================================================================


class ApproveTenantResponse(BaseModel):
    """
    Result of provisioning an approved tenant.

    generated_password is the plaintext credential also injected into the
    tenant record and the applicant's notification.
    """

    tenant_id: str
    shop_id: str
    owner_id: str
    generated_password: str


class TenantTransitionResponse(BaseModel):
    """Response for reject / refund / suspend / reactivate"""

    tenant_id: str
    status: str
    shop_id: Optional[str] = None


class DeleteTenantResponse(BaseModel):
    tenant_id: str
    deleted_shop_id: Optional[str] = None


class TenantDocumentsResponse(BaseModel):
    """Base64 payloads of the applicant's legal documents"""

    tenant_id: str
    company_document: Optional[str] = None
    tax_document: Optional[str] = None


class TenantSummary(BaseModel):
    """Row in the registrations inbox / refund request list"""

    id: str
    business_name: str
    owner_name: str
    owner_email: str
    status: str
    has_payment_proof: bool
    created_at: Optional[str] = None
    cancellation_reason: Optional[str] = None
    cancellation_requested_at: Optional[str] = None
    amount: float = 0


class TenantListResponse(BaseModel):
    items: List[TenantSummary]
    total: int


def summarize_tenant(tenant) -> TenantSummary:
    request = tenant.cancellation_request
    return TenantSummary(
        id=tenant.id,
        business_name=tenant.business_name,
        owner_name=tenant.owner_name,
        owner_email=tenant.owner_email,
        status=tenant.status.value,
        has_payment_proof=tenant.has_payment_proof,
        created_at=tenant.created_at.isoformat() if tenant.created_at else None,
        cancellation_reason=request.reason if request else None,
        cancellation_requested_at=(
            request.requested_at.isoformat() if request and request.requested_at else None
        ),
        amount=tenant.revenue_amount,
    )
