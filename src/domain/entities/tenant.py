"""
Tenant Entity

An onboarding application / subscription record for a prospective shop owner.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from src.domain.base import DocumentModel

from .enums import TenantStatus, VerificationStatus


class TenantPayment(DocumentModel):
    """Payment proof submitted by the applicant"""

    payment_proof_base64: Optional[str] = None
    proof_url: Optional[str] = Field(default=None, alias="proofUrl")
    verification_status: VerificationStatus = Field(
        default=VerificationStatus.pending, alias="verificationStatus"
    )
    paid_by: Optional[str] = Field(default=None, alias="paidBy")
    paid_at: Optional[datetime] = Field(default=None, alias="paidAt")

    @property
    def has_proof(self) -> bool:
        return bool(self.payment_proof_base64 or self.proof_url)


class TenantInvoice(DocumentModel):
    amount: float = 0
    currency: str = "IDR"
    status: str = "unpaid"
    invoice_id: str = ""
    payment_deadline: Optional[datetime] = None
    created_at: Optional[datetime] = None
    cancel_reason: Optional[str] = None


class TenantHistoryEntry(DocumentModel):
    """Immutable audit-trail record appended on every lifecycle transition"""

    note: str = ""
    status: str = ""
    type: str = ""
    created_at: Optional[datetime] = None


class CancellationRequest(DocumentModel):
    reason: str = ""
    requested_at: Optional[datetime] = None


class RefundRecord(DocumentModel):
    proof: str = ""
    note: str = ""
    completed_at: Optional[datetime] = None
    processed_by: Optional[str] = None


class Tenant(DocumentModel):
    """
    Tenant entity - onboarding application and subscription record.

    Business Rules:
    - status is only changed through the lifecycle engine
    - history is append-only; every transition appends exactly one entry
    - shop_id / admin_email / temp_password are written once, on approval
    - temp_password is stored in plaintext so the applicant's own app can
      show it; treat tenant documents as credential-bearing
    """

    COLLECTION: ClassVar[str] = "tenants"

    id: str = ""
    business_name: str = ""
    address: Optional[str] = None
    owner_name: str = ""
    owner_email: str = ""
    owner_phone: Optional[str] = None
    owner_uid: str = ""

    status: TenantStatus = TenantStatus.draft
    rejection_reason: Optional[str] = None
    suspension_reason: Optional[str] = None

    # Legal documents (references to sub-documents, or legacy inline payload)
    company_doc_ref: Optional[str] = None
    tax_doc_ref: Optional[str] = None
    document_base64: Optional[str] = None

    # Financials
    payment: Optional[TenantPayment] = None
    invoice: Optional[TenantInvoice] = None
    registration_fee: Optional[float] = None
    package_id: Optional[str] = None
    plan: Optional[str] = None

    # Provisioning results
    shop_id: Optional[str] = None
    admin_email: Optional[str] = None
    temp_password: Optional[str] = None

    cancellation_request: Optional[CancellationRequest] = None
    refund: Optional[RefundRecord] = None

    history: List[TenantHistoryEntry] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def has_payment_proof(self) -> bool:
        return self.payment is not None and self.payment.has_proof

    @property
    def revenue_amount(self) -> float:
        if self.invoice and self.invoice.amount:
            return self.invoice.amount
        return self.registration_fee or 0
