"""
Tenant Lifecycle Engine

Decides which status transitions are legal and describes, as a
TransitionPlan, exactly which fields each transition writes. Pure: no I/O.

    draft | awaiting_payment | waiting_proof | payment_submitted | pending_payment
        --approve--> active          (payment proof required)
        --reject---> rejected        (reason required)
    active --request_cancellation--> cancellation_requested
    cancellation_requested --approve_refund--> cancelled
    active --suspend--> suspended --reactivate--> active
    active | rejected | suspended | cancelled --delete--> (document removed)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Callable, Dict, Optional

from libs.result import Error, Result, Return
from src.domain.base import set_field_path
from src.domain.entities import (
    HistoryType,
    Tenant,
    TenantHistoryEntry,
    TenantStatus,
    VerificationStatus,
)

PENDING_REVIEW_STATUSES = frozenset(
    {
        TenantStatus.draft,
        TenantStatus.awaiting_payment,
        TenantStatus.waiting_proof,
        TenantStatus.payment_submitted,
        TenantStatus.pending_payment,
    }
)

# Applications that reached the review inbox (drafts are still being filled in)
SUBMITTED_STATUSES = PENDING_REVIEW_STATUSES - {TenantStatus.draft}

DELETABLE_STATUSES = frozenset(
    {
        TenantStatus.active,
        TenantStatus.rejected,
        TenantStatus.suspended,
        TenantStatus.cancelled,
    }
)


@dataclass(frozen=True)
class TransitionPlan:
    """
    The document mutation for one legal transition.

    updates uses stored field names; dotted keys address nested maps.
    A delete plan removes the document and carries no history entry.
    """

    action: str
    from_status: TenantStatus
    to_status: Optional[TenantStatus] = None
    updates: Dict[str, Any] = field(default_factory=dict)
    history_entry: Optional[TenantHistoryEntry] = None
    delete: bool = False

    def apply(self, tenant: Tenant) -> Tenant:
        """Return the tenant as it reads after this plan is committed"""
        if self.delete:
            return tenant.model_copy(update={"status": TenantStatus.deleted})

        data = tenant.model_dump(by_alias=True)
        for path, value in self.updates.items():
            set_field_path(data, path, value)
        data["history"] = list(data.get("history") or []) + [
            self.history_entry.model_dump(by_alias=True)
        ]
        data["updated_at"] = self.history_entry.created_at
        return Tenant.model_validate(data)


def _invalid_status(tenant: Tenant, action: str) -> Result:
    return Return.err(
        Error(
            "INVALID_STATUS",
            f"Cannot {action} tenant in status '{tenant.status.value}'",
        )
    )


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class TenantLifecycle:
    """
    Tenant state machine.

    Every method validates the precondition first and returns
    Return.err(...) without side effects when it does not hold.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or (lambda: datetime.now(UTC))

    def _entry(self, note: str, status: TenantStatus, type_: HistoryType) -> TenantHistoryEntry:
        return TenantHistoryEntry(
            note=note, status=status.value, type=type_.value, created_at=self.clock()
        )

    def check_approval(self, tenant: Tenant) -> Result[None]:
        """Preconditions for approval, checked before any identity is created"""
        if tenant.status not in PENDING_REVIEW_STATUSES:
            return _invalid_status(tenant, "approve")
        if not tenant.has_payment_proof:
            return Return.err(
                Error(
                    "PAYMENT_PROOF_REQUIRED",
                    "Tenant cannot be approved without a payment proof",
                )
            )
        return Return.ok(None)

    def approve(
        self, tenant: Tenant, shop_id: str, admin_email: str, temp_password: str
    ) -> Result[TransitionPlan]:
        check = self.check_approval(tenant)
        if check.is_err():
            return check

        return Return.ok(
            TransitionPlan(
                action="approve",
                from_status=tenant.status,
                to_status=TenantStatus.active,
                updates={
                    "status": TenantStatus.active.value,
                    "payment.verificationStatus": VerificationStatus.verified.value,
                    "admin_email": admin_email,
                    "temp_password": temp_password,
                    "shop_id": shop_id,
                },
                history_entry=self._entry(
                    f"Approved & Provisioned. Shop ID: {shop_id}",
                    TenantStatus.active,
                    HistoryType.system,
                ),
            )
        )

    def reject(self, tenant: Tenant, reason: str) -> Result[TransitionPlan]:
        if tenant.status not in PENDING_REVIEW_STATUSES:
            return _invalid_status(tenant, "reject")
        if _is_blank(reason):
            return Return.err(Error("REASON_REQUIRED", "A rejection reason is required"))

        reason = reason.strip()
        return Return.ok(
            TransitionPlan(
                action="reject",
                from_status=tenant.status,
                to_status=TenantStatus.rejected,
                updates={
                    "status": TenantStatus.rejected.value,
                    "payment.verificationStatus": VerificationStatus.rejected.value,
                    "invoice.status": "rejected",
                    "invoice.cancel_reason": reason,
                    "rejection_reason": reason,
                },
                history_entry=self._entry(
                    f"Ditolak Admin: {reason}",
                    TenantStatus.rejected,
                    HistoryType.registration_rejected,
                ),
            )
        )

    def request_cancellation(self, tenant: Tenant, reason: str) -> Result[TransitionPlan]:
        if tenant.status != TenantStatus.active:
            return _invalid_status(tenant, "request cancellation for")
        if _is_blank(reason):
            return Return.err(
                Error("REASON_REQUIRED", "A cancellation reason is required")
            )

        now = self.clock()
        return Return.ok(
            TransitionPlan(
                action="request_cancellation",
                from_status=tenant.status,
                to_status=TenantStatus.cancellation_requested,
                updates={
                    "status": TenantStatus.cancellation_requested.value,
                    "cancellation_request": {
                        "reason": reason.strip(),
                        "requested_at": now,
                    },
                },
                history_entry=TenantHistoryEntry(
                    note=f"Cancellation requested: {reason.strip()}",
                    status=TenantStatus.cancellation_requested.value,
                    type=HistoryType.cancellation_requested.value,
                    created_at=now,
                ),
            )
        )

    def approve_refund(
        self,
        tenant: Tenant,
        proof: str,
        note: str,
        processed_by: Optional[str] = None,
    ) -> Result[TransitionPlan]:
        if tenant.status != TenantStatus.cancellation_requested:
            return _invalid_status(tenant, "refund")
        if _is_blank(proof):
            return Return.err(
                Error("REFUND_PROOF_REQUIRED", "A proof of transfer is required")
            )
        if _is_blank(note):
            return Return.err(Error("REFUND_NOTE_REQUIRED", "A refund note is required"))

        now = self.clock()
        return Return.ok(
            TransitionPlan(
                action="approve_refund",
                from_status=tenant.status,
                to_status=TenantStatus.cancelled,
                updates={
                    "status": TenantStatus.cancelled.value,
                    "invoice.status": "refunded",
                    "refund": {
                        "proof": proof,
                        "note": note.strip(),
                        "completed_at": now,
                        "processed_by": processed_by,
                    },
                },
                history_entry=TenantHistoryEntry(
                    note=f"Refund completed: {note.strip()}",
                    status=TenantStatus.cancelled.value,
                    type=HistoryType.refund_completed.value,
                    created_at=now,
                ),
            )
        )

    def suspend(self, tenant: Tenant, reason: str) -> Result[TransitionPlan]:
        if tenant.status != TenantStatus.active:
            return _invalid_status(tenant, "suspend")
        if _is_blank(reason):
            return Return.err(Error("REASON_REQUIRED", "A suspension reason is required"))

        return Return.ok(
            TransitionPlan(
                action="suspend",
                from_status=tenant.status,
                to_status=TenantStatus.suspended,
                updates={
                    "status": TenantStatus.suspended.value,
                    "suspension_reason": reason.strip(),
                },
                history_entry=self._entry(
                    f"Suspended: {reason.strip()}",
                    TenantStatus.suspended,
                    HistoryType.suspended,
                ),
            )
        )

    def reactivate(self, tenant: Tenant, note: str = "") -> Result[TransitionPlan]:
        if tenant.status != TenantStatus.suspended:
            return _invalid_status(tenant, "reactivate")

        text = "Reactivated" if _is_blank(note) else f"Reactivated: {note.strip()}"
        return Return.ok(
            TransitionPlan(
                action="reactivate",
                from_status=tenant.status,
                to_status=TenantStatus.active,
                updates={
                    "status": TenantStatus.active.value,
                    "suspension_reason": None,
                },
                history_entry=self._entry(text, TenantStatus.active, HistoryType.reactivated),
            )
        )

    def delete(self, tenant: Tenant) -> Result[TransitionPlan]:
        if tenant.status not in DELETABLE_STATUSES:
            return _invalid_status(tenant, "delete")

        return Return.ok(
            TransitionPlan(action="delete", from_status=tenant.status, delete=True)
        )
