"""
Unit tests for the Tenant Lifecycle Engine.
Pure transitions: no store, no identity provider.
"""

import pytest
from datetime import datetime, UTC

from src.domain.entities import TenantStatus
from src.domain.lifecycle import (
    DELETABLE_STATUSES,
    PENDING_REVIEW_STATUSES,
    TenantLifecycle,
)
from tests.fixtures.entities import make_tenant

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def lifecycle():
    return TenantLifecycle(clock=lambda: NOW)


@pytest.mark.parametrize("status", sorted(PENDING_REVIEW_STATUSES))
def test_approve_allowed_from_every_pending_status(lifecycle, status):
    tenant = make_tenant("pending", status=status.value)

    result = lifecycle.approve(tenant, "shop-1", tenant.owner_email, "Abc12345")

    assert result.is_ok()
    plan = result.value
    assert plan.from_status == status
    assert plan.to_status == TenantStatus.active
    assert plan.updates == {
        "status": "active",
        "payment.verificationStatus": "verified",
        "admin_email": "budi@example.com",
        "temp_password": "Abc12345",
        "shop_id": "shop-1",
    }
    assert plan.history_entry.note == "Approved & Provisioned. Shop ID: shop-1"
    assert plan.history_entry.type == "system"
    assert plan.history_entry.created_at == NOW


@pytest.mark.parametrize(
    "status",
    [TenantStatus.active, TenantStatus.rejected, TenantStatus.cancelled, TenantStatus.suspended],
)
def test_approve_rejects_non_pending_status(lifecycle, status):
    tenant = make_tenant("pending", status=status.value)

    result = lifecycle.approve(tenant, "shop-1", tenant.owner_email, "Abc12345")

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"


def test_approve_requires_payment_proof(lifecycle):
    tenant = make_tenant("pending_without_proof")

    result = lifecycle.approve(tenant, "shop-1", tenant.owner_email, "Abc12345")

    assert result.is_err()
    assert result.error.code == "PAYMENT_PROOF_REQUIRED"


def test_legacy_base64_proof_counts_as_proof(lifecycle):
    tenant = make_tenant(
        "pending_without_proof",
        payment={"payment_proof_base64": "aGVsbG8=", "verificationStatus": "pending"},
    )

    assert lifecycle.check_approval(tenant).is_ok()


def test_reject_writes_reason_everywhere(lifecycle):
    tenant = make_tenant("pending")

    result = lifecycle.reject(tenant, "  Bukti transfer buram  ")

    assert result.is_ok()
    plan = result.value
    assert plan.to_status == TenantStatus.rejected
    assert plan.updates["rejection_reason"] == "Bukti transfer buram"
    assert plan.updates["invoice.cancel_reason"] == "Bukti transfer buram"
    assert plan.updates["invoice.status"] == "rejected"
    assert plan.updates["payment.verificationStatus"] == "rejected"
    assert plan.history_entry.note == "Ditolak Admin: Bukti transfer buram"
    assert plan.history_entry.type == "registration_rejected"


@pytest.mark.parametrize("reason", ["", "   ", None])
def test_reject_requires_reason(lifecycle, reason):
    tenant = make_tenant("pending")

    result = lifecycle.reject(tenant, reason)

    assert result.is_err()
    assert result.error.code == "REASON_REQUIRED"


def test_reject_active_tenant_is_invalid(lifecycle):
    result = lifecycle.reject(make_tenant("active"), "late")

    assert result.error.code == "INVALID_STATUS"


def test_request_cancellation_from_active(lifecycle):
    tenant = make_tenant("active")

    result = lifecycle.request_cancellation(tenant, "Pindah kota")

    assert result.is_ok()
    plan = result.value
    assert plan.to_status == TenantStatus.cancellation_requested
    assert plan.updates["cancellation_request"] == {"reason": "Pindah kota", "requested_at": NOW}
    assert plan.history_entry.type == "cancellation_requested"


def test_request_cancellation_only_from_active(lifecycle):
    result = lifecycle.request_cancellation(make_tenant("pending"), "Pindah kota")

    assert result.error.code == "INVALID_STATUS"


def test_approve_refund_records_refund(lifecycle):
    tenant = make_tenant("cancellation_requested")

    result = lifecycle.approve_refund(tenant, "proof-ref", "Transfer BCA", processed_by="op-super")

    assert result.is_ok()
    plan = result.value
    assert plan.to_status == TenantStatus.cancelled
    assert plan.updates["invoice.status"] == "refunded"
    assert plan.updates["refund"] == {
        "proof": "proof-ref",
        "note": "Transfer BCA",
        "completed_at": NOW,
        "processed_by": "op-super",
    }
    assert plan.history_entry.type == "refund_completed"


@pytest.mark.parametrize(
    "proof, note, code",
    [
        ("", "Transfer BCA", "REFUND_PROOF_REQUIRED"),
        ("proof-ref", "", "REFUND_NOTE_REQUIRED"),
        ("proof-ref", "   ", "REFUND_NOTE_REQUIRED"),
    ],
)
def test_approve_refund_requires_proof_and_note(lifecycle, proof, note, code):
    tenant = make_tenant("cancellation_requested")

    result = lifecycle.approve_refund(tenant, proof, note)

    assert result.error.code == code


def test_approve_refund_only_from_cancellation_requested(lifecycle):
    result = lifecycle.approve_refund(make_tenant("active"), "proof-ref", "note")

    assert result.error.code == "INVALID_STATUS"


def test_suspend_and_reactivate_are_inverse(lifecycle):
    tenant = make_tenant("active")

    suspended = lifecycle.suspend(tenant, "Telat bayar").value.apply(tenant)
    assert suspended.status == TenantStatus.suspended
    assert suspended.suspension_reason == "Telat bayar"

    reactivated = lifecycle.reactivate(suspended).value.apply(suspended)
    assert reactivated.status == TenantStatus.active
    assert reactivated.suspension_reason is None
    assert [entry.type for entry in reactivated.history[-2:]] == ["suspended", "reactivated"]


def test_suspend_requires_reason(lifecycle):
    assert lifecycle.suspend(make_tenant("active"), " ").error.code == "REASON_REQUIRED"


def test_reactivate_only_from_suspended(lifecycle):
    assert lifecycle.reactivate(make_tenant("active")).error.code == "INVALID_STATUS"


@pytest.mark.parametrize("status", sorted(DELETABLE_STATUSES))
def test_delete_allowed_statuses(lifecycle, status):
    tenant = make_tenant("active", status=status.value)

    plan = lifecycle.delete(tenant).value

    assert plan.delete is True
    assert plan.history_entry is None
    assert plan.apply(tenant).status == TenantStatus.deleted


@pytest.mark.parametrize(
    "status",
    [TenantStatus.payment_submitted, TenantStatus.cancellation_requested, TenantStatus.draft],
)
def test_delete_refused_for_open_workflows(lifecycle, status):
    tenant = make_tenant("pending", status=status.value)

    assert lifecycle.delete(tenant).error.code == "INVALID_STATUS"


def test_each_transition_appends_exactly_one_history_entry(lifecycle):
    tenant = make_tenant("pending")
    steps = [
        lambda t: lifecycle.approve(t, "shop-1", t.owner_email, "Abc12345"),
        lambda t: lifecycle.request_cancellation(t, "Tutup"),
        lambda t: lifecycle.approve_refund(t, "proof", "Dana dikembalikan"),
    ]

    for step in steps:
        before = len(tenant.history)
        tenant = step(tenant).value.apply(tenant)
        assert len(tenant.history) == before + 1

    assert tenant.status == TenantStatus.cancelled
    assert tenant.refund.note == "Dana dikembalikan"
    assert tenant.invoice.status == "refunded"


def test_failed_validation_leaves_tenant_untouched(lifecycle):
    tenant = make_tenant("pending_without_proof")
    snapshot = tenant.model_dump()

    lifecycle.approve(tenant, "shop-1", tenant.owner_email, "Abc12345")
    lifecycle.reject(tenant, "")

    assert tenant.model_dump() == snapshot
