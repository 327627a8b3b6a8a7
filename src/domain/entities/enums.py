"""
Barber Console Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TenantStatus(str, Enum):
    """Tenant application / subscription status"""

    draft = "draft"
    awaiting_payment = "awaiting_payment"
    waiting_proof = "waiting_proof"
    payment_submitted = "payment_submitted"
    pending_payment = "pending_payment"
    active = "active"
    rejected = "rejected"
    cancellation_requested = "cancellation_requested"
    cancelled = "cancelled"
    suspended = "suspended"
    deleted = "deleted"


class VerificationStatus(str, Enum):
    """Payment proof verification status"""

    pending = "pending"
    verified = "verified"
    rejected = "rejected"


class UserRole(str, Enum):
    """Authorization tier of a user account"""

    super_admin = "super_admin"
    admin_owner = "admin_owner"
    customer = "customer"


class HistoryType(str, Enum):
    """Transition tag stored on each tenant history entry"""

    system = "system"
    registration_rejected = "registration_rejected"
    cancellation_requested = "cancellation_requested"
    refund_completed = "refund_completed"
    suspended = "suspended"
    reactivated = "reactivated"
