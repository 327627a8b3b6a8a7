"""
Barber Console Domain Entities

Document-shaped entities, one per stored collection.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    TenantStatus,
    VerificationStatus,
    UserRole,
    HistoryType,
)

# Export all entities
from .tenant import (
    Tenant,
    TenantPayment,
    TenantInvoice,
    TenantHistoryEntry,
    CancellationRequest,
    RefundRecord,
)
from .barbershop import Barbershop
from .user import User
from .notification import Notification
from .review import AppRating
from .operator import OperatorContext

__all__ = [
    # Enums
    "TenantStatus",
    "VerificationStatus",
    "UserRole",
    "HistoryType",
    # Entities
    "Tenant",
    "TenantPayment",
    "TenantInvoice",
    "TenantHistoryEntry",
    "CancellationRequest",
    "RefundRecord",
    "Barbershop",
    "User",
    "Notification",
    "AppRating",
    "OperatorContext",
]
