"""
Staging helpers shared by the tenant, barbershop and user use cases.

They only add writes to a WriteBatch; the caller commits.
"""

from typing import Optional

from src.app.services.document_store import ArrayUnion, SERVER_TIMESTAMP, WriteBatch
from src.domain.entities import Barbershop, Notification, Tenant, User
from src.domain.lifecycle import TransitionPlan


def stage_transition(batch: WriteBatch, tenant: Tenant, plan: TransitionPlan) -> None:
    """
    Stage a tenant transition guarded by a conditional write.

    The batch fails at commit if another operator moved the tenant out of
    the status the plan was computed from.
    """
    path = Tenant.document_path(tenant.id)
    batch.require(path, "status", plan.from_status.value)

    if plan.delete:
        batch.delete(path)
        return

    updates = dict(plan.updates)
    updates["history"] = ArrayUnion(plan.history_entry.to_document())
    updates["updated_at"] = SERVER_TIMESTAMP
    batch.update(path, updates)


def stage_notification(batch: WriteBatch, notification_id: str, user_id: str, title: str, body: str) -> None:
    notification = Notification(user_id=user_id, title=title, body=body, delivered=False)
    data = notification.to_document()
    data["created_at"] = SERVER_TIMESTAMP
    batch.set(Notification.document_path(notification_id), data)


def stage_shop_activation(
    batch: WriteBatch,
    shop: Barbershop,
    owner: Optional[User],
    is_active: bool,
) -> None:
    """
    Keep shop and owner flags consistent: shop inactive <=> owner suspended.

    A deactivated shop is also closed; reactivation leaves it closed until
    the owner opens it again.
    """
    shop_updates = {"isActive": is_active, "updated_at": SERVER_TIMESTAMP}
    if not is_active:
        shop_updates["isOpen"] = False
    batch.update(Barbershop.document_path(shop.id), shop_updates)

    if owner is not None:
        batch.update(
            User.document_path(owner.id),
            {"isSuspended": not is_active, "updated_at": SERVER_TIMESTAMP},
        )

