"""
Staging of a barbershop activation change.

Shared by the barbershop status toggle and the owner suspension toggle so
that shop, owner and tenant always move together in one batch.
"""

import logging
from typing import List

from libs.result import Error, Result, Return
from src.app.services.document_store import WriteBatch
from src.app.services.transitions import stage_shop_activation, stage_transition
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Barbershop, TenantStatus
from src.domain.lifecycle import TenantLifecycle

from .dtos import BarbershopStatusResponse

logger = logging.getLogger(__name__)

DEFAULT_SUSPENSION_REASON = "Barbershop deactivated by admin"


async def stage_shop_status(
    uow: UnitOfWork,
    lifecycle: TenantLifecycle,
    batch: WriteBatch,
    shop: Barbershop,
    is_active: bool,
    reason: str = "",
) -> Result[BarbershopStatusResponse]:
    """
    Stage shop flags, owner suspension and linked tenant transitions.

    Deactivating suspends every linked tenant that is active; activating
    reactivates every linked tenant that is suspended. Tenants in other
    statuses are left untouched. A shop whose subscription was cancelled
    cannot be activated again.
    """
    tenants = await uow.tenants.list_by_shop_id(shop.id)
    if is_active and any(t.status == TenantStatus.cancelled for t in tenants):
        return Return.err(
            Error(
                "SUBSCRIPTION_CANCELLED",
                f"Barbershop {shop.id} belongs to a cancelled subscription",
            )
        )

    owner = await uow.users.get_by_id(shop.admin_uid) if shop.admin_uid else None
    stage_shop_activation(batch, shop, owner, is_active)

    tenants_updated: List[str] = []
    for tenant in tenants:
        if not is_active and tenant.status == TenantStatus.active:
            planned = lifecycle.suspend(tenant, reason or DEFAULT_SUSPENSION_REASON)
        elif is_active and tenant.status == TenantStatus.suspended:
            planned = lifecycle.reactivate(tenant, reason)
        else:
            continue

        if planned.is_err():
            return planned
        stage_transition(batch, tenant, planned.value)
        tenants_updated.append(tenant.id)

    if owner is None:
        logger.warning("Barbershop %s has no owner profile (admin_uid=%s)", shop.id, shop.admin_uid)

    return Return.ok(
        BarbershopStatusResponse(
            shop_id=shop.id,
            is_active=is_active,
            owner_id=owner.id if owner else None,
            tenants_updated=tenants_updated,
        )
    )
