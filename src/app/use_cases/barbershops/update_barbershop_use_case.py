"""
Use Case: Update Barbershop

Edits a barbershop profile. A change of isActive cascades to the owner and
the linked tenants exactly like the status toggle.
"""

import logging
from typing import Any, Dict, List

from libs.result import Error, Result, Return
from src.app.errors import PreconditionFailedError
from src.app.services.document_store import SERVER_TIMESTAMP
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import Barbershop, OperatorContext
from src.domain.lifecycle import TenantLifecycle

from .dtos import BarbershopInfo, UpdateBarbershopCommand, UpdateBarbershopResponse
from .shop_status import stage_shop_status

logger = logging.getLogger(__name__)

PROFILE_FIELDS = {
    "name",
    "address",
    "whatsapp_number",
    "google_maps_url",
    "image_url",
    "open_hour",
    "close_hour",
    "barber_selection_fee",
    "services",
    "facilities",
    "weekly_holidays",
    "is_open",
}

REQUIRED_TEXT_FIELDS = {"name": "NAME_REQUIRED", "address": "ADDRESS_REQUIRED"}


class UpdateBarbershopUseCase:
    """
    Business Logic:
    1. Reject blank name / address (NAME_REQUIRED, ADDRESS_REQUIRED)
    2. Load barbershop (BARBERSHOP_NOT_FOUND otherwise)
    3. Stage the activation cascade when is_active changes
    4. Stage profile fields; an inactive shop is never open
    5. Commit as one batch
    """

    def __init__(self, uow: UnitOfWork, lifecycle: TenantLifecycle = None):
        self.uow = uow
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, shop_id: str, command: UpdateBarbershopCommand
    ) -> Result[UpdateBarbershopResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        changes: Dict[str, Any] = {
            name: value
            for name, value in command.model_dump(include=PROFILE_FIELDS).items()
            if value is not None
        }
        for field_name, code in REQUIRED_TEXT_FIELDS.items():
            if field_name in changes:
                changes[field_name] = changes[field_name].strip()
                if not changes[field_name]:
                    return Return.err(Error(code, f"Barbershop {field_name} is required"))

        async with self.uow:
            shop = await self.uow.barbershops.get_by_id(shop_id)
            if shop is None:
                return Return.err(Error("BARBERSHOP_NOT_FOUND", "Barbershop not found"))

            batch = self.uow.batch()
            is_active = shop.is_active
            tenants_updated: List[str] = []
            if command.is_active is not None and command.is_active != shop.is_active:
                staged = await stage_shop_status(
                    self.uow, self.lifecycle, batch, shop, command.is_active, command.reason
                )
                if staged.is_err():
                    return staged
                is_active = command.is_active
                tenants_updated = staged.value.tenants_updated

            if not is_active and changes.get("is_open"):
                changes["is_open"] = False

            if changes:
                fields = Barbershop.model_fields
                updates = {fields[name].alias or name: value for name, value in changes.items()}
                updates["updated_at"] = SERVER_TIMESTAMP
                batch.update(Barbershop.document_path(shop.id), updates)

            if batch.size:
                try:
                    await batch.commit()
                except PreconditionFailedError:
                    return Return.err(
                        Error("TENANT_STATE_CHANGED", "Tenant was modified by another operator")
                    )

        updated = shop.model_copy(update={**changes, "is_active": is_active})
        if not is_active:
            updated = updated.model_copy(update={"is_open": False})

        logger.info(
            "Barbershop %s updated by %s (fields=%s, active=%s)",
            shop_id,
            operator.uid,
            sorted(changes),
            is_active,
        )
        return Return.ok(
            UpdateBarbershopResponse(
                shop=BarbershopInfo.from_entity(updated), tenants_updated=tenants_updated
            )
        )
