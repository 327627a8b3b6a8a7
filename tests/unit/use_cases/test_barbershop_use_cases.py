"""
Unit tests for barbershop listing, editing, activation and cascading delete.
"""

import pytest
from pydantic import ValidationError
from unittest.mock import AsyncMock, MagicMock

from src.app.errors import PreconditionFailedError
from src.app.use_cases.barbershops import (
    DeleteBarbershopUseCase,
    GetBarbershopUseCase,
    ListBarbershopsUseCase,
    ToggleBarbershopStatusUseCase,
    UpdateBarbershopCommand,
    UpdateBarbershopUseCase,
)
from tests.fixtures.document_store import RecordingBatch
from tests.fixtures.entities import make_shop, make_tenant, make_user


@pytest.fixture
def linked_shop(mock_uow):
    """Shop with its owner and two tenants: one active, one cancelled"""
    mock_uow.barbershops.get_by_id = AsyncMock(return_value=make_shop())
    mock_uow.users.get_by_id = AsyncMock(return_value=make_user("owner_sari", "owner-sari"))
    mock_uow.tenants.list_by_shop_id = AsyncMock(
        return_value=[
            make_tenant("active", tenant_id="t-active"),
            make_tenant("active", tenant_id="t-cancelled", status="cancelled"),
        ]
    )
    return mock_uow


@pytest.mark.asyncio
async def test_deactivate_shop_moves_all_flags_together(linked_shop, super_admin):
    result = await ToggleBarbershopStatusUseCase(linked_shop).execute(
        super_admin, "shop-sharp", is_active=False
    )

    assert result.is_ok()
    response = result.value
    assert response.is_active is False
    assert response.owner_id == "owner-sari"
    assert response.tenants_updated == ["t-active"]

    batch = linked_shop.batch.return_value
    assert batch.commit_calls == 1
    assert batch.data_for("barbershops/shop-sharp")["isActive"] is False
    assert batch.data_for("barbershops/shop-sharp")["isOpen"] is False
    assert batch.data_for("users/owner-sari")["isSuspended"] is True

    tenant_update = batch.data_for("tenants/t-active")
    assert tenant_update["status"] == "suspended"
    assert tenant_update["suspension_reason"] == "Barbershop deactivated by admin"
    assert "tenants/t-cancelled" not in batch.paths()


@pytest.mark.asyncio
async def test_activate_shop_reactivates_suspended_tenants(mock_uow, super_admin):
    mock_uow.barbershops.get_by_id = AsyncMock(return_value=make_shop(isActive=False))
    mock_uow.users.get_by_id = AsyncMock(
        return_value=make_user("owner_sari", "owner-sari", isSuspended=True)
    )
    mock_uow.tenants.list_by_shop_id = AsyncMock(
        return_value=[make_tenant("active", tenant_id="t-1", status="suspended")]
    )

    result = await ToggleBarbershopStatusUseCase(mock_uow).execute(
        super_admin, "shop-sharp", is_active=True
    )

    assert result.value.tenants_updated == ["t-1"]
    batch = mock_uow.batch.return_value
    assert batch.data_for("users/owner-sari")["isSuspended"] is False
    assert batch.data_for("tenants/t-1")["status"] == "active"
    assert batch.preconditions == [("tenants/t-1", "status", "suspended")]


@pytest.mark.asyncio
async def test_activate_shop_of_cancelled_subscription_is_refused(linked_shop, super_admin):
    result = await ToggleBarbershopStatusUseCase(linked_shop).execute(
        super_admin, "shop-sharp", is_active=True
    )

    assert result.error.code == "SUBSCRIPTION_CANCELLED"
    assert linked_shop.batch.return_value.writes == []
    assert linked_shop.batch.return_value.commit_calls == 0


@pytest.mark.asyncio
async def test_toggle_unknown_shop(mock_uow, super_admin):
    mock_uow.barbershops.get_by_id = AsyncMock(return_value=None)

    result = await ToggleBarbershopStatusUseCase(mock_uow).execute(
        super_admin, "nope", is_active=False
    )

    assert result.error.code == "BARBERSHOP_NOT_FOUND"
    mock_uow.batch.assert_not_called()


@pytest.mark.asyncio
async def test_delete_barbershop_cascades(linked_shop, super_admin):
    result = await DeleteBarbershopUseCase(linked_shop).execute(super_admin, "shop-sharp")

    assert result.is_ok()
    assert result.value.deleted_tenant_ids == ["t-active", "t-cancelled"]
    assert result.value.deleted_owner_id == "owner-sari"

    batch = linked_shop.batch.return_value
    assert batch.commit_calls == 1
    assert batch.paths("delete") == [
        "barbershops/shop-sharp",
        "tenants/t-active",
        "tenants/t-cancelled",
        "users/owner-sari",
    ]


@pytest.mark.asyncio
async def test_delete_barbershop_requires_super_admin(linked_shop, shop_owner_operator):
    result = await DeleteBarbershopUseCase(linked_shop).execute(
        shop_owner_operator, "shop-sharp"
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
    linked_shop.batch.assert_not_called()


@pytest.mark.asyncio
async def test_list_barbershops_sorted_by_name(mock_uow):
    mock_uow.barbershops.list_all = AsyncMock(
        return_value=[
            make_shop(shop_id="shop-z").model_copy(update={"name": "Zona Cukur"}),
            make_shop(),
            make_shop(shop_id="shop-a").model_copy(update={"name": "alpha barber"}),
        ]
    )

    result = await ListBarbershopsUseCase(mock_uow).execute()

    assert result.value.total == 3
    assert [item.id for item in result.value.items] == ["shop-a", "shop-sharp", "shop-z"]
    assert result.value.items[1].name == "Sharp Line"


@pytest.mark.asyncio
async def test_get_barbershop(mock_uow):
    mock_uow.barbershops.get_by_id = AsyncMock(return_value=make_shop())

    result = await GetBarbershopUseCase(mock_uow).execute("shop-sharp")

    assert result.value.id == "shop-sharp"
    assert result.value.admin_uid == "owner-sari"
    assert result.value.is_open is True


@pytest.mark.asyncio
async def test_get_barbershop_not_found(mock_uow):
    mock_uow.barbershops.get_by_id = AsyncMock(return_value=None)

    result = await GetBarbershopUseCase(mock_uow).execute("nope")

    assert result.error.code == "BARBERSHOP_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_barbershop_profile_fields(linked_shop, super_admin):
    command = UpdateBarbershopCommand(
        name="  Sharp Line Dago ", image_url="https://cdn/new.png", close_hour=22
    )

    result = await UpdateBarbershopUseCase(linked_shop).execute(
        super_admin, "shop-sharp", command
    )

    assert result.is_ok()
    assert result.value.shop.name == "Sharp Line Dago"
    assert result.value.shop.close_hour == 22
    assert result.value.tenants_updated == []

    batch = linked_shop.batch.return_value
    assert batch.commit_calls == 1
    assert batch.paths() == ["barbershops/shop-sharp"]
    updates = batch.data_for("barbershops/shop-sharp")
    assert updates["name"] == "Sharp Line Dago"
    assert updates["imageUrl"] == "https://cdn/new.png"
    assert updates["close_hour"] == 22
    assert "isActive" not in updates
    linked_shop.tenants.list_by_shop_id.assert_not_called()


@pytest.mark.asyncio
async def test_update_barbershop_deactivation_cascades(linked_shop, super_admin):
    command = UpdateBarbershopCommand(is_active=False, reason="Pelanggaran", is_open=True)

    result = await UpdateBarbershopUseCase(linked_shop).execute(
        super_admin, "shop-sharp", command
    )

    assert result.value.shop.is_active is False
    assert result.value.shop.is_open is False
    assert result.value.tenants_updated == ["t-active"]

    batch = linked_shop.batch.return_value
    assert batch.commit_calls == 1
    assert batch.data_for("users/owner-sari")["isSuspended"] is True
    assert batch.data_for("tenants/t-active")["suspension_reason"] == "Pelanggaran"
    shop_writes = [data for _, path, data in batch.writes if path == "barbershops/shop-sharp"]
    assert all(data["isOpen"] is False for data in shop_writes)


@pytest.mark.asyncio
async def test_update_barbershop_reactivation_of_cancelled_subscription(linked_shop, super_admin):
    linked_shop.barbershops.get_by_id = AsyncMock(return_value=make_shop(isActive=False))

    result = await UpdateBarbershopUseCase(linked_shop).execute(
        super_admin, "shop-sharp", UpdateBarbershopCommand(is_active=True, name="Baru")
    )

    assert result.error.code == "SUBSCRIPTION_CANCELLED"
    assert linked_shop.batch.return_value.commit_calls == 0


@pytest.mark.asyncio
async def test_update_barbershop_unchanged_active_flag_skips_cascade(linked_shop, super_admin):
    result = await UpdateBarbershopUseCase(linked_shop).execute(
        super_admin, "shop-sharp", UpdateBarbershopCommand(is_active=True)
    )

    assert result.is_ok()
    assert result.value.shop.is_active is True
    assert linked_shop.batch.return_value.commit_calls == 0
    linked_shop.tenants.list_by_shop_id.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field_name, code", [("name", "NAME_REQUIRED"), ("address", "ADDRESS_REQUIRED")]
)
async def test_update_barbershop_blank_required_field(
    linked_shop, super_admin, field_name, code
):
    command = UpdateBarbershopCommand(**{field_name: "   "})

    result = await UpdateBarbershopUseCase(linked_shop).execute(
        super_admin, "shop-sharp", command
    )

    assert result.error.code == code
    linked_shop.barbershops.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_update_barbershop_not_found(mock_uow, super_admin):
    mock_uow.barbershops.get_by_id = AsyncMock(return_value=None)

    result = await UpdateBarbershopUseCase(mock_uow).execute(
        super_admin, "nope", UpdateBarbershopCommand(name="X")
    )

    assert result.error.code == "BARBERSHOP_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_barbershop_requires_super_admin(linked_shop, shop_owner_operator):
    result = await UpdateBarbershopUseCase(linked_shop).execute(
        shop_owner_operator, "shop-sharp", UpdateBarbershopCommand(name="X")
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
    linked_shop.batch.assert_not_called()


@pytest.mark.asyncio
async def test_update_barbershop_concurrent_tenant_change(linked_shop, super_admin):
    conflict = PreconditionFailedError("tenants/t-active", "status", "active", "suspended")
    linked_shop.batch = MagicMock(return_value=RecordingBatch(commit_error=conflict))

    result = await UpdateBarbershopUseCase(linked_shop).execute(
        super_admin, "shop-sharp", UpdateBarbershopCommand(is_active=False)
    )

    assert result.error.code == "TENANT_STATE_CHANGED"


def test_update_command_rejects_out_of_range_hours():
    with pytest.raises(ValidationError):
        UpdateBarbershopCommand(open_hour=24)
    with pytest.raises(ValidationError):
        UpdateBarbershopCommand(barber_selection_fee=-1)
