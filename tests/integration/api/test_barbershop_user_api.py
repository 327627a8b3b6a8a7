import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def provisioned_shop(seed, test_data):
    await seed(
        {
            "tenants/a-1": test_data.document("tenants", "active"),
            "barbershops/shop-sharp": test_data.document("barbershops", "sharp"),
            "users/owner-sari": test_data.document("users", "owner_sari"),
            "users/u-dewi": test_data.document("users", "customer"),
            "users/u-gone": test_data.document("users", "deleted_customer"),
        }
    )


@pytest.mark.asyncio
async def test_deactivate_and_activate_barbershop(
    client: AsyncClient, store, provisioned_shop, admin_headers
):
    response = await client.patch(
        "/barbershops/shop-sharp/status",
        json={"is_active": False, "reason": "Laporan penipuan"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["owner_id"] == "owner-sari"
    assert response.json()["tenants_updated"] == ["a-1"]
    shop = (await store.get_document("barbershops/shop-sharp")).data
    assert shop["isActive"] is False
    assert shop["isOpen"] is False
    assert (await store.get_document("users/owner-sari")).data["isSuspended"] is True
    tenant = (await store.get_document("tenants/a-1")).data
    assert tenant["status"] == "suspended"
    assert tenant["suspension_reason"] == "Laporan penipuan"

    response = await client.patch(
        "/barbershops/shop-sharp/status", json={"is_active": True}, headers=admin_headers
    )

    assert response.status_code == 200
    assert (await store.get_document("barbershops/shop-sharp")).data["isActive"] is True
    assert (await store.get_document("users/owner-sari")).data["isSuspended"] is False
    assert (await store.get_document("tenants/a-1")).data["status"] == "active"


@pytest.mark.asyncio
async def test_barbershop_status_unknown_shop(client: AsyncClient, admin_headers):
    response = await client.patch(
        "/barbershops/nope/status", json={"is_active": False}, headers=admin_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "BARBERSHOP_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_barbershop_cascades(
    client: AsyncClient, store, provisioned_shop, auth_admin, admin_headers
):
    response = await client.delete("/barbershops/shop-sharp", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "shop_id": "shop-sharp",
        "deleted_tenant_ids": ["a-1"],
        "deleted_owner_id": "owner-sari",
    }
    assert (await store.get_document("barbershops/shop-sharp")).exists is False
    assert (await store.get_document("tenants/a-1")).exists is False
    assert (await store.get_document("users/owner-sari")).exists is False
    assert (await store.get_document("users/u-dewi")).exists is True
    assert auth_admin.calls == []


@pytest.mark.asyncio
async def test_list_users_hides_deleted(client: AsyncClient, provisioned_shop, admin_headers):
    response = await client.get("/users", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert sorted(item["id"] for item in data["items"]) == ["owner-sari", "u-dewi"]


@pytest.mark.asyncio
async def test_change_role(client: AsyncClient, store, provisioned_shop, admin_headers):
    response = await client.patch(
        "/users/u-dewi/role", json={"role": "admin_owner"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json() == {
        "user_id": "u-dewi",
        "old_role": "customer",
        "new_role": "admin_owner",
    }
    assert (await store.get_document("users/u-dewi")).data["role"] == "admin_owner"


@pytest.mark.asyncio
async def test_change_role_rejections(client: AsyncClient, provisioned_shop, admin_headers):
    invalid = await client.patch(
        "/users/u-dewi/role", json={"role": "barber"}, headers=admin_headers
    )
    own = await client.patch(
        "/users/op-super/role", json={"role": "customer"}, headers=admin_headers
    )
    missing = await client.patch(
        "/users/nobody/role", json={"role": "customer"}, headers=admin_headers
    )

    assert invalid.status_code == 400
    assert invalid.json()["error"]["code"] == "INVALID_ROLE"
    assert own.status_code == 403
    assert own.json()["error"]["code"] == "CANNOT_MODIFY_SELF"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_suspend_customer(client: AsyncClient, store, provisioned_shop, admin_headers):
    response = await client.patch(
        "/users/u-dewi/suspension", json={"suspended": True}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["shop_id"] is None
    user = (await store.get_document("users/u-dewi")).data
    assert user["isSuspended"] is True
    assert user["role"] == "customer"


@pytest.mark.asyncio
async def test_suspend_shop_owner(client: AsyncClient, store, provisioned_shop, admin_headers):
    response = await client.patch(
        "/users/owner-sari/suspension",
        json={"suspended": True, "reason": "Melanggar ketentuan"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["shop_id"] == "shop-sharp"
    assert response.json()["tenants_updated"] == ["a-1"]
    assert (await store.get_document("users/owner-sari")).data["isSuspended"] is True
    assert (await store.get_document("barbershops/shop-sharp")).data["isActive"] is False
    assert (await store.get_document("tenants/a-1")).data["status"] == "suspended"


@pytest.mark.asyncio
async def test_delete_user(client: AsyncClient, store, provisioned_shop, auth_admin, admin_headers):
    response = await client.delete("/users/u-dewi", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"user_id": "u-dewi", "auth_deleted": True}
    assert auth_admin.calls == ["u-dewi"]
    assert (await store.get_document("users/u-dewi")).exists is False


@pytest.mark.asyncio
async def test_delete_self_is_refused(client: AsyncClient, auth_admin, admin_headers):
    response = await client.delete("/users/op-super", headers=admin_headers)

    assert response.status_code == 403
    assert auth_admin.calls == []


@pytest.mark.asyncio
async def test_owner_cannot_manage_users(client: AsyncClient, provisioned_shop, owner_headers):
    response = await client.patch(
        "/users/u-dewi/suspension", json={"suspended": True}, headers=owner_headers
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_delete_shop_owner_is_refused(
    client: AsyncClient, store, provisioned_shop, auth_admin, admin_headers
):
    response = await client.delete("/users/owner-sari", headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "USER_OWNS_BARBERSHOP"
    assert auth_admin.calls == []
    assert (await store.get_document("users/owner-sari")).exists is True


@pytest.mark.asyncio
async def test_list_and_get_barbershops(client: AsyncClient, provisioned_shop, admin_headers):
    response = await client.get("/barbershops", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["total"] == 1
    assert response.json()["items"][0]["id"] == "shop-sharp"

    response = await client.get("/barbershops/shop-sharp", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Sharp Line"
    assert body["admin_uid"] == "owner-sari"
    assert body["is_active"] is True


@pytest.mark.asyncio
async def test_get_unknown_barbershop(client: AsyncClient, admin_headers):
    response = await client.get("/barbershops/nope", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "BARBERSHOP_NOT_FOUND"


@pytest.mark.asyncio
async def test_owner_cannot_list_barbershops(client: AsyncClient, owner_headers):
    response = await client.get("/barbershops", headers=owner_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_edit_barbershop_profile(client: AsyncClient, store, provisioned_shop, admin_headers):
    response = await client.patch(
        "/barbershops/shop-sharp",
        json={"address": "Jl. Dago 10, Bandung", "image_url": "https://cdn/sharp.png"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["shop"]["address"] == "Jl. Dago 10, Bandung"
    shop = (await store.get_document("barbershops/shop-sharp")).data
    assert shop["address"] == "Jl. Dago 10, Bandung"
    assert shop["imageUrl"] == "https://cdn/sharp.png"
    assert shop["name"] == "Sharp Line"
    assert shop["isActive"] is True


@pytest.mark.asyncio
async def test_edit_barbershop_deactivation_cascades(
    client: AsyncClient, store, provisioned_shop, admin_headers
):
    response = await client.patch(
        "/barbershops/shop-sharp",
        json={"is_active": False, "reason": "Izin usaha dicabut"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["tenants_updated"] == ["a-1"]
    assert response.json()["shop"]["is_open"] is False
    shop = (await store.get_document("barbershops/shop-sharp")).data
    assert shop["isActive"] is False
    assert shop["isOpen"] is False
    assert (await store.get_document("users/owner-sari")).data["isSuspended"] is True
    tenant = (await store.get_document("tenants/a-1")).data
    assert tenant["status"] == "suspended"
    assert tenant["suspension_reason"] == "Izin usaha dicabut"


@pytest.mark.asyncio
async def test_edit_barbershop_blank_name(
    client: AsyncClient, store, provisioned_shop, admin_headers
):
    response = await client.patch(
        "/barbershops/shop-sharp", json={"name": " "}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NAME_REQUIRED"
    assert (await store.get_document("barbershops/shop-sharp")).data["name"] == "Sharp Line"


@pytest.mark.asyncio
async def test_edit_barbershop_rejects_invalid_hours(
    client: AsyncClient, provisioned_shop, admin_headers
):
    response = await client.patch(
        "/barbershops/shop-sharp", json={"open_hour": 25}, headers=admin_headers
    )

    assert response.status_code == 422
