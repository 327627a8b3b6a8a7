from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Tenant


class GetTenantUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: str) -> Result[Tenant]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)

        if tenant is None:
            return Return.err(Error("TENANT_NOT_FOUND", f"Tenant {tenant_id} not found"))
        return Return.ok(tenant)
