from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import BarbershopInfo


class GetBarbershopUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, shop_id: str) -> Result[BarbershopInfo]:
        async with self.uow:
            shop = await self.uow.barbershops.get_by_id(shop_id)

        if shop is None:
            return Return.err(Error("BARBERSHOP_NOT_FOUND", "Barbershop not found"))
        return Return.ok(BarbershopInfo.from_entity(shop))
