"""
List Barbershops Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import BarbershopInfo, BarbershopListResponse


class ListBarbershopsUseCase:
    """Every barbershop, ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[BarbershopListResponse]:
        async with self.uow:
            shops = await self.uow.barbershops.list_all()

        shops.sort(key=lambda shop: (shop.name.casefold(), shop.id))
        items = [BarbershopInfo.from_entity(shop) for shop in shops]
        return Return.ok(BarbershopListResponse(items=items, total=len(items)))
