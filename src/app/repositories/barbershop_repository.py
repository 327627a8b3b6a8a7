from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Barbershop


class IBarbershopRepository(ABC):
    """Barbershop repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, shop_id: str) -> Optional[Barbershop]:
        """Get barbershop by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Barbershop]:
        """List every barbershop"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all barbershops"""
        pass
