from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID (auth identity uid)"""
        pass

    @abstractmethod
    async def list_visible(self) -> List[User]:
        """List users not marked as deleted"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all user documents"""
        pass
