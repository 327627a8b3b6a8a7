from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import AppRating


class IReviewRepository(ABC):
    """App rating repository interface - application layer"""

    @abstractmethod
    async def list_newest_first(self) -> List[AppRating]:
        """List all ratings, newest first"""
        pass
