from abc import ABC, abstractmethod

from src.app.repositories.barbershop_repository import IBarbershopRepository
from src.app.repositories.review_repository import IReviewRepository
from src.app.repositories.tenant_repository import ITenantRepository
from src.app.repositories.user_repository import IUserRepository
from src.app.services.document_store import DocumentStore, WriteBatch
from src.domain.base import generate_document_id


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and write batches"""

    # Initialized in __aenter__
    store: DocumentStore
    tenants: ITenantRepository
    barbershops: IBarbershopRepository
    users: IUserRepository
    reviews: IReviewRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    def batch(self) -> WriteBatch:
        return self.store.batch()

    def new_id(self) -> str:
        return generate_document_id()

    @abstractmethod
    async def rollback(self):
        pass
