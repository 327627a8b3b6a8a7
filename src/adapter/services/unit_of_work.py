from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.barbershop_repository import BarbershopRepository
from src.adapter.repositories.review_repository import ReviewRepository
from src.adapter.repositories.tenant_repository import TenantRepository
from src.adapter.repositories.user_repository import UserRepository
from src.adapter.services.document_store import SqlAlchemyDocumentStore
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Every repository reads through the same store and session
        self.store = SqlAlchemyDocumentStore(self.session)
        self.tenants = TenantRepository(self.store)
        self.barbershops = BarbershopRepository(self.store)
        self.users = UserRepository(self.store)
        self.reviews = ReviewRepository(self.store)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def rollback(self):
        await self.session.rollback()
