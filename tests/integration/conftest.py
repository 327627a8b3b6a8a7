from typing import Any, Dict

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.identity import FakeAuthAdmin, FakeIdentityProvider
from tests.fixtures.json_loader import TestDataLoader
from src.adapter.models.stored_document import StoredDocument  # noqa: F401
from src.adapter.services.document_store import SqlAlchemyDocumentStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import create_operator_token
from src.app.services.identity_provisioner import IdentityProvisioner
from src.depends import get_auth_admin, get_identity_provisioner, get_unit_of_work


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def store(db_session):
    return SqlAlchemyDocumentStore(db_session)


@pytest_asyncio.fixture
async def seed(store):
    """Write documents (path -> stored data) in one batch"""

    async def _seed(documents: Dict[str, Dict[str, Any]]):
        batch = store.batch()
        for path, data in documents.items():
            batch.set(path, data)
        await batch.commit()

    return _seed


@pytest_asyncio.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest_asyncio.fixture
def auth_admin():
    return FakeAuthAdmin()


@pytest_asyncio.fixture
async def client(db_session, identity_provider, auth_admin):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_identity_provisioner] = lambda: IdentityProvisioner(
        identity_provider
    )
    app.dependency_overrides[get_auth_admin] = lambda: auth_admin

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test/api") as ac:
        yield ac


@pytest_asyncio.fixture
def admin_headers():
    token = create_operator_token("op-super", "ops@geges.id", "super_admin")
    return {"Authorization": f"Bearer {token}", "X-Identity-Token": "firebase-id-token"}


@pytest_asyncio.fixture
def owner_headers():
    token = create_operator_token("op-owner", "owner@geges.id", "admin_owner")
    return {"Authorization": f"Bearer {token}"}
