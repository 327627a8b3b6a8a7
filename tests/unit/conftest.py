import itertools

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import OperatorContext, UserRole
from tests.fixtures.document_store import RecordingBatch
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.rollback = AsyncMock()

    counter = itertools.count(1)
    uow.new_id = MagicMock(side_effect=lambda: f"doc-{next(counter)}")
    uow.batch = MagicMock(return_value=RecordingBatch())
    return uow


@pytest.fixture
def super_admin():
    return OperatorContext(
        uid="op-super", email="ops@geges.id", role=UserRole.super_admin, token="id-token"
    )


@pytest.fixture
def shop_owner_operator():
    return OperatorContext(uid="op-owner", email="owner@geges.id", role=UserRole.admin_owner)
