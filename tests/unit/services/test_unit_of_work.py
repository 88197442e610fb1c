"""Unit tests for SqlAlchemyUnitOfWork"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def session():
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.mark.asyncio
class TestSqlAlchemyUnitOfWork:

    async def test_commit(self, session):
        await SqlAlchemyUnitOfWork(session).commit()

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()

    async def test_failed_commit_rolls_back_and_raises(self, session):
        session.commit = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed")))

        with pytest.raises(IntegrityError):
            await SqlAlchemyUnitOfWork(session).commit()

        session.rollback.assert_awaited_once()

    async def test_rollback(self, session):
        await SqlAlchemyUnitOfWork(session).rollback()

        session.rollback.assert_awaited_once()
