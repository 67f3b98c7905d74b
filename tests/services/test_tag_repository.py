"""Tests for TagRepository."""
import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from schemas.tag import TagRead
from services.errors import StorageError
from services.tag_repository import TagRepository


async def test__find_by_name__returns_matching_tag(db_session: AsyncSession, add_tag) -> None:
    """An existing tag is returned with its description."""
    await add_tag("exampleTag", "This is a test tag")
    await add_tag("otherTag")

    repository = TagRepository(db_session, timeout=5)
    tag = await repository.find_by_name("exampleTag")

    assert tag == TagRead(name="exampleTag", description="This is a test tag")


async def test__find_by_name__returns_none_when_absent(db_session: AsyncSession, add_tag) -> None:
    """A name with no record is reported as None, not an error."""
    await add_tag("exampleTag")

    repository = TagRepository(db_session, timeout=5)
    assert await repository.find_by_name("nonExistentTag") is None


async def test__find_by_name__is_case_sensitive(db_session: AsyncSession, add_tag) -> None:
    """Names must match exactly, including case."""
    await add_tag("Python")

    repository = TagRepository(db_session, timeout=5)
    assert await repository.find_by_name("python") is None
    assert (await repository.find_by_name("Python")).name == "Python"


async def test__find_by_name__wraps_database_errors() -> None:
    """Driver errors surface as StorageError carrying the cause."""
    session = AsyncMock(spec=AsyncSession)
    session.execute.side_effect = OperationalError(
        "SELECT", {}, Exception("connection refused"),
    )

    repository = TagRepository(session, timeout=5)
    with pytest.raises(StorageError, match="connection refused"):
        await repository.find_by_name("errorTag")


async def test__find_by_name__times_out() -> None:
    """A query exceeding the timeout surfaces as StorageError."""
    async def slow_execute(*_args: object, **_kwargs: object) -> None:
        await asyncio.sleep(1)

    session = AsyncMock(spec=AsyncSession)
    session.execute.side_effect = slow_execute

    repository = TagRepository(session, timeout=0.01)
    with pytest.raises(StorageError, match="timed out"):
        await repository.find_by_name("slowTag")


async def test__find_by_name__wraps_connection_errors() -> None:
    """An unreachable database surfaces as StorageError, not a raw OSError."""
    session = AsyncMock(spec=AsyncSession)
    session.execute.side_effect = ConnectionRefusedError(111, "Connect call failed")

    repository = TagRepository(session, timeout=5)
    with pytest.raises(StorageError, match="Connect call failed"):
        await repository.find_by_name("errorTag")
