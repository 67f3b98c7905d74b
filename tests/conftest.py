"""Shared fixtures: in-memory database, seeded records, and an HTTP client."""
import os

# Settings are read at import time by db.session
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from api.main import app  # noqa: E402
from db.session import get_async_session  # noqa: E402
from models import Base, Question, Tag, question_tags  # noqa: E402


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory SQLite database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session on the test database."""
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def add_tag(db_session: AsyncSession) -> Callable[..., Awaitable[Tag]]:
    """Insert a tag record."""
    async def _add_tag(name: str, description: str = "") -> Tag:
        tag = Tag(name=name, description=description)
        db_session.add(tag)
        await db_session.commit()
        return tag
    return _add_tag


@pytest.fixture
def add_question(db_session: AsyncSession) -> Callable[..., Awaitable[Question]]:
    """Insert a question referencing the given tags."""
    async def _add_question(title: str, tags: list[Tag]) -> Question:
        question = Question(title=title, text="")
        db_session.add(question)
        await db_session.flush()
        if tags:
            await db_session.execute(
                question_tags.insert(),
                [{"question_id": question.id, "tag_id": tag.id} for tag in tags],
            )
        await db_session.commit()
        return question
    return _add_question


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app, with requests served from the test database."""
    async def _override_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_async_session] = _override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
