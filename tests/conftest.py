"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session, and httpx client
fixtures. Schema is created for each test and dropped afterwards.
Set TEST_DATABASE_URL to run against another async database.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from prac_query.database import Base, build_engine, get_db
from prac_query.main import app
from prac_query.models import *  # noqa: F401,F403 — register all models with metadata
from prac_query.models import Member, Team

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성하고 종료 시 삭제합니다."""
    eng = build_engine(TEST_DATABASE_URL)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다. 커밋하지 않은 변경은 롤백됩니다."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """teamA, teamB를 생성합니다."""
    team_a = Team("teamA")
    team_b = Team("teamB")
    db.add_all([team_a, team_b])
    await db.flush()
    return {"teamA": team_a, "teamB": team_b}


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams: dict[str, Team]) -> list[Member]:
    """member1(10, A), member2(20, A), member3(30, B), member4(40, B)를 생성합니다."""
    result = [
        Member("member1", 10, teams["teamA"]),
        Member("member2", 20, teams["teamA"]),
        Member("member3", 30, teams["teamB"]),
        Member("member4", 40, teams["teamB"]),
    ]
    db.add_all(result)
    await db.flush()
    return result
