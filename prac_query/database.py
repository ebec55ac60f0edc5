"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
PostgreSQL (asyncpg) is the default target; a SQLite URL (aiosqlite) is
accepted for local experiments and tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from prac_query.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """DB URL에 맞는 비동기 엔진을 생성합니다.

    Create an async engine for the given URL.
    SQLite URLs share one connection through a StaticPool so an in-memory
    database survives across sessions; other URLs use a regular pool.

    Args:
        url: SQLAlchemy 비동기 연결 URL (Async connection URL)
        echo: SQL 로그 출력 여부 (Whether to echo SQL statements)

    Returns:
        AsyncEngine: 생성된 엔진 (The configured engine)
    """
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    options: dict[str, Any] = {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}
    return create_async_engine(url, echo=echo, **options)


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
