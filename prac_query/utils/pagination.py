"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides ``fetch_results`` (page + total count) and ``fetch_count``,
and the ``QueryResults`` model carrying the page metadata.
"""

from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class QueryResults(BaseModel, Generic[T]):
    """페이지 조회 결과 모델.

    Result of a paged query with its metadata.

    Attributes:
        results: 현재 페이지 항목 목록 (Items for the requested window)
        total: 전체 항목 수 (Total count ignoring offset/limit)
        offset: 시작 위치, 0부터 (Start index, 0-based)
        limit: 요청한 최대 항목 수 (Requested page size)
    """

    results: list[T]
    total: int
    offset: int
    limit: int


async def fetch_count(db: AsyncSession, query: Select[Any]) -> int:
    """쿼리 결과의 전체 개수를 조회합니다.

    Count the rows ``query`` would return, by wrapping it in a subquery.
    """
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    return (await db.execute(count_query)).scalar() or 0


async def fetch_results(
    db: AsyncSession,
    query: Select[Any],
    offset: int = 0,
    limit: int = 20,
    scalars: bool = True,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지 조회를 수행합니다.

    Execute a paged SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the requested window with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to page)
        offset: 시작 위치 (Rows to skip, default: 0)
        limit: 최대 항목 수 (Maximum rows, default: 20)
        scalars: True면 첫 컬럼만 반환, False면 Row 반환
                 (True returns the first column, e.g. entities; False returns rows)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of page items and total count)
    """
    total: int = await fetch_count(db, query)

    result = await db.execute(query.offset(offset).limit(limit))
    items: Sequence[Any] = result.scalars().all() if scalars else result.all()

    return items, total
