"""로컬 샘플 데이터 시드 — 팀 2개와 회원 100명 생성.

Seed script — Creates the local sample data set.
Runs on application startup under the "local" profile, or manually.

Usage:
    python -m prac_query.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 회원 member0 ~ member{N-1}, 나이 = i, 짝수는 teamA / 홀수는 teamB
      (N members, age = i, even i in teamA, odd i in teamB)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from prac_query.config import settings
from prac_query.database import Base, async_session, engine
from prac_query.models import Member, Team
from prac_query.repositories.member_repository import member_repository
from prac_query.repositories.team_repository import team_repository


async def init_member(db: AsyncSession, count: int = 100) -> int:
    """샘플 팀과 회원을 현재 세션에 추가합니다.

    Add the sample teams and members to ``db`` and flush. Commit is left
    to the caller.

    Idempotent: 팀이 하나라도 있으면 건너뜁니다 (Skips when any team exists).

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        count: 생성할 회원 수 (Number of members to create)

    Returns:
        int: 생성된 회원 수, 건너뛰면 0 (Members created; 0 when skipped)
    """
    if await team_repository.count(db) > 0:
        return 0

    team_a: Team = await team_repository.save(db, Team("teamA"))
    team_b: Team = await team_repository.save(db, Team("teamB"))

    for i in range(count):
        selected_team: Team = team_a if i % 2 == 0 else team_b
        db.add(Member("member" + str(i), i, selected_team))

    await db.flush()
    return count


async def seed(
    bind: AsyncEngine = engine,
    session_factory: async_sessionmaker[AsyncSession] = async_session,
    count: int | None = None,
) -> int:
    """스키마를 만들고 별도 트랜잭션에서 샘플 데이터를 적재합니다.

    Create tables if they don't exist, then seed in a dedicated session and
    transaction.

    Returns:
        int: 생성된 회원 수 (Members created)
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as db:
        created: int = await init_member(
            db, settings.INIT_MEMBER_COUNT if count is None else count
        )
        await db.commit()
    return created


async def _main() -> None:
    created: int = await seed()
    if created:
        async with async_session() as db:
            total: int = await member_repository.count(db)
        print(f"Seeded: {created} members (total={total})")
    else:
        print("Already seeded. Skipping.")


if __name__ == "__main__":
    asyncio.run(_main())
