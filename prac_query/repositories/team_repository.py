"""팀 레포지토리 — 팀 조회 쿼리.

Team Repository — Queries for teams.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from prac_query.models.member import Team
from prac_query.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the team table.
    """

    def __init__(self) -> None:
        super().__init__(Team)

    async def find_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Team | None:
        """이름으로 팀을 조회합니다.

        Retrieve a team by its name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 팀 이름 (Team name)

        Returns:
            Team | None: 조회된 팀 또는 None (Found team or None)
        """
        query: Select = select(Team).where(Team.name == name)
        result = await db.execute(query)
        return result.scalars().first()


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()
