"""회원 서비스 — 회원 검색/조회 비즈니스 로직.

Member Service — Business logic for member search and lookup.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from prac_query.models.member import Member
from prac_query.repositories.member_repository import member_repository
from prac_query.schemas.member import MemberResponse, MemberSearchCondition, MemberTeamDto
from prac_query.utils.exceptions import NotFoundError
from prac_query.utils.pagination import QueryResults


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member search and lookup.
    """

    async def search_v1(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """조건에 맞는 회원+팀 목록을 조회합니다.

        Search members with their team using ``condition``.
        """
        return await member_repository.search(db, condition)

    async def search_v2(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        offset: int = 0,
        limit: int = 20,
    ) -> QueryResults[MemberTeamDto]:
        """조건에 맞는 회원+팀을 페이지 단위로 조회합니다.

        Paged variant of ``search_v1``.
        """
        return await member_repository.search_page(db, condition, offset=offset, limit=limit)

    async def get_member(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> MemberResponse:
        """회원 단건을 팀 정보와 함께 조회합니다.

        Retrieve one member with its team.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 ID (Member identifier)

        Returns:
            MemberResponse: 회원 응답 (Member response)

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.find_with_team(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")

        team = member.team
        return MemberResponse(
            id=member.id,
            username=member.username,
            age=member.age,
            team_id=team.id if team is not None else None,
            team_name=team.name if team is not None else None,
        )


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
