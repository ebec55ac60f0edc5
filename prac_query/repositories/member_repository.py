"""회원 레포지토리 — 회원 조회 및 동적 검색 쿼리.

Member Repository — Member lookups and dynamic search queries.
Each lookup exists in two flavors: a textual SQL query mapped onto the
entity, and the same query through SQLAlchemy's expression API.
Searches compose optional predicates either by accumulating them in a
builder list or through small where-parameter functions that return None
when their condition is absent.
"""

from typing import Sequence

from sqlalchemy import ColumnElement, Row, Select, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from prac_query.models.member import Member, Team
from prac_query.repositories.base import BaseRepository
from prac_query.schemas.member import MemberSearchCondition, MemberTeamDto
from prac_query.utils.pagination import QueryResults, fetch_results


def has_text(value: str | None) -> bool:
    """None이 아니고 공백 외 문자가 있는지 확인 (Non-None with a non-whitespace character)."""
    return value is not None and value.strip() != ""


# ---------------------------------------------------------------------------
# where 파라미터 — 조건이 없으면 None을 반환하고, None은 where에서 제외된다
# Where parameters — each returns None when its condition is absent
# ---------------------------------------------------------------------------
def username_eq(username: str | None) -> ColumnElement[bool] | None:
    return Member.username == username if has_text(username) else None


def team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
    return Team.name == team_name if has_text(team_name) else None


def age_goe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age <= age if age is not None else None


def present(*predicates: ColumnElement[bool] | None) -> list[ColumnElement[bool]]:
    """None을 제외한 조건 목록을 반환합니다.

    Drop absent predicates so the rest can be passed to ``Select.where``.
    """
    return [p for p in predicates if p is not None]


def _member_team_query() -> Select:
    """회원-팀 외부 조인 프로젝션 쿼리 (Member left-joined to team, ordered by member id)."""
    return (
        select(
            Member.id.label("member_id"),
            Member.username,
            Member.age,
            Team.id.label("team_id"),
            Team.name.label("team_name"),
        )
        .select_from(Member)
        .outerjoin(Member.team)
        .order_by(Member.id)
    )


def _to_dto(rows: Sequence[Row]) -> list[MemberTeamDto]:
    return [MemberTeamDto(**row._mapping) for row in rows]


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the member table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    async def find_by_id(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> Member | None:
        """ID로 회원을 조회합니다. 영속성 컨텍스트(identity map)를 먼저 확인합니다.

        Look up a member by id; the session's identity map is consulted first.
        """
        return await self.get_by_id(db, member_id)

    async def find_with_team(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> Member | None:
        """회원을 소속 팀과 함께 조회합니다 (fetch join).

        Retrieve a member with its team loaded in the same query.
        """
        query: Select = (
            select(Member)
            .options(joinedload(Member.team))
            .where(Member.id == member_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_all(self, db: AsyncSession) -> list[Member]:
        """문자열 SQL로 전체 회원을 조회합니다.

        Retrieve all members with a textual query mapped onto the entity.
        """
        stmt = select(Member).from_statement(text("SELECT * FROM member"))
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def find_all_dsl(self, db: AsyncSession) -> list[Member]:
        """표현식 API로 전체 회원을 조회합니다.

        Retrieve all members through the expression API.
        """
        result = await db.execute(select(Member))
        return list(result.scalars().all())

    async def find_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> list[Member]:
        """문자열 SQL과 바인드 파라미터로 이름이 일치하는 회원을 조회합니다.

        Retrieve members by username with a textual query and a bound parameter.
        """
        stmt = select(Member).from_statement(
            text("SELECT * FROM member WHERE username = :username")
        )
        result = await db.execute(stmt, {"username": username})
        return list(result.scalars().all())

    async def find_by_username_dsl(
        self,
        db: AsyncSession,
        username: str,
    ) -> list[Member]:
        """표현식 API로 이름이 일치하는 회원을 조회합니다.

        Retrieve members by username through the expression API.
        """
        result = await db.execute(select(Member).where(Member.username == username))
        return list(result.scalars().all())

    async def search_by_builder(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """빌더에 조건을 누적하여 회원+팀을 검색합니다.

        Search members with their team, accumulating the predicates of
        ``condition`` in a builder list. Blank strings and None values add
        nothing, so an empty condition returns every member.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            list[MemberTeamDto]: 검색 결과 (Matching members with team data)
        """
        builder: list[ColumnElement[bool]] = []
        if has_text(condition.username):
            builder.append(Member.username == condition.username)
        if has_text(condition.team_name):
            builder.append(Team.name == condition.team_name)
        if condition.age_goe is not None:
            builder.append(Member.age >= condition.age_goe)
        if condition.age_loe is not None:
            builder.append(Member.age <= condition.age_loe)

        result = await db.execute(_member_team_query().where(*builder))
        return _to_dto(result.all())

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """where 파라미터 방식으로 회원+팀을 검색합니다.

        Search members with their team using where-parameter functions.
        Same semantics as ``search_by_builder``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            list[MemberTeamDto]: 검색 결과 (Matching members with team data)
        """
        query: Select = _member_team_query().where(*self._predicates(condition))
        result = await db.execute(query)
        return _to_dto(result.all())

    async def search_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        offset: int = 0,
        limit: int = 20,
    ) -> QueryResults[MemberTeamDto]:
        """검색 결과를 페이지 단위로 조회합니다 (카운트 쿼리 분리).

        Page through search results ordered by member id. The total is
        computed by a separate count query over the same predicates.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)
            offset: 시작 위치 (Rows to skip)
            limit: 최대 항목 수 (Page size)

        Returns:
            QueryResults[MemberTeamDto]: 페이지 결과 (Page with total/offset/limit)
        """
        query: Select = _member_team_query().where(*self._predicates(condition))
        rows, total = await fetch_results(db, query, offset=offset, limit=limit, scalars=False)
        return QueryResults[MemberTeamDto](
            results=_to_dto(rows),
            total=total,
            offset=offset,
            limit=limit,
        )

    @staticmethod
    def _predicates(condition: MemberSearchCondition) -> list[ColumnElement[bool]]:
        return present(
            username_eq(condition.username),
            team_name_eq(condition.team_name),
            age_goe(condition.age_goe),
            age_loe(condition.age_loe),
        )


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
