"""회원/팀 레포지토리 테스트.

Member and Team repository tests — lookups in both textual and expression
flavors, builder and where-parameter searches, and paged search.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from prac_query.models import Member, Team
from prac_query.repositories.member_repository import has_text, member_repository
from prac_query.repositories.team_repository import team_repository
from prac_query.schemas.member import MemberSearchCondition, MemberTeamDto


class TestMemberLookup:
    """회원 기본 조회."""

    async def test_save_and_find_by_id(self, db: AsyncSession, teams):
        member = Member("member1", 10, teams["teamA"])
        await member_repository.save(db, member)
        assert member.id is not None

        find_member = await member_repository.find_by_id(db, member.id)
        # 같은 영속성 컨텍스트 안에서는 동일 객체
        assert find_member is member

    async def test_find_by_id_missing(self, db: AsyncSession):
        assert await member_repository.find_by_id(db, 9999) is None

    async def test_find_all(self, db: AsyncSession, members):
        by_text = await member_repository.find_all(db)
        by_expression = await member_repository.find_all_dsl(db)

        assert len(by_text) == 4
        assert {m.username for m in by_text} == {m.username for m in by_expression}

    async def test_find_by_username(self, db: AsyncSession, members):
        by_text = await member_repository.find_by_username(db, "member1")
        by_expression = await member_repository.find_by_username_dsl(db, "member1")

        assert [m.username for m in by_text] == ["member1"]
        assert by_text == by_expression

    async def test_find_by_username_no_match(self, db: AsyncSession, members):
        assert await member_repository.find_by_username(db, "nobody") == []

    async def test_find_with_team(self, db: AsyncSession, members):
        member_id = members[2].id
        await db.flush()
        db.expunge_all()

        member = await member_repository.find_with_team(db, member_id)
        assert member is not None
        assert member.team.name == "teamB"

    async def test_change_team_updates_both_sides(self, db: AsyncSession, teams):
        member = Member("mover", 25, teams["teamA"])
        member.change_team(teams["teamB"])
        await member_repository.save(db, member)

        assert member.team is teams["teamB"]
        assert member.team_id == teams["teamB"].id

        await db.refresh(teams["teamA"], ["members"])
        await db.refresh(teams["teamB"], ["members"])
        assert member not in teams["teamA"].members
        assert member in teams["teamB"].members


class TestSearch:
    """검색 조건 조합 — 빌더 방식과 where 파라미터 방식은 같은 결과."""

    async def _both(self, db: AsyncSession, condition: MemberSearchCondition) -> list[MemberTeamDto]:
        by_builder = await member_repository.search_by_builder(db, condition)
        by_params = await member_repository.search(db, condition)
        assert by_builder == by_params
        return by_params

    async def test_search_all_conditions(self, db: AsyncSession, members):
        condition = MemberSearchCondition(age_goe=35, age_loe=40, team_name="teamB")
        result = await self._both(db, condition)
        assert [dto.username for dto in result] == ["member4"]

    async def test_search_team_name(self, db: AsyncSession, members):
        result = await self._both(db, MemberSearchCondition(team_name="teamB"))
        assert [dto.username for dto in result] == ["member3", "member4"]

    async def test_search_age_upper_bound(self, db: AsyncSession, members):
        result = await self._both(db, MemberSearchCondition(age_loe=20))
        assert [dto.username for dto in result] == ["member1", "member2"]

    async def test_search_empty_condition_returns_all(self, db: AsyncSession, members):
        result = await self._both(db, MemberSearchCondition())
        assert len(result) == 4

    async def test_search_blank_strings_ignored(self, db: AsyncSession, members):
        result = await self._both(db, MemberSearchCondition(username="  ", team_name=""))
        assert len(result) == 4

    async def test_search_projection(self, db: AsyncSession, members, teams):
        result = await self._both(db, MemberSearchCondition(username="member1"))
        assert result == [
            MemberTeamDto(
                member_id=members[0].id,
                username="member1",
                age=10,
                team_id=teams["teamA"].id,
                team_name="teamA",
            )
        ]

    async def test_search_member_without_team(self, db: AsyncSession, members):
        """팀이 없는 회원도 외부 조인으로 조회된다."""
        await member_repository.save(db, Member("loner", 50))

        result = await self._both(db, MemberSearchCondition(age_goe=50))
        assert len(result) == 1
        assert result[0].username == "loner"
        assert result[0].team_id is None
        assert result[0].team_name is None

    async def test_search_no_match(self, db: AsyncSession, members):
        assert await self._both(db, MemberSearchCondition(age_goe=100)) == []


class TestSearchPage:
    """페이지 검색."""

    async def test_first_page(self, db: AsyncSession, members):
        page = await member_repository.search_page(db, MemberSearchCondition(), offset=0, limit=3)
        assert page.total == 4
        assert page.offset == 0
        assert page.limit == 3
        assert [dto.username for dto in page.results] == ["member1", "member2", "member3"]

    async def test_last_page(self, db: AsyncSession, members):
        page = await member_repository.search_page(db, MemberSearchCondition(), offset=3, limit=3)
        assert page.total == 4
        assert [dto.username for dto in page.results] == ["member4"]

    async def test_total_follows_condition(self, db: AsyncSession, members):
        page = await member_repository.search_page(
            db, MemberSearchCondition(team_name="teamA"), offset=0, limit=1
        )
        assert page.total == 2
        assert len(page.results) == 1


class TestTeamRepository:
    """팀 레포지토리 및 공통 CRUD."""

    async def test_find_by_name(self, db: AsyncSession, teams):
        team = await team_repository.find_by_name(db, "teamB")
        assert team is teams["teamB"]
        assert await team_repository.find_by_name(db, "teamZ") is None

    async def test_create_exists_count(self, db: AsyncSession, teams):
        created: Team = await team_repository.create(db, {"name": "teamC"})
        assert created.id is not None
        assert await team_repository.exists(db, {"name": "teamC"})
        assert not await team_repository.exists(db, {"name": "teamZ"})
        assert await team_repository.count(db) == 3

    async def test_get_all_with_filters(self, db: AsyncSession, members):
        result = await member_repository.get_all(
            db, filters={"age": 20, "username": None}, order_by=Member.id
        )
        assert [m.username for m in result] == ["member2"]

    async def test_delete(self, db: AsyncSession, members):
        member_id = members[0].id
        assert await member_repository.delete(db, member_id) is True
        assert await member_repository.delete(db, member_id) is False
        assert await member_repository.count(db) == 3


def test_has_text():
    assert has_text("member1")
    assert not has_text(None)
    assert not has_text("")
    assert not has_text("   ")
