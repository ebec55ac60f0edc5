"""회원 라우터 — 회원 검색 및 조회 엔드포인트.

Member Router — Member search and lookup endpoints.
Query-string names follow the camelCase wire format
(username, teamName, ageGoe, ageLoe).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from prac_query.database import get_db
from prac_query.schemas.member import MemberResponse, MemberSearchCondition, MemberTeamDto
from prac_query.services.member_service import member_service
from prac_query.utils.pagination import QueryResults

router: APIRouter = APIRouter()


def search_condition(
    username: Annotated[str | None, Query(description="회원 이름 일치")] = None,
    team_name: Annotated[str | None, Query(alias="teamName", description="팀 이름 일치")] = None,
    age_goe: Annotated[int | None, Query(alias="ageGoe", description="나이 이상")] = None,
    age_loe: Annotated[int | None, Query(alias="ageLoe", description="나이 이하")] = None,
) -> MemberSearchCondition:
    """쿼리 파라미터를 검색 조건으로 바인딩합니다.

    Bind query parameters to a MemberSearchCondition.
    """
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


@router.get("/v1/members", response_model=list[MemberTeamDto])
async def search_member_v1(
    condition: Annotated[MemberSearchCondition, Depends(search_condition)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[MemberTeamDto]:
    """조건에 맞는 회원을 팀 정보와 함께 조회합니다.

    Search members with their team. Absent conditions match everything.
    """
    return await member_service.search_v1(db, condition)


@router.get("/v2/members", response_model=QueryResults[MemberTeamDto])
async def search_member_v2(
    condition: Annotated[MemberSearchCondition, Depends(search_condition)],
    db: Annotated[AsyncSession, Depends(get_db)],
    offset: Annotated[int, Query(ge=0, description="시작 위치")] = 0,
    limit: Annotated[int, Query(ge=1, le=100, description="페이지 크기")] = 20,
) -> QueryResults[MemberTeamDto]:
    """회원 검색 결과를 페이지 단위로 조회합니다.

    Paged member search with the total count.
    """
    return await member_service.search_v2(db, condition, offset=offset, limit=limit)


@router.get("/v1/members/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """회원 단건을 조회합니다.

    Retrieve one member with its team.
    """
    return await member_service.get_member(db, member_id)
