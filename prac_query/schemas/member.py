"""회원 조회용 Pydantic DTO 및 검색 조건 스키마.

Member DTO and search condition Pydantic schemas.
DTOs accept ORM rows (``from_attributes``), so query projections can be
mapped by attribute, by column mapping, or positionally.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MemberDto(BaseModel):
    """회원 이름/나이 DTO.

    Username/age projection of a member.

    Attributes:
        username: 회원 이름 (Username)
        age: 나이 (Age)
    """

    model_config = ConfigDict(from_attributes=True)

    username: str | None = None
    age: int = 0


class UserDto(BaseModel):
    """엔티티와 필드명이 다른 DTO — 별칭(label)으로 매핑.

    DTO whose field names differ from the entity's; queries fill it by
    labelling columns ``name`` and ``age``.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str | None = None
    age: int = 0


class MemberTeamDto(BaseModel):
    """회원+팀 검색 결과 DTO.

    Member joined with its team, as returned by the search endpoint.
    Serialized with camelCase keys (memberId, teamId, teamName).

    Attributes:
        member_id: 회원 ID (Member identifier)
        username: 회원 이름 (Username)
        age: 나이 (Age)
        team_id: 팀 ID, 팀이 없으면 None (Team identifier, None without a team)
        team_name: 팀 이름 (Team name)
    """

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    member_id: int
    username: str | None = None
    age: int = 0
    team_id: int | None = None
    team_name: str | None = None


class MemberSearchCondition(BaseModel):
    """회원 검색 조건 — 모든 필드는 선택 사항.

    Member search condition; every field is optional and an absent (or blank)
    field contributes no predicate.

    Attributes:
        username: 회원 이름 일치 (Exact username match)
        team_name: 팀 이름 일치 (Exact team name match)
        age_goe: 나이 하한, 이상 (Age lower bound, inclusive)
        age_loe: 나이 상한, 이하 (Age upper bound, inclusive)
    """

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None


class MemberResponse(BaseModel):
    """회원 단건 조회 응답."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    username: str | None = None
    age: int = 0
    team_id: int | None = None
    team_name: str | None = None
