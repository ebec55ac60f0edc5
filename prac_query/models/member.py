"""회원/팀 SQLAlchemy ORM 모델 정의.

Member and Team SQLAlchemy ORM model definitions.
A member belongs to at most one team; a team owns many members.
The association is bidirectional and maintained from the member side.

Tables:
    - team: 팀 (Teams)
    - member: 회원 (Members, team_id FK nullable)
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from prac_query.database import Base


class Team(Base):
    """팀 모델 — 회원 목록을 가지는 연관관계의 반대편.

    Team model — Inverse side of the member/team association.

    Attributes:
        id: 팀 식별자 (Team identifier, column team_id)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members mapped by Member.team)
    """

    __tablename__ = "team"

    id: Mapped[int] = mapped_column("team_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # 연관관계의 주인은 Member.team — Owning side is Member.team
    members: Mapped[list["Member"]] = relationship("Member", back_populates="team")

    def __init__(self, name: str) -> None:
        super().__init__(name=name)

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name})"


class Member(Base):
    """회원 모델.

    Member model. ``team`` is loaded lazily; use a join with
    ``contains_eager``/``joinedload`` to fetch it in the same query.

    Attributes:
        id: 회원 식별자 (Member identifier, column member_id)
        username: 회원 이름, 정렬 테스트를 위해 null 허용
                  (Username, nullable so ordering with NULLS LAST can be shown)
        age: 나이 (Age)
        team_id: 소속 팀 FK (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 (Owning side of the association)
    """

    __tablename__ = "member"

    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("team.team_id"), nullable=True, index=True
    )

    team: Mapped[Team | None] = relationship("Team", back_populates="members")

    def __init__(self, username: str | None = None, age: int = 0, team: Team | None = None) -> None:
        super().__init__(username=username, age=age)
        if team is not None:
            self.change_team(team)

    def change_team(self, team: Team) -> None:
        """소속 팀을 변경합니다.

        Move the member to ``team``. The back-populated ``team.members``
        collection is updated by the ORM without loading it.
        """
        self.team = team

    def __repr__(self) -> str:
        # team은 지연 로딩 대상이므로 출력하지 않음 (team is lazy, never rendered)
        return f"Member(id={self.id}, username={self.username}, age={self.age})"
