"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata, which
Alembic and ``Base.metadata.create_all`` rely on.

Modules:
    member: 회원 및 팀 (Member and Team)
    hello: 구성 확인용 엔티티 (Smoke-test entity)
"""

from prac_query.models.member import Member, Team
from prac_query.models.hello import Hello

__all__ = [
    "Member", "Team",
    "Hello",
]
