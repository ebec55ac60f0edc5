"""세션/쿼리 구성 확인용 최소 엔티티.

Minimal entity used to check that the session and query stack is wired.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from prac_query.database import Base


class Hello(Base):
    __tablename__ = "hello"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
