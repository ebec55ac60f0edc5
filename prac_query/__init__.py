"""prac_query — SQLAlchemy 쿼리 빌더 실습 서비스.

ORM query-builder practice service: Member/Team entities, dynamic search
queries, and a FastAPI search endpoint.
"""
