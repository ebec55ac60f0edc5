"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all endpoints into a single router.

Included routers:
    - members: 회원 검색/조회 (Member search and lookup)
"""

from fastapi import APIRouter

from prac_query.api.members import router as members_router

api_router: APIRouter = APIRouter()

api_router.include_router(members_router, tags=["Members"])
