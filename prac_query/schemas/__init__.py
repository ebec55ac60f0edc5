"""Pydantic 스키마 패키지 — 요청/응답 DTO.

Pydantic schema package — DTOs and search conditions.
"""
