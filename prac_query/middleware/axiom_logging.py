"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per API request to Axiom: method, path,
query params (the search condition), status code, duration and the error
detail of failed requests. Sensitive keys are masked and long values
truncated. Without an Axiom token the middleware is a pass-through.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from prac_query.config import settings

# 마스킹 대상 필드 패턴 — Keys whose values are never logged
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_ERROR_LEN = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def truncate(value: str, max_len: int = _MAX_ERROR_LEN) -> str:
    """로그 크기 제한 — Cut long strings to ``max_len`` characters."""
    if len(value) > max_len:
        return value[:max_len] + "..."
    return value


def build_event(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    query_params: dict[str, str] | None = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Axiom 로그 이벤트를 구성합니다.

    Build the Axiom event for one request. Optional fields are only
    present when they carry a value.
    """
    event: dict[str, Any] = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if query_params:
        event["query_params"] = mask_sensitive(query_params)
    if error:
        event["error"] = truncate(error)
    return event


def error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유를 추출합니다 (Extract the ``detail`` of an error body)."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")
    if isinstance(data, dict) and "detail" in data:
        detail = data["detail"]
        return detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API request to Axiom.

    Args:
        app: ASGI 애플리케이션 (Wrapped ASGI application)
        client: Axiom 클라이언트, None이면 설정의 토큰으로 생성
                (Axiom client; built from settings when omitted)
        dataset: 데이터셋 이름, None이면 설정값 사용 (Dataset; defaults to settings)
    """

    def __init__(self, app: Any, client: Any | None = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._dataset: str = dataset if dataset is not None else settings.AXIOM_DATASET
        self._client: Any | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and self._dataset:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 및 Axiom 미설정시 패스스루 — Pass through skipped paths or without Axiom
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        query_params = dict(request.query_params) if request.query_params else None

        error: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            if status_code >= 400:
                body = b""
                async for chunk in response.body_iterator:
                    body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error = error_detail(body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap the consumed body
                response = Response(
                    content=body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
            raise
        finally:
            duration_ms = round((time.time() - start_time) * 1000, 2)
            event = build_event(
                request.method,
                request.url.path,
                status_code,
                duration_ms,
                query_params=query_params,
                error=error,
            )
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

        return response
