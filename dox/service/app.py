"""FastAPI application entrypoint for dox service mode."""

from __future__ import annotations

from typing import Any, Dict, List

try:  # pragma: no cover - optional dependency
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse
    from pydantic import BaseModel

    _FASTAPI_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - service mode optional
    FastAPI = None  # type: ignore[assignment]
    JSONResponse = None  # type: ignore[assignment]
    BaseModel = object  # type: ignore[assignment]
    _FASTAPI_AVAILABLE = False

from ..api import render_api
from ..parser import ParseError, ParseOptions, parse_comments


class ParseRequest(BaseModel):
    source: str
    raw: bool = False


class ParseResponse(BaseModel):
    comments: List[Dict[str, Any]]


class ApiRequest(BaseModel):
    source: str


class ApiResponse(BaseModel):
    markdown: str


class HealthResponse(BaseModel):
    status: str


def create_app() -> FastAPI:
    """Create the FastAPI application exposing the comment parser."""

    if not _FASTAPI_AVAILABLE:  # pragma: no cover - validated via unit tests
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install dox[service]`."
        )

    app = FastAPI(title="Dox Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    # Parsing is CPU-bound and synchronous; plain handlers run in the threadpool.
    @app.post("/parse", response_model=ParseResponse)
    def parse(payload: ParseRequest) -> ParseResponse:
        comments = parse_comments(payload.source, ParseOptions(raw=payload.raw))
        return ParseResponse(comments=[comment.to_dict() for comment in comments])

    @app.post("/api", response_model=ApiResponse)
    def api_reference(payload: ApiRequest) -> ApiResponse:
        comments = parse_comments(payload.source, ParseOptions(raw=True))
        return ApiResponse(markdown=render_api(comments))

    @app.exception_handler(ParseError)
    async def parse_error_handler(
        _: Any, exc: ParseError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    if not _FASTAPI_AVAILABLE:
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install dox[service]`."
        )

    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install uvicorn`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
