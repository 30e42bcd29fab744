import asyncio
from typing import Any, Callable, Dict, Optional

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response


class StubTokenEndpoint:
    """Records what the token endpoint received"""

    def __init__(self):
        self.requests: list[Dict[str, Any]] = []
        self.started = asyncio.Event()


def create_token_app(
    status_code: int,
    body: Any = None,
    hold: Optional[asyncio.Event] = None
) -> tuple[FastAPI, StubTokenEndpoint]:
    """
    Build a token endpoint answering every exchange with the given status/body
    If hold is given, the endpoint waits for it before answering
    """
    app = FastAPI()
    stub = StubTokenEndpoint()

    @app.post("/oauth/token")
    async def token_endpoint(request: Request) -> Response:
        form = await request.form()
        stub.requests.append({
            "content_type": request.headers.get("content-type"),
            "form": dict(form),
        })
        stub.started.set()

        if hold is not None:
            await hold.wait()

        if isinstance(body, (dict, list)):
            return JSONResponse(body, status_code=status_code)
        return PlainTextResponse(body or "", status_code=status_code)

    return app, stub


@pytest.fixture
def token_app() -> Callable[..., tuple[FastAPI, StubTokenEndpoint]]:
    return create_token_app


@pytest.fixture
def asgi_client() -> Callable[[FastAPI], httpx.AsyncClient]:
    def _factory(app: FastAPI) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app))

    return _factory
