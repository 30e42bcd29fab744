"""OAuth 2.0 Token Exchange (RFC 8693) client."""

import asyncio
import contextlib
import logging
from typing import Awaitable, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from oauth_token_exchange.config import get_settings
from oauth_token_exchange.oauth.constants import GrantType, TokenType
from oauth_token_exchange.oauth.errors import (
    TokenExchangeCancelledError,
    TokenExchangeError,
)
from oauth_token_exchange.oauth.result import Failure, Result, Success
from oauth_token_exchange.oauth.schemas.exchange import (
    TokenExchangeErrorResponse,
    TokenExchangeSuccessResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def exchange_token(
    access_token: str,
    client_id: str,
    token_endpoint: str,
    cancel_event: Optional[asyncio.Event] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
    success_schema: Type[BaseModel] = TokenExchangeSuccessResponse,
    error_schema: Type[BaseModel] = TokenExchangeErrorResponse
) -> Result:
    """
    Exchange an access token for one issued by another authority.

    Sends a single token exchange request; retrying is left to the caller.

    Args:
        access_token: Subject access token to exchange
        client_id: Client identifier at the target token endpoint
        token_endpoint: Target token endpoint URL
        cancel_event: Aborts the in-flight request when set
        http_client: Client to send the request with; a short-lived client
            is opened when omitted
        success_schema: Schema for 2xx response bodies
        error_schema: Schema for 4xx response bodies

    Returns:
        Success with the validated token response, or Failure with the
        validated error response

    Raises:
        TokenExchangeError: If the status code is neither 2xx nor 4xx
        TokenExchangeCancelledError: If cancel_event fires first
        pydantic.ValidationError: If the body does not match its schema
        httpx.HTTPError: If the request fails at the transport level
    """
    data = {
        "client_id": client_id,
        "grant_type": GrantType.TOKEN_EXCHANGE.value,
        "subject_token": access_token,
        "subject_token_type": TokenType.ACCESS_TOKEN.value
    }
    headers = {"Content-Type": "application/x-www-form-urlencoded"}

    if cancel_event is not None and cancel_event.is_set():
        raise TokenExchangeCancelledError(token_endpoint)

    logger.debug(f"Exchanging token for client {client_id} at {token_endpoint}")

    if http_client is None:
        async with httpx.AsyncClient(timeout=get_settings().HTTP_TIMEOUT) as client:
            response = await _cancellable(
                client.post(token_endpoint, data=data, headers=headers),
                cancel_event,
                token_endpoint
            )
    else:
        response = await _cancellable(
            http_client.post(token_endpoint, data=data, headers=headers),
            cancel_event,
            token_endpoint
        )

    logger.debug(f"Token endpoint {token_endpoint} answered {response.status_code}")

    if 400 <= response.status_code < 500:
        return Failure[error_schema](
            value=error_schema.model_validate_json(response.content)
        )

    if 200 <= response.status_code < 300:
        return Success[success_schema](
            value=success_schema.model_validate_json(response.content)
        )

    logger.warning(
        f"Unexpected status {response.status_code} from token endpoint {token_endpoint}"
    )
    raise TokenExchangeError(
        response.reason_phrase,
        status_code=response.status_code,
        token_endpoint=token_endpoint
    )


async def _cancellable(
    request: Awaitable[T],
    cancel_event: Optional[asyncio.Event],
    token_endpoint: str
) -> T:
    """Await ``request``, cancelling it if ``cancel_event`` is set first."""
    if cancel_event is None:
        return await request

    request_task = asyncio.ensure_future(request)
    cancel_task = asyncio.ensure_future(cancel_event.wait())
    try:
        await asyncio.wait(
            {request_task, cancel_task},
            return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        cancel_task.cancel()
        if not request_task.done():
            request_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await request_task

    if request_task.cancelled():
        logger.info(f"Token exchange at {token_endpoint} cancelled")
        raise TokenExchangeCancelledError(token_endpoint)

    return request_task.result()
