"""OAuth 2.0 response models and RFC 8693 token exchange."""

from oauth_token_exchange.oauth.client import exchange_token
from oauth_token_exchange.oauth.constants import (
    AccessTokenErrorCode,
    GrantType,
    TokenExchangeErrorCode,
    TokenType,
)
from oauth_token_exchange.oauth.errors import (
    OAuth2Error,
    TokenExchangeCancelledError,
    TokenExchangeError,
)
from oauth_token_exchange.oauth.result import (
    AccessTokenResponse,
    Failure,
    Result,
    Success,
    TokenExchangeResponse,
    err,
    ok,
    result_schema,
)
from oauth_token_exchange.oauth.schemas import (
    AccessTokenErrorResponse,
    AccessTokenSuccessResponse,
    OpenSchema,
    TokenExchangeErrorResponse,
    TokenExchangeSuccessResponse,
    extend_schema,
)

__all__ = [
    "exchange_token",
    "AccessTokenErrorCode",
    "GrantType",
    "TokenExchangeErrorCode",
    "TokenType",
    "OAuth2Error",
    "TokenExchangeCancelledError",
    "TokenExchangeError",
    "AccessTokenResponse",
    "Failure",
    "Result",
    "Success",
    "TokenExchangeResponse",
    "err",
    "ok",
    "result_schema",
    "AccessTokenErrorResponse",
    "AccessTokenSuccessResponse",
    "OpenSchema",
    "TokenExchangeErrorResponse",
    "TokenExchangeSuccessResponse",
    "extend_schema",
]
