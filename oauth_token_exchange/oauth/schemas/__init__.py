"""OAuth 2.0 response schemas."""

from oauth_token_exchange.oauth.schemas.base import (
    JsonInt,
    NonEmptyStr,
    OpenSchema,
    OptionalNonEmptyStr,
    extend_schema,
)
from oauth_token_exchange.oauth.schemas.exchange import (
    TokenExchangeErrorResponse,
    TokenExchangeSuccessResponse,
)
from oauth_token_exchange.oauth.schemas.token import (
    AccessTokenErrorResponse,
    AccessTokenSuccessResponse,
)

__all__ = [
    "JsonInt",
    "NonEmptyStr",
    "OpenSchema",
    "OptionalNonEmptyStr",
    "extend_schema",
    "AccessTokenSuccessResponse",
    "AccessTokenErrorResponse",
    "TokenExchangeSuccessResponse",
    "TokenExchangeErrorResponse",
]
