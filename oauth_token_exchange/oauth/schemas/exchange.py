"""Token exchange response schemas (RFC 8693 Section 2.2)."""

from pydantic import Field

from oauth_token_exchange.oauth.constants import TokenExchangeErrorCode
from oauth_token_exchange.oauth.schemas.base import (
    OpenSchema,
    OptionalNonEmptyStr,
    extend_schema,
)
from oauth_token_exchange.oauth.schemas.token import AccessTokenSuccessResponse

# RFC 8693 marks issued_token_type REQUIRED, but servers that answer with a
# plain RFC 6749 body are still accepted.
TokenExchangeSuccessResponse = extend_schema(
    AccessTokenSuccessResponse,
    "TokenExchangeSuccessResponse",
    issued_token_type=(
        OptionalNonEmptyStr,
        Field(default=None, description="Token type identifier of the issued token")
    ),
)


class TokenExchangeErrorResponse(OpenSchema):
    """Token exchange error response (RFC 8693 Section 2.2.2)."""

    error: TokenExchangeErrorCode = Field(..., description="Error code")
    error_description: OptionalNonEmptyStr = Field(
        default=None,
        description="Human-readable error description"
    )
    error_uri: OptionalNonEmptyStr = Field(
        default=None,
        description="URI of a web page describing the error"
    )
