"""OAuth 2.0 token endpoint response schemas (RFC 6749 Section 5)."""

from typing import Optional

from pydantic import Field

from oauth_token_exchange.oauth.constants import AccessTokenErrorCode
from oauth_token_exchange.oauth.schemas.base import (
    JsonInt,
    NonEmptyStr,
    OpenSchema,
    OptionalNonEmptyStr,
)


class AccessTokenSuccessResponse(OpenSchema):
    """OAuth 2.0 successful access token response (RFC 6749 Section 5.1)."""

    access_token: NonEmptyStr = Field(
        ...,
        description="Access token issued by the authorization server"
    )
    token_type: NonEmptyStr = Field(
        ...,
        description="Type of the issued token, case insensitive"
    )
    expires_in: Optional[JsonInt] = Field(
        default=None,
        description="Token lifetime in seconds"
    )
    refresh_token: OptionalNonEmptyStr = Field(
        default=None,
        description="Refresh token for the same authorization grant"
    )
    scope: OptionalNonEmptyStr = Field(
        default=None,
        description="Granted scope, required if it differs from the requested one"
    )


class AccessTokenErrorResponse(OpenSchema):
    """OAuth 2.0 error response (RFC 6749 Section 5.2)."""

    error: AccessTokenErrorCode = Field(..., description="Error code")
    error_description: OptionalNonEmptyStr = Field(
        default=None,
        description="Human-readable error description"
    )
    error_uri: OptionalNonEmptyStr = Field(
        default=None,
        description="URI of a web page describing the error"
    )
