"""OAuth 2.0 token exchange exceptions."""

from typing import Optional


class OAuth2Error(Exception):
    """Base OAuth2 error."""

    pass


class TokenExchangeError(OAuth2Error):
    """Raised when the token endpoint answers outside the protocol.

    RFC 8693 only defines 2xx and 4xx responses, so anything else is
    surfaced as-is instead of being mapped onto an error response.
    """

    def __init__(
        self,
        reason_phrase: str,
        status_code: Optional[int] = None,
        token_endpoint: Optional[str] = None
    ):
        # Non-standard statuses have an empty reason phrase
        message = reason_phrase if status_code is None else f"{status_code} {reason_phrase}".rstrip()
        super().__init__(message)
        self.reason_phrase = reason_phrase
        self.status_code = status_code
        self.token_endpoint = token_endpoint


class TokenExchangeCancelledError(OAuth2Error):
    """Raised when the caller's cancel event fires before a response."""

    def __init__(self, token_endpoint: Optional[str] = None):
        super().__init__("Token exchange cancelled")
        self.token_endpoint = token_endpoint


__all__ = [
    "OAuth2Error",
    "TokenExchangeError",
    "TokenExchangeCancelledError",
]
