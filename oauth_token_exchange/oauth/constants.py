"""IETF-registered OAuth 2.0 identifiers."""

from enum import Enum


class GrantType(str, Enum):
    """Extension grant types (RFC 6749 Section 4.5)."""

    # RFC 8628 Section 3.4
    DEVICE_CODE = "urn:ietf:params:oauth:grant-type:device_code"
    # RFC 7523 Section 2.1
    JWT_BEARER = "urn:ietf:params:oauth:grant-type:jwt-bearer"
    # RFC 7522 Section 2.1
    SAML2_BEARER = "urn:ietf:params:oauth:grant-type:saml2-bearer"
    # RFC 8693
    TOKEN_EXCHANGE = "urn:ietf:params:oauth:grant-type:token-exchange"


class TokenType(str, Enum):
    """Token type identifiers (RFC 8693 Section 3)."""

    ACCESS_TOKEN = "urn:ietf:params:oauth:token-type:access_token"
    ID_TOKEN = "urn:ietf:params:oauth:token-type:id_token"
    JWT = "urn:ietf:params:oauth:token-type:jwt"
    REFRESH_TOKEN = "urn:ietf:params:oauth:token-type:refresh_token"
    # base64url-encoded SAML 1.1 / 2.0 assertions
    SAML1 = "urn:ietf:params:oauth:token-type:saml1"
    SAML2 = "urn:ietf:params:oauth:token-type:saml2"


class AccessTokenErrorCode(str, Enum):
    """Token endpoint error codes (RFC 6749 Section 5.2)."""

    INVALID_CLIENT = "invalid_client"
    INVALID_GRANT = "invalid_grant"
    INVALID_REQUEST = "invalid_request"
    INVALID_SCOPE = "invalid_scope"
    UNAUTHORIZED_CLIENT = "unauthorized_client"
    UNSUPPORTED_GRANT_TYPE = "unsupported_grant_type"


class TokenExchangeErrorCode(str, Enum):
    """Token exchange error codes (RFC 8693 Section 2.2.2).

    RFC 6749 codes plus ``invalid_target``, returned when the requested
    audience or resource is unknown or unacceptable to the server.
    """

    INVALID_CLIENT = "invalid_client"
    INVALID_GRANT = "invalid_grant"
    INVALID_REQUEST = "invalid_request"
    INVALID_SCOPE = "invalid_scope"
    UNAUTHORIZED_CLIENT = "unauthorized_client"
    UNSUPPORTED_GRANT_TYPE = "unsupported_grant_type"
    INVALID_TARGET = "invalid_target"
