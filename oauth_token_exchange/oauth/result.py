"""Tagged success/error result wrapper."""

from typing import Annotated, Any, Generic, Literal, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter

from oauth_token_exchange.oauth.schemas.exchange import (
    TokenExchangeErrorResponse,
    TokenExchangeSuccessResponse,
)
from oauth_token_exchange.oauth.schemas.token import (
    AccessTokenErrorResponse,
    AccessTokenSuccessResponse,
)

SuccessT = TypeVar("SuccessT")
ErrorT = TypeVar("ErrorT")


class Success(BaseModel, Generic[SuccessT]):
    """Success arm: ``{"success": true, "value": <success>}``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: Literal[True] = True
    value: SuccessT


class Failure(BaseModel, Generic[ErrorT]):
    """Error arm: ``{"success": false, "value": <error>}``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: Literal[False] = False
    value: ErrorT


Result = Union[Success, Failure]


def _result_tag(data: Any) -> Optional[str]:
    """Pick the arm from the boolean ``success`` tag, before ``value`` is looked at."""
    if isinstance(data, dict):
        tag = data.get("success")
    else:
        tag = getattr(data, "success", None)

    # Only real booleans select an arm; 1, "true" etc. do not
    if tag is True:
        return "success"
    if tag is False:
        return "failure"
    return None


def result_schema(
    success_schema: Type[Any],
    error_schema: Type[Any]
) -> TypeAdapter:
    """
    Combine a success schema and an error schema into one result schema.

    The combined schema accepts ``{"success": true, "value": <success>}`` or
    ``{"success": false, "value": <error>}`` and nothing else. ``value`` is
    validated only against the schema selected by the tag, so an error body
    under ``success: true`` fails even though it is a valid error.

    Args:
        success_schema: Schema for the success value
        error_schema: Schema for the error value

    Returns:
        TypeAdapter validating either arm
    """
    return TypeAdapter(
        Annotated[
            Union[
                Annotated[Success[success_schema], Tag("success")],
                Annotated[Failure[error_schema], Tag("failure")],
            ],
            Discriminator(
                _result_tag,
                custom_error_type="invalid_result_tag",
                custom_error_message="Expected a boolean 'success' tag",
            ),
        ]
    )


def ok(value: Any) -> Success:
    """Wrap a success value."""
    return Success(value=value)


def err(value: Any) -> Failure:
    """Wrap an error value."""
    return Failure(value=value)


AccessTokenResponse = result_schema(
    AccessTokenSuccessResponse,
    AccessTokenErrorResponse
)

TokenExchangeResponse = result_schema(
    TokenExchangeSuccessResponse,
    TokenExchangeErrorResponse
)
