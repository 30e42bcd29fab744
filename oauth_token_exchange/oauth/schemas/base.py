"""Open schema base and schema extension."""

from typing import Annotated, Any, Optional, Type, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StringConstraints,
    create_model,
)

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalNonEmptyStr = Optional[NonEmptyStr]


def _require_number(value: Any) -> Any:
    if isinstance(value, (str, bool)):
        raise ValueError("Input should be a JSON number")
    return value


# JSON numbers with an integral value: 3600 and 3600.0, not "3600", 3600.5 or true
JsonInt = Annotated[int, BeforeValidator(_require_number)]

SchemaT = TypeVar("SchemaT", bound="OpenSchema")


class OpenSchema(BaseModel):
    """Immutable response schema that keeps undeclared fields.

    Providers routinely add proprietary members to standard responses, so
    unknown keys are neither rejected nor stripped: they stay available via
    ``model_extra``, attribute access and ``model_dump()``.
    """

    model_config = ConfigDict(extra="allow", frozen=True)


def extend_schema(
    base: Type[SchemaT],
    schema_name: str,
    **fields: Any
) -> Type[SchemaT]:
    """
    Derive a new schema from ``base`` with additional fields.

    The derived schema enforces every constraint of ``base`` plus those of
    the new fields, and still accepts unknown keys. ``base`` itself is left
    untouched.

    Args:
        base: Schema to extend
        schema_name: Class name of the derived schema
        **fields: New fields, as ``(annotation, default)`` tuples (use ``...``
            for required) or bare annotations (required)

    Returns:
        The derived schema class

    Raises:
        ValueError: If a field is already declared on ``base``
    """
    redeclared = sorted(set(fields) & set(base.model_fields))
    if redeclared:
        raise ValueError(
            f"{base.__name__} already declares {', '.join(redeclared)}"
        )

    definitions = {
        name: field if isinstance(field, tuple) else (field, ...)
        for name, field in fields.items()
    }
    return create_model(schema_name, __base__=base, **definitions)
