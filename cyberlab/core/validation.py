"""Conversion of pydantic validation errors into single human-readable messages.

Only the first error is ever reported. Pydantic reports field errors in
declaration order followed by unknown keys, which gives a stable
"first offending field" for every payload.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from cyberlab.core.exceptions import PayloadValidationError

ModelType = TypeVar("ModelType", bound=BaseModel)

# FastAPI prefixes request errors with the parameter source
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _label(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "value"


def _choices(expected: str) -> str:
    """Turn "'a', 'b' or 'c'" into "a, b, c"."""
    return expected.replace(" or ", ", ").replace("'", "")


def format_error(error: dict[str, Any]) -> str:
    """Render one pydantic error dict as a message."""
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "json_invalid":
        return "Request body is not valid JSON"

    field = _label(error.get("loc", ()))
    label = f'"{field}"'

    if kind == "missing":
        return f"{label} is required"
    if kind == "extra_forbidden":
        return f"{label} is not allowed"
    if kind == "string_too_short":
        if ctx.get("min_length", 1) <= 1:
            return f"{label} is not allowed to be empty"
        return f"{label} length must be at least {ctx['min_length']} characters long"
    if kind == "string_type":
        return f"{label} must be a string"
    if kind in ("int_type", "int_parsing", "float_type", "float_parsing"):
        return f"{label} must be a number"
    if kind == "int_from_float":
        return f"{label} must be an integer"
    if kind == "greater_than_equal":
        return f"{label} must be greater than or equal to {ctx['ge']}"
    if kind in ("dict_type", "model_type", "model_attributes_type"):
        return f"{label} must be of type object"
    if kind in ("enum", "literal_error"):
        return f"{label} must be one of [{_choices(ctx.get('expected', ''))}]"
    # EmailStr reports its reason in ctx, not an exception
    if kind == "value_error" and field.rsplit(".", 1)[-1] == "email":
        return f"{label} must be a valid email"
    if kind == "value_error" and "error" in ctx:
        return f"{label} {ctx['error']}"
    return f"{label} {error.get('msg', 'is invalid')}"


def first_error_message(errors: Sequence[dict[str, Any]]) -> str:
    """Message for the first error of a validation failure."""
    if not errors:
        return "Validation failed"
    return format_error(errors[0])


def validate_payload(model: type[ModelType], data: Any) -> ModelType:
    """Validate data against model, raising PayloadValidationError on failure."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PayloadValidationError(first_error_message(e.errors())) from e
