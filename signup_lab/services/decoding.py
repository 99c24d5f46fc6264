"""
Decoding of signup payloads into request models.

Every signup request body goes through decode_signup_payload, in two steps:

1. Parse the bytes as standard JSON. NaN/Infinity literals, duplicate object
   keys, invalid encodings and nesting deeper than the parser can follow are
   rejected here.
2. Validate the parsed value against the route's pydantic model.

Failures are reported as one of two kinds:

- malformed_request: the body is not standard JSON, not an object, or misses
  a field
- invalid_field_type: every problem is a field holding the wrong JSON type
"""

import json
from enum import Enum
from typing import Any, List, Mapping, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class DecodeErrorKind(str, Enum):
    """Kinds of decode failure reported to clients."""

    MALFORMED_REQUEST = "malformed_request"
    INVALID_FIELD_TYPE = "invalid_field_type"


class SignupDecodeError(Exception):
    """Raised when a payload cannot be decoded into a signup model."""

    def __init__(self, kind: DecodeErrorKind, error_types: Sequence[str]):
        self.kind = kind
        self.error_types = list(error_types)
        super().__init__(f"{kind.value}: {', '.join(self.error_types)}")


class _NonStandardJSON(ValueError):
    """Raised by the parser hooks for JSON that a strict parser would refuse."""

    def __init__(self, error_type: str, message: str):
        self.error_type = error_type
        super().__init__(message)


def _reject_constant(name: str) -> Any:
    raise _NonStandardJSON("json_non_standard_constant", f"{name} is not valid JSON")


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> dict:
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise _NonStandardJSON("json_duplicate_key", f"Duplicate key: {key!r}")
        obj[key] = value
    return obj


def parse_json_payload(payload: bytes) -> Any:
    """
    Parse a request body as standard JSON.

    Args:
        payload: Untrusted request body

    Returns:
        The parsed JSON value (any type, not only objects)

    Raises:
        SignupDecodeError: MALFORMED_REQUEST if the body is not standard JSON
    """
    try:
        return json.loads(
            payload,
            parse_constant=_reject_constant,
            object_pairs_hook=_reject_duplicate_keys,
        )
    except _NonStandardJSON as e:
        raise SignupDecodeError(DecodeErrorKind.MALFORMED_REQUEST, [e.error_type]) from e
    except RecursionError as e:
        raise SignupDecodeError(DecodeErrorKind.MALFORMED_REQUEST, ["json_too_deep"]) from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise SignupDecodeError(DecodeErrorKind.MALFORMED_REQUEST, ["json_invalid"]) from e


def _is_field_type_error(error: Mapping[str, Any]) -> bool:
    loc = tuple(error.get("loc", ()))
    error_type = str(error.get("type", ""))
    return (
        error_type.endswith("_type")
        and len(loc) > 0
        and isinstance(loc[0], str)
    )


def classify_decode_errors(errors: Sequence[Mapping[str, Any]]) -> DecodeErrorKind:
    """
    Map pydantic error entries to a DecodeErrorKind.

    Args:
        errors: Entries from ValidationError.errors()

    Returns:
        INVALID_FIELD_TYPE when every entry is a wrong-type error on a named
        field, MALFORMED_REQUEST otherwise (including an empty list).
    """
    if errors and all(_is_field_type_error(error) for error in errors):
        return DecodeErrorKind.INVALID_FIELD_TYPE
    return DecodeErrorKind.MALFORMED_REQUEST


def decode_signup_payload(payload: bytes, model: Type[ModelT]) -> ModelT:
    """
    Decode raw JSON bytes into the given signup model.

    Args:
        payload: Untrusted request body
        model: VulnerableSignupRequest or SecureSignupRequest

    Returns:
        The decoded model instance

    Raises:
        SignupDecodeError: If the payload is not standard JSON or does not
            match the model
    """
    data = parse_json_payload(payload)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        raise SignupDecodeError(
            classify_decode_errors(errors),
            [str(error["type"]) for error in errors],
        ) from e
