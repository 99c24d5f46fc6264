"""
Service layer for the signup lab.

Contains the logic behind the routes:
- Decodes request bodies and classifies decode failures
- Validates usernames for the vulnerable and secure flows
- Renders the welcome fragment

Services do not touch HTTP objects; routes map SignupResult to responses.
"""

from .decoding import (
    DecodeErrorKind,
    SignupDecodeError,
    classify_decode_errors,
    decode_signup_payload,
    parse_json_payload,
)
from .signup_service import (
    SignupResult,
    SignupStatus,
    is_secure_username_valid,
    is_vulnerable_username_valid,
    register_secure_user,
    register_vulnerable_user,
    render_welcome,
    stringify_username,
)

__all__ = [
    "DecodeErrorKind",
    "SignupDecodeError",
    "classify_decode_errors",
    "decode_signup_payload",
    "parse_json_payload",
    "SignupResult",
    "SignupStatus",
    "is_secure_username_valid",
    "is_vulnerable_username_valid",
    "register_secure_user",
    "register_vulnerable_user",
    "render_welcome",
    "stringify_username",
]
