"""
Signup service.

Validates the decoded username and renders the welcome fragment for both
signup flows:

- Vulnerable flow: the username is any JSON value. Only strings are checked
  for forbidden characters; every other value passes unchecked and is then
  stringified into the HTML.
- Secure flow: the username is always a string, so the check always applies.

Neither flow escapes HTML in the rendered fragment.
"""

import json
from dataclasses import dataclass
from enum import Enum

from pydantic import JsonValue

from signup_lab.schemas.signup import SecureSignupRequest, VulnerableSignupRequest
from signup_lab.utils.constants import FORBIDDEN_USERNAME_CHARACTERS, WELCOME_TEMPLATE
from signup_lab.utils.logging import get_logger

logger = get_logger(__name__)


class SignupStatus(str, Enum):
    """Outcome of a decoded signup request."""

    ACCEPTED = "accepted"
    REJECTED_VALIDATION = "rejected_validation"


@dataclass(frozen=True)
class SignupResult:
    """Signup outcome plus the rendered body (empty when rejected)."""

    status: SignupStatus
    body: str = ""

    @property
    def accepted(self) -> bool:
        return self.status is SignupStatus.ACCEPTED


# --- Validators ---

def is_secure_username_valid(username: str) -> bool:
    """Return True if the username contains none of the forbidden characters."""
    return not any(char in username for char in FORBIDDEN_USERNAME_CHARACTERS)


def is_vulnerable_username_valid(username: JsonValue) -> bool:
    """
    Validate a username that may be any JSON value.

    Strings are checked for forbidden characters. Any other value (array,
    object, number, boolean, null) cannot be checked this way and is accepted
    as-is, which lets markup wrapped in an array reach the renderer.
    """
    if isinstance(username, str):
        return not any(char in username for char in FORBIDDEN_USERNAME_CHARACTERS)

    return True


# --- Rendering ---

def stringify_username(value: JsonValue) -> str:
    """
    Convert a JSON value to the text substituted into the welcome template.

    Rules:
    - string: its content, without quotes
    - null / true / false: the JSON literal
    - number: the JSON number literal
    - array with one element: that element, stringified (no brackets)
    - other arrays: "[a,b,...]" with each item stringified
    - object: "{key:value,...}" in insertion order, values stringified

    Args:
        value: A decoded JSON value

    Returns:
        The username text. Markup inside strings is kept verbatim.

    Raises:
        TypeError: If value is not a JSON value
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    # bool is checked before int (bool subclasses int)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, list):
        if len(value) == 1:
            return stringify_username(value[0])
        return "[" + ",".join(stringify_username(item) for item in value) + "]"
    if isinstance(value, dict):
        pairs = (f"{key}:{stringify_username(item)}" for key, item in value.items())
        return "{" + ",".join(pairs) + "}"

    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def render_welcome(username: str) -> str:
    """Substitute the username into the welcome template (no escaping)."""
    return WELCOME_TEMPLATE.format(username=username)


# --- Flows ---

def register_vulnerable_user(request: VulnerableSignupRequest) -> SignupResult:
    """
    Run validation and rendering for the vulnerable signup flow.

    Args:
        request: Decoded body whose username may be any JSON value

    Returns:
        SignupResult with ACCEPTED and the rendered HTML, or
        REJECTED_VALIDATION if a string username contains forbidden characters
    """
    logger.info(
        f"Vulnerable signup received: username={request.username!r} "
        f"(type={type(request.username).__name__})"
    )

    if not is_vulnerable_username_valid(request.username):
        logger.info("Vulnerable signup rejected: forbidden characters in username")
        return SignupResult(status=SignupStatus.REJECTED_VALIDATION)

    body = render_welcome(stringify_username(request.username))
    logger.info("Vulnerable signup accepted")

    return SignupResult(status=SignupStatus.ACCEPTED, body=body)


def register_secure_user(request: SecureSignupRequest) -> SignupResult:
    """
    Run validation and rendering for the secure signup flow.

    Args:
        request: Decoded body whose username is guaranteed to be a string

    Returns:
        SignupResult with ACCEPTED and the rendered HTML, or
        REJECTED_VALIDATION if the username contains forbidden characters
    """
    logger.info(f"Secure signup received: username={request.username!r}")

    if not is_secure_username_valid(request.username):
        logger.info("Secure signup rejected: forbidden characters in username")
        return SignupResult(status=SignupStatus.REJECTED_VALIDATION)

    body = render_welcome(request.username)
    logger.info("Secure signup accepted")

    return SignupResult(status=SignupStatus.ACCEPTED, body=body)
