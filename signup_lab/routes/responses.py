"""
Response mapping shared by the signup routers.
"""

from fastapi import status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from signup_lab.services import SignupResult
from signup_lab.utils.constants import INVALID_USERNAME_MESSAGE

# OpenAPI documentation for the responses both signup routes can return.
SIGNUP_RESPONSES = {
    200: {
        "description": "Account registered; body is the welcome HTML fragment",
        "content": {"text/html": {}},
    },
    400: {
        "description": (
            "Username contains forbidden characters (text/plain), or the body "
            "could not be decoded (application/json)"
        ),
        "content": {"text/plain": {}, "application/json": {}},
    },
}


def build_signup_response(result: SignupResult) -> Response:
    """
    Map a SignupResult to the HTTP response.

    - ACCEPTED → 200 text/html with the rendered body
    - REJECTED_VALIDATION → 400 text/plain with a fixed reason
    """
    if result.accepted:
        return HTMLResponse(content=result.body, status_code=status.HTTP_200_OK)

    return PlainTextResponse(
        content=INVALID_USERNAME_MESSAGE,
        status_code=status.HTTP_400_BAD_REQUEST,
    )
