"""
Secure signup endpoint.

- POST /secure/signup

The username is decoded as a string. Any other JSON type fails decoding with
400 before the handler runs, so the validator always sees text.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from signup_lab.routes.dependencies import signup_body, signup_openapi_body
from signup_lab.routes.responses import SIGNUP_RESPONSES, build_signup_response
from signup_lab.schemas.signup import SecureSignupRequest
from signup_lab.services import register_secure_user

router = APIRouter(prefix="/secure", tags=["secure"])


@router.post(
    "/signup",
    responses=SIGNUP_RESPONSES,
    openapi_extra=signup_openapi_body(SecureSignupRequest),
    summary="Register an account (secure)",
    description="""
    Register an account with a string username.

    This endpoint:
    - Rejects non-string usernames while decoding (400 invalid_field_type)
    - Rejects usernames containing '<' or '>'
    - Renders the username into HTML without escaping
    """
)
async def secure_signup(
    body: Annotated[SecureSignupRequest, Depends(signup_body(SecureSignupRequest))]
) -> Response:
    """Register an account through the secure flow."""
    result = register_secure_user(body)
    return build_signup_response(result)
