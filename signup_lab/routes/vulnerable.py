"""
Vulnerable signup endpoint.

- POST /vulnerable/signup

The username is decoded as any JSON value. The validator only inspects
strings, so `{"username": ["<script>alert(1)</script>"], ...}` passes and the
markup lands in the response unescaped.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from signup_lab.routes.dependencies import signup_body, signup_openapi_body
from signup_lab.routes.responses import SIGNUP_RESPONSES, build_signup_response
from signup_lab.schemas.signup import VulnerableSignupRequest
from signup_lab.services import register_vulnerable_user

router = APIRouter(prefix="/vulnerable", tags=["vulnerable"])


@router.post(
    "/signup",
    responses=SIGNUP_RESPONSES,
    openapi_extra=signup_openapi_body(VulnerableSignupRequest),
    summary="Register an account (vulnerable)",
    description="""
    Register an account with a username that may be any JSON type.

    This endpoint:
    - Accepts strings, numbers, booleans, null, arrays and objects as username
    - Rejects string usernames containing '<' or '>'
    - Lets every non-string username through without checking it
    - Renders the username into HTML without escaping

    Decode failures (non-standard JSON, non-string password) return 400
    before this handler runs.
    """
)
async def vulnerable_signup(
    body: Annotated[VulnerableSignupRequest, Depends(signup_body(VulnerableSignupRequest))]
) -> Response:
    """
    Register an account through the vulnerable flow.

    Parse/Validate Request
    - signup_body decodes the raw body into VulnerableSignupRequest
    - username keeps its JSON type

    Call Service
    - register_vulnerable_user() validates and renders

    Map Output -> Response
    - build_signup_response()
    """
    result = register_vulnerable_user(body)
    return build_signup_response(result)
