"""
FastAPI application entry point for the signup lab.

This module creates the FastAPI app instance, registers the two signup
routers and maps request decode failures to 400 responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from signup_lab import __version__
from signup_lab.config import settings
from signup_lab.routes.secure import router as secure_router
from signup_lab.routes.vulnerable import router as vulnerable_router
from signup_lab.schemas.signup import DecodeErrorResponse
from signup_lab.services import SignupDecodeError
from signup_lab.utils.constants import MALFORMED_REQUEST_MESSAGE
from signup_lab.utils.logging import get_logger

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Signup Type Confusion Lab",
    description=(
        "Vulnerable and secure signup endpoints showing how a username "
        "accepted as any JSON type bypasses a string-only validator"
    ),
    version=__version__,
    docs_url=None if settings.is_production() else "/docs",
    redoc_url=None if settings.is_production() else "/redoc"
)


@app.exception_handler(SignupDecodeError)
async def decode_exception_handler(request: Request, exc: SignupDecodeError):
    """
    Reject bodies that cannot be decoded into the route's request model.

    The client gets the failure kind only; error types stay in the log.
    The raw body is never logged since it carries the password.
    """
    logger.warning(
        f"Decode error on {request.method} {request.url.path}: "
        f"kind={exc.kind.value} types={exc.error_types}"
    )

    content = DecodeErrorResponse(error=exc.kind.value, details=MALFORMED_REQUEST_MESSAGE)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=content.model_dump()
    )


# Register routers
app.include_router(vulnerable_router)
app.include_router(secure_router)

logger.info("FastAPI app initialized successfully")
