"""
FastAPI dependencies for the signup routes.

The signup routes do not declare a pydantic body parameter. They depend on
signup_body(Model) instead, which decodes the raw body with
decode_signup_payload. A decode failure raises SignupDecodeError before the
route handler runs; main.py maps it to a 400 response.
"""

from typing import Awaitable, Callable, Type

from fastapi import Request

from signup_lab.services.decoding import ModelT, decode_signup_payload


def signup_body(model: Type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Build a dependency that decodes the request body into `model`.

    Usage:
        >>> body: Annotated[SecureSignupRequest, Depends(signup_body(SecureSignupRequest))]
    """
    async def decode_body(request: Request) -> ModelT:
        return decode_signup_payload(await request.body(), model)

    return decode_body


def signup_openapi_body(model: Type[ModelT]) -> dict:
    """OpenAPI requestBody for a route whose body is decoded by signup_body."""
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": model.model_json_schema()}
            },
        }
    }
