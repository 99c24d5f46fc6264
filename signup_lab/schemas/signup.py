"""
Pydantic schemas for the signup endpoints.

Both endpoints accept `{"username": ..., "password": ...}`. They differ only in
how narrowly `username` is decoded:

- VulnerableSignupRequest keeps whatever JSON value arrived (string, number,
  boolean, null, array or object).
- SecureSignupRequest requires a JSON string and fails to decode otherwise, so
  nothing downstream can see a non-string username.
"""

from pydantic import BaseModel, ConfigDict, Field, JsonValue, StrictStr


class VulnerableSignupRequest(BaseModel):
    """
    Request body for POST /vulnerable/signup.

    `username` is typed as any JSON value. Validation code that assumes a
    string can be walked around by sending an array or object instead.

    Limits on "any JSON value":
    - Nesting deeper than pydantic's recursion guard (about 250 levels of
      arrays or objects) fails with a recursion_loop error and is reported
      as malformed_request.
    - Non-finite numbers (NaN, Infinity) are not JSON and are rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        json_schema_extra={
            "examples": [
                {"username": "alice", "password": "hunter2"},
                {"username": ["<script>alert(1)</script>"], "password": "x"},
            ]
        },
    )

    username: JsonValue = Field(
        ...,
        description="Desired username. Any JSON type is accepted."
    )
    password: StrictStr = Field(..., description="Account password", repr=False)


class SecureSignupRequest(BaseModel):
    """
    Request body for POST /secure/signup.

    `username` must be a JSON string; numbers, booleans, null, arrays and
    objects are rejected while decoding the body.
    """

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        json_schema_extra={
            "examples": [
                {"username": "alice", "password": "hunter2"},
            ]
        },
    )

    username: StrictStr = Field(..., description="Desired username")
    password: StrictStr = Field(..., description="Account password", repr=False)


class DecodeErrorResponse(BaseModel):
    """
    Response body when a signup payload cannot be decoded.

    No pydantic error details are included.
    """

    error: str = Field(
        ...,
        description="Decode failure kind",
        examples=["malformed_request", "invalid_field_type"]
    )
    details: str = Field(..., examples=["malformed request"])
