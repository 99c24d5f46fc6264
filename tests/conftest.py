"""
Pytest configuration for the signup lab tests.

Sets up the test environment and global fixtures.
"""
import os
import pytest

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "INFO")

from fastapi.testclient import TestClient  # noqa: E402

from signup_lab.main import app  # noqa: E402


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def array_xss_body():
    """The type-confusion payload: markup wrapped in a one-element array."""
    return {"username": ["<script>alert(1)</script>"], "password": "x"}
