"""
FastAPI routers for the signup endpoints.

Each module defines a router for one signup flow (vulnerable, secure).
Both routers map service results to responses through build_signup_response.
"""
