"""
Pydantic schemas for the signup request bodies.

The vulnerable model deliberately uses `JsonValue` for the username. Every
other field is a strict string.
"""
