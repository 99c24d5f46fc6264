"""
Signup type-confusion lab.

Two signup endpoints that accept the same payload shape: one decodes the
username as any JSON value and validates it loosely, the other narrows it to a
string at the request boundary.
"""

__version__ = "0.1.0"
