"""
Shared constants for the signup endpoints.
"""

# Characters a username may not contain.
FORBIDDEN_USERNAME_CHARACTERS = ("<", ">")

WELCOME_TEMPLATE = "<h1>Thank you {username}, your account has been registered!</h1>"

INVALID_USERNAME_MESSAGE = "Username contains invalid characters."

MALFORMED_REQUEST_MESSAGE = "malformed request"
