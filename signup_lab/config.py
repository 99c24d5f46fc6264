"""
Configuration module for the signup lab.

Loads environment variables and validates the bind settings.
"""
import logging
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Server bind address
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: str = os.getenv("PORT", "8080")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def BIND_PORT(self) -> int:
        """Get the bind port as an integer."""
        return int(self.PORT)

    @classmethod
    def validate(cls) -> None:
        """
        Validate that the settings can be used to start the server.

        Raises:
            ValueError: If the port or log level is unusable.
        """
        problems = []

        try:
            port = int(cls.PORT)
        except ValueError:
            problems.append(f"PORT must be an integer, got {cls.PORT!r}")
        else:
            if not 0 < port < 65536:
                problems.append(f"PORT must be between 1 and 65535, got {port}")

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            problems.append(f"LOG_LEVEL is not a logging level: {cls.LOG_LEVEL!r}")

        if problems:
            raise ValueError(
                f"Invalid configuration: {'; '.join(problems)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The server may not start until you fix your .env file.")
        else:
            raise
