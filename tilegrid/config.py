"""
tilegrid Configuration

Loads configuration from environment variables with sensible defaults.
Library functions never read this; it drives the CLI and logging helpers.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = os.getenv("TILEGRID_LOG_LEVEL", "INFO").upper()
    # Any non-empty value disables ANSI colours
    NO_COLOR: bool = bool(os.getenv("TILEGRID_NO_COLOR"))

    # CLI defaults
    DIAGONAL_MOVEMENT: bool = _env_flag("TILEGRID_DIAGONAL_MOVEMENT")

    @classmethod
    def reload(cls) -> None:
        """Re-read values from the process environment."""
        cls.LOG_LEVEL = os.getenv("TILEGRID_LOG_LEVEL", "INFO").upper()
        cls.NO_COLOR = bool(os.getenv("TILEGRID_NO_COLOR"))
        cls.DIAGONAL_MOVEMENT = _env_flag("TILEGRID_DIAGONAL_MOVEMENT")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"TILEGRID_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got {cls.LOG_LEVEL!r}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "tilegrid Configuration:",
            f"  Log Level: {cls.LOG_LEVEL}",
            f"  Colors: {'off' if cls.NO_COLOR else 'on'}",
            f"  Diagonal Movement: {'on' if cls.DIAGONAL_MOVEMENT else 'off'}",
        ]
        return "\n".join(lines)
