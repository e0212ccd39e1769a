"""
Configuration settings for the literal-support utilities.

**Conceptual**: This module provides a strongly-typed configuration object that
loads from environment variables (via .env files). Settings are validated at
load time, so a typo such as LITERALS_CLOCK_SOURCE=monotonc fails at startup
instead of silently falling back to another clock.

**Environment variables** (all optional):
  - LITERALS_CLOCK_SOURCE: "auto" (default), "monotonic" or "wall".
  - LITERALS_LOG_LEVEL: Standard logging level name (default "INFO").

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); existing variables win.
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / ".env")

CLOCK_SOURCES = ("auto", "monotonic", "wall")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the literal-support utilities.

    Attributes:
        clock_source: Which timestamp source the process clock binds to.
                      "auto" picks the high-resolution monotonic timer when the
                      host exposes one and the wall clock otherwise.
        log_level: Level name passed to configure_logging().
    """
    clock_source: str = "auto"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.clock_source not in CLOCK_SOURCES:
            raise ValueError(
                f"LITERALS_CLOCK_SOURCE must be one of {', '.join(CLOCK_SOURCES)}, "
                f"got: {self.clock_source!r}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"LITERALS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got: {self.log_level!r}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If a variable is set to an unsupported value.

        Usage example:
            >>> # In .env file:
            >>> # LITERALS_CLOCK_SOURCE=wall
            >>>
            >>> settings = Settings.from_env()
            >>> print(settings.clock_source)  # "wall"
        """
        clock_source = os.getenv("LITERALS_CLOCK_SOURCE", "auto").strip().lower()
        log_level = os.getenv("LITERALS_LOG_LEVEL", "INFO").strip().upper()

        return cls(clock_source=clock_source, log_level=log_level)


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.
    Tests can bypass this by constructing Settings(...) directly, or call
    reset_settings() after changing environment variables.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("LITERALS_CLOCK_SOURCE", "wall")
          reset_settings()
          assert get_settings().clock_source == "wall"
      ```
    """
    global _default_settings
    _default_settings = None
