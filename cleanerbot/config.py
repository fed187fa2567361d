"""
Cleanerbot Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Grid defaults used when no layout or size is given on the command line
    GRID_WIDTH: int = int(os.getenv("CLEANERBOT_GRID_WIDTH", "10"))
    GRID_HEIGHT: int = int(os.getenv("CLEANERBOT_GRID_HEIGHT", "6"))

    # Strategy picked when the prompt is skipped
    STRATEGY: str = os.getenv("CLEANERBOT_STRATEGY", "perimeter")

    # Rendering
    STEP_DELAY_SECONDS: float = float(os.getenv("CLEANERBOT_STEP_DELAY", "0.2"))
    CLEAR_SCREEN: bool = _env_flag("CLEANERBOT_CLEAR_SCREEN", "true")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LAYOUTS_DIR: Path = PROJECT_ROOT / "examples" / "layouts"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.GRID_WIDTH <= 0 or cls.GRID_HEIGHT <= 0:
            raise ValueError(
                "CLEANERBOT_GRID_WIDTH and CLEANERBOT_GRID_HEIGHT must be positive "
                f"(got {cls.GRID_WIDTH}x{cls.GRID_HEIGHT})"
            )

        if cls.STEP_DELAY_SECONDS < 0:
            raise ValueError(
                f"CLEANERBOT_STEP_DELAY must not be negative (got {cls.STEP_DELAY_SECONDS})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Cleanerbot Configuration:",
            f"  Grid: {cls.GRID_WIDTH}x{cls.GRID_HEIGHT}",
            f"  Strategy: {cls.STRATEGY}",
            f"  Step Delay: {cls.STEP_DELAY_SECONDS}s",
            f"  Clear Screen: {cls.CLEAR_SCREEN}",
        ]
        return "\n".join(lines)
