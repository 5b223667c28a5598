"""
Pipeloop Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Input map read when no path is given on the command line
    INPUT_PATH: Path = Path(os.getenv("PIPELOOP_INPUT_PATH", "input.txt"))

    # Traversal bound; None means "number of tiles in the map"
    MAX_ROUNDS: int | None = _env_int("PIPELOOP_MAX_ROUNDS")

    # Print every traversal round
    VERBOSE: bool = _env_flag("PIPELOOP_VERBOSE")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    SAMPLES_DIR: Path = PROJECT_ROOT / "examples" / "maps"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.MAX_ROUNDS is not None and cls.MAX_ROUNDS <= 0:
            raise ValueError(
                "PIPELOOP_MAX_ROUNDS must be a positive integer. "
                "Unset it to bound traversal by the map's tile count."
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Pipeloop Configuration:",
            f"  Input: {cls.INPUT_PATH}",
            f"  Max Rounds: {cls.MAX_ROUNDS if cls.MAX_ROUNDS is not None else 'tile count'}",
            f"  Verbose: {cls.VERBOSE}",
        ]
        return "\n".join(lines)
