import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_INPUT = "puzzle_input.txt"
DEFAULT_LOG_LEVEL = "INFO"


def load_env() -> None:
    """Load .env from the working directory if present.
    Values already in the environment take precedence.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def input_path() -> Path:
    return Path(os.getenv("AOC_INPUT") or DEFAULT_INPUT)


def log_level() -> str:
    return (os.getenv("AOC_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def log_dir() -> Optional[Path]:
    value = os.getenv("AOC_LOG_DIR")
    return Path(value) if value else None
