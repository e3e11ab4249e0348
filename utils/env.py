import math
import os
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

console = Console()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def load_env(env_path=None):
    """Load the optional `.env` file at the project root."""
    load_dotenv(dotenv_path=env_path or PROJECT_ROOT / ".env")


def get_float_env(name, default):
    """Read a positive float from the environment, exiting on bad input."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return float(default)
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if not math.isfinite(value) or value <= 0:
        console.print(
            f"[bold red]❌ Invalid value for {name}: {raw!r} (expected a positive number)[/bold red]"
        )
        exit(1)
    return value
