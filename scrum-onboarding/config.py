import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Explicitly load .env from the app directory (works regardless of cwd)
_env_path = Path(__file__).parent / ".env"
load_dotenv(_env_path)

logger = logging.getLogger(__name__)


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("config: %s=%r is not a number, using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("config: %s=%r is negative, using %s", name, raw, default)
        return default
    return value


# Fixed six-stage onboarding sequence
TOTAL_STEPS = 6

# Seconds the dashboard waits before analytics are shown as ready
ANALYTICS_DELAY_SECONDS = _float_env("ANALYTICS_DELAY_SECONDS", 2.0)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def _level_number(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        logger.warning("config: unknown log level %r, using INFO", name)
        return logging.INFO
    return level


def configure_logging(level: str | None = None, force: bool = False) -> None:
    """Apply LOG_LEVEL (or ``level``) to the root logger. Call once from the host application."""
    logging.basicConfig(
        level=_level_number(level or LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=force,
    )
