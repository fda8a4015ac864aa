# maze_config.py
import os
import logging

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer; using default {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={value} must be positive; using default {default}")
        return default
    return value


# --- Settings (override through the environment or a .env file) ---
RENDER_LIMIT = _int_setting("MAZE_RENDER_LIMIT", 25)  # print ASCII only when rows and cols are below this
MAX_CELLS = _int_setting("MAZE_MAX_CELLS", 4_000_000)  # refuse grids larger than this many cells
LOG_LEVEL = os.getenv("MAZE_LOG_LEVEL", "WARNING").upper()
