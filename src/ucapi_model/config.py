"""Environment configuration for the model package.

Values are read once at import time. A ``.env`` file in the working directory
is read with python-dotenv as a fallback for variables missing from the
process environment. Its values are never copied into ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import dotenv

# values only, os.environ is not modified
_dotenv = dotenv.dotenv_values(".env")

LOG_LEVEL_ENV = "UCAPI_MODEL_LOG_LEVEL"
LOG_DIR_ENV = "UCAPI_MODEL_LOG_DIR"

LOG_LEVEL: str = os.getenv(LOG_LEVEL_ENV) or _dotenv.get(LOG_LEVEL_ENV) or "INFO"
# unset -> stream only, no log files
LOG_DIR: Optional[str] = os.getenv(LOG_DIR_ENV) or _dotenv.get(LOG_DIR_ENV) or None


def get_log_level(name: Optional[str] = None) -> int:
    """Resolve a level name (e.g. ``"debug"``) to a ``logging`` level.

    Unknown names fall back to ``logging.INFO``.
    """
    level = logging.getLevelName((name or LOG_LEVEL).upper())
    if isinstance(level, int):
        return level
    return logging.INFO
