from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "SMART_TAGS_LOG_LEVEL"

def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

def get_logger(name: str = "smart_tags") -> logging.Logger:
    log = logging.getLogger(name)
    if log.handlers:
        return log
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    log.addHandler(h)
    log.setLevel(_level_from_env())
    return log
