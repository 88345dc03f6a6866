from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

DB_ENV = "SMART_TAGS_DB"
DEFAULT_DB = "tags_db.json"

@dataclass(frozen=True)
class RunConfig:
    document: Path
    tags: Tuple[str, ...]
    db_path: Path
    dry_run: bool = False        # resolve and report, write nothing

def resolve_db_path(flag: Optional[str], environ: Optional[Mapping[str, str]] = None) -> Path:
    """--db flag, then $SMART_TAGS_DB, then ./tags_db.json."""
    env = os.environ if environ is None else environ
    raw = flag or env.get(DB_ENV) or DEFAULT_DB
    return Path(raw).expanduser()
