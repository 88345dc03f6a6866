from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Type

from smart_tags.errors import DocumentIOError, PathError

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def read_text_utf8(p: Path, *, error: Type[PathError] = DocumentIOError) -> str:
    try:
        data = p.read_bytes()
        return data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise error("read", p, e) from e

def _default_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask

def write_text_utf8(p: Path, s: str, *, error: Type[PathError] = DocumentIOError) -> None:
    """
    Replace p with s in one step: write a sibling temp file, then os.replace.
    Readers see either the old content or the new one, never a mix.
    Symlinks are followed and an existing file keeps its permission bits.
    """
    target = p.resolve()
    tmp_name = None
    try:
        ensure_dir(target.parent)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(s)
        if target.exists():
            shutil.copymode(target, tmp_name)
        else:
            os.chmod(tmp_name, _default_mode())
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise error("write", p, e) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
