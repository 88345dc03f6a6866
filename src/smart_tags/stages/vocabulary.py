from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from smart_tags.errors import StoreIOError
from smart_tags.io.fs import read_text_utf8, write_text_utf8
from smart_tags.logging import get_logger

log = get_logger()

@dataclass
class TagEntry:
    name: str
    aliases: List[str] = field(default_factory=list)

    def matches(self, raw: str) -> bool:
        return raw == self.name or raw in self.aliases

    def to_dict(self) -> dict:
        # key order is part of the on-disk format
        return {"name": self.name, "aliases": list(self.aliases)}

@dataclass
class Vocabulary:
    tags: List[TagEntry] = field(default_factory=list)

    def find(self, raw: str) -> Optional[TagEntry]:
        for entry in self.tags:
            if entry.matches(raw):
                return entry
        return None

    def to_dict(self) -> dict:
        return {"tags": [e.to_dict() for e in self.tags]}

def _entry_from_obj(obj: Any) -> TagEntry:
    if not isinstance(obj, dict) or not isinstance(obj.get("name"), str):
        raise ValueError(f"not a tag entry: {obj!r}")
    aliases = obj.get("aliases") or []
    if not isinstance(aliases, list):
        raise ValueError(f"aliases must be a list: {aliases!r}")
    return TagEntry(name=obj["name"], aliases=[a for a in aliases if isinstance(a, str)])

def parse_vocabulary_or_default(text: str) -> Vocabulary:
    """Decode a stored vocabulary; anything malformed yields an empty one."""
    try:
        obj = json.loads(text)
        tags = obj.get("tags", []) if isinstance(obj, dict) else None
        if not isinstance(tags, list):
            raise ValueError("'tags' must be a list")
        return Vocabulary(tags=[_entry_from_obj(t) for t in tags])
    except ValueError as e:
        log.warning(f"tag database unreadable, starting fresh: {e}")
        return Vocabulary()

def load_vocabulary(path: Path) -> Vocabulary:
    if not path.exists():
        return Vocabulary()
    return parse_vocabulary_or_default(read_text_utf8(path, error=StoreIOError))

def save_vocabulary(path: Path, vocab: Vocabulary) -> None:
    text = json.dumps(vocab.to_dict(), indent=2, ensure_ascii=False) + "\n"
    write_text_utf8(path, text, error=StoreIOError)
