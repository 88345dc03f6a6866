from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import yaml

from smart_tags.errors import StructuralError

MARKER = "---"
TAGS_KEY = "tags"

@dataclass
class Frontmatter:
    data: Dict[str, Any]
    body: str
    had_block: bool = False

def _is_marker(line: str) -> bool:
    return line.rstrip("\r\n") == MARKER

def split_frontmatter(md: str) -> Tuple[Optional[str], str]:
    """
    Return (yaml_text, body). yaml_text is None when the document has no
    leading block; the body is everything after the closing marker line,
    untouched.
    """
    if not md.startswith(MARKER):
        return None, md

    # only "\n" ends a line; "\x85", "\u2028" and the like stay inside it
    lines = [ln for ln in re.split(r"(?<=\n)", md) if ln]
    if not lines or not _is_marker(lines[0]):
        return None, md

    for i in range(1, len(lines)):
        if _is_marker(lines[i]):
            return "".join(lines[1:i]), "".join(lines[i + 1 :])

    # opening marker without a closing one: not a block
    return None, md

def load_yaml_or_default(yaml_text: str) -> Any:
    """Parse yaml_text; malformed or empty content reads as an empty mapping."""
    try:
        data = yaml.safe_load(yaml_text)
    except yaml.YAMLError:
        return {}
    return {} if data is None else data

def parse_frontmatter(md: str) -> Frontmatter:
    yaml_text, body = split_frontmatter(md)
    if yaml_text is None:
        return Frontmatter(data={}, body=body, had_block=False)
    data = load_yaml_or_default(yaml_text)
    if not isinstance(data, dict):
        raise StructuralError(
            f"Invalid front matter: top-level must be a mapping, got {type(data).__name__}"
        )
    return Frontmatter(data=data, body=body, had_block=True)

def normalize_tags_field(value: Any) -> List[str]:
    """
    Accepted shapes for 'tags':
    - missing / null -> []
    - "draft"        -> ["draft"]
    - [..]           -> its string entries; other entries are dropped
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [t for t in value if isinstance(t, str)]
    raise StructuralError(
        f"Invalid front matter: '{TAGS_KEY}' must be a string or a list, got {type(value).__name__}"
    )

def dump_frontmatter(data: Dict[str, Any]) -> str:
    y = yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"{MARKER}\n{y}{MARKER}\n"
