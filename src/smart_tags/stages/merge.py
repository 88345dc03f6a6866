from __future__ import annotations

from typing import Iterable

from smart_tags.core.tags import merge_tag_lists
from smart_tags.core.yaml import TAGS_KEY, dump_frontmatter, normalize_tags_field, parse_frontmatter

def merge_document(md: str, new_tags: Iterable[str]) -> str:
    """
    Add new_tags to the document's front matter 'tags' list.

    Other keys pass through. The body after the closing marker is kept
    byte-for-byte; a document without front matter gets a fresh block and
    keeps its whole text as body.
    """
    fm = parse_frontmatter(md)
    existing = normalize_tags_field(fm.data.get(TAGS_KEY))
    fm.data[TAGS_KEY] = merge_tag_lists(existing, new_tags)
    return dump_frontmatter(fm.data) + fm.body
