from __future__ import annotations

from dataclasses import dataclass
from typing import List

from smart_tags.config import RunConfig
from smart_tags.io.fs import read_text_utf8, write_text_utf8
from smart_tags.logging import get_logger
from smart_tags.prompts import Prompter
from smart_tags.stages.merge import merge_document
from smart_tags.stages.resolve import ResolutionResult, resolve_tags
from smart_tags.stages.vocabulary import load_vocabulary, save_vocabulary

log = get_logger()

@dataclass(frozen=True)
class TagRunStats:
    tags: List[str]
    results: List[ResolutionResult]
    vocabulary_saved: bool
    document_written: bool

def tag_document(cfg: RunConfig, prompter: Prompter) -> TagRunStats:
    """
    One session: resolve cfg.tags against the vocabulary, then merge them into
    cfg.document. The document is read and merged in memory before anything
    is written, so a bad document leaves both files untouched.
    """
    log.info(f"using DB: {cfg.db_path}")
    original = read_text_utf8(cfg.document)
    vocab = load_vocabulary(cfg.db_path)

    log.info("checking tags...")
    session = resolve_tags(cfg.tags, vocab, prompter)
    updated = merge_document(original, session.tags)

    if cfg.dry_run:
        if session.changed:
            log.info(f"[dry-run] would update tag database: {cfg.db_path}")
        log.info(f"[dry-run] would add tags to {cfg.document}: {session.tags}")
        return TagRunStats(session.tags, session.results, False, False)

    if session.changed:
        save_vocabulary(cfg.db_path, vocab)
        log.info(f"tag database updated: {cfg.db_path}")

    write_text_utf8(cfg.document, updated)
    log.info(f"added tags to {cfg.document}: {session.tags}")
    return TagRunStats(session.tags, session.results, session.changed, True)
