from __future__ import annotations

import argparse
from pathlib import Path

from smart_tags.config import DB_ENV, DEFAULT_DB, RunConfig, resolve_db_path
from smart_tags.errors import SmartTagsError
from smart_tags.logging import get_logger
from smart_tags.pipeline.tag_document import tag_document
from smart_tags.prompts import ConsolePrompter, Prompter

log = get_logger()

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="smart-tags",
        description="Add tags to a note's YAML front matter, checked against a curated tag vocabulary",
    )
    p.add_argument("file", metavar="FILE", help="Markdown note to tag")
    p.add_argument("tags", metavar="TAG", nargs="+", help="Tags to add")
    p.add_argument("--db", metavar="DB_PATH", default=None,
                   help=f"Tag database (default: ${DB_ENV}, else ./{DEFAULT_DB})")
    p.add_argument("--dry-run", action="store_true", help="Resolve tags but write nothing")
    return p

def main(argv=None, prompter: Prompter | None = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = RunConfig(
        document=Path(args.file).expanduser(),
        tags=tuple(args.tags),
        db_path=resolve_db_path(args.db),
        dry_run=bool(args.dry_run),
    )

    try:
        tag_document(cfg, prompter if prompter is not None else ConsolePrompter())
    except (EOFError, KeyboardInterrupt):
        log.error("no answer given")
        return 1
    except SmartTagsError as e:
        log.error(str(e))
        return 1
    return 0
