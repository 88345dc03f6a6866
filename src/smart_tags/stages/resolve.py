from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from smart_tags.core.tags import is_typo_of
from smart_tags.logging import get_logger
from smart_tags.prompts import Prompter
from smart_tags.stages.vocabulary import TagEntry, Vocabulary

log = get_logger()

EXACT = "exact"
MAPPED = "mapped"
CORRECTED = "corrected"
ALIASED = "aliased"
CREATED = "created"
UNREGISTERED = "unregistered"

@dataclass(frozen=True)
class ResolutionResult:
    canonical: str
    vocabulary_changed: bool
    action: str = EXACT

@dataclass
class SessionResult:
    tags: List[str] = field(default_factory=list)
    changed: bool = False
    results: List[ResolutionResult] = field(default_factory=list)

def find_candidates(raw: str, vocab: Vocabulary) -> List[TagEntry]:
    """
    Entries whose canonical name is a likely typo target for raw.
    Aliases are not considered. Vocabulary order is kept, so the first
    candidate is the best match regardless of its distance.
    """
    return [e for e in vocab.tags if is_typo_of(raw, e.name)]

def _fuzzy_menu(raw: str, candidates: List[TagEntry]) -> List[str]:
    options = [f"Use existing '{c.name}' (typo correction)" for c in candidates]
    options.append(f"Register '{raw}' as alias for '{candidates[0].name}'")
    options.append(f"Create new tag '{raw}'")
    return options

def _register_new(raw: str, vocab: Vocabulary, prompter: Prompter) -> ResolutionResult:
    if prompter.confirm(f"Register new tag '{raw}' in the vocabulary?", default=True):
        vocab.tags.append(TagEntry(name=raw))
        log.info(f"new tag: '{raw}'")
        return ResolutionResult(raw, True, CREATED)
    log.info(f"using '{raw}' for this note only (not registered)")
    return ResolutionResult(raw, False, UNREGISTERED)

def resolve_tag(raw: str, vocab: Vocabulary, prompter: Prompter) -> ResolutionResult:
    # exact name or alias
    entry = vocab.find(raw)
    if entry is not None:
        if entry.name != raw:
            log.info(f"mapping '{raw}' -> '{entry.name}'")
            return ResolutionResult(entry.name, False, MAPPED)
        return ResolutionResult(entry.name, False, EXACT)

    candidates = find_candidates(raw, vocab)
    if not candidates:
        return _register_new(raw, vocab, prompter)

    log.info(f"tag '{raw}' is unknown")
    options = _fuzzy_menu(raw, candidates)
    choice = prompter.choose_one(f"How should '{raw}' be handled?", options, 0)
    if not 0 <= choice < len(options):
        raise ValueError(f"menu choice {choice} out of range for {len(options)} options")

    if choice < len(candidates):
        name = candidates[choice].name
        log.info(f"correcting '{raw}' -> '{name}'")
        return ResolutionResult(name, False, CORRECTED)

    if choice == len(candidates):
        best = candidates[0]
        best.aliases.append(raw)
        log.info(f"new alias: '{raw}' -> '{best.name}'")
        return ResolutionResult(best.name, True, ALIASED)

    return _register_new(raw, vocab, prompter)

def resolve_tags(raws: Iterable[str], vocab: Vocabulary, prompter: Prompter) -> SessionResult:
    session = SessionResult()
    for raw in raws:
        res = resolve_tag(raw, vocab, prompter)
        session.tags.append(res.canonical)
        session.results.append(res)
        session.changed = session.changed or res.vocabulary_changed
    return session
