from __future__ import annotations

from typing import Iterable, List

# Largest edit distance at which a canonical name is offered as a typo correction.
MAX_TYPO_DISTANCE = 3

def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions turning a into b."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) > len(b):
        a, b = b, a
    prev = list(range(len(a) + 1))
    for j, bj in enumerate(b, start=1):
        cur = [j] + [0] * len(a)
        for i, ai in enumerate(a, start=1):
            cost = 0 if ai == bj else 1
            cur[i] = min(cur[i - 1] + 1, prev[i] + 1, prev[i - 1] + cost)
        prev = cur
    return prev[-1]

def is_typo_of(raw: str, name: str) -> bool:
    return levenshtein(raw, name) <= MAX_TYPO_DISTANCE

def merge_tag_lists(existing: Iterable[str], new: Iterable[str]) -> List[str]:
    """Union of both lists, de-duplicated, in code point order. No case folding."""
    return sorted(set(existing) | set(new))
