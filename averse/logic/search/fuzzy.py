"""Fuzzy matching for interactive recipe search.

A query matches a candidate when its characters appear in the candidate in
order (case-insensitive). Consecutive runs and word starts score higher.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

__all__ = ["fuzzy_score", "fuzzy_filter"]

MATCH_SCORE = 1
CONSECUTIVE_BONUS = 5
WORD_START_BONUS = 3


def fuzzy_score(query: str, candidate: str) -> Optional[int]:
    """Score candidate against query, or None when query is not a subsequence of it."""
    needle = query.strip().lower()
    if not needle:
        return 0
    haystack = candidate.lower()
    score = 0
    pos = 0
    last = -2
    for ch in needle:
        if ch == ' ':
            continue
        idx = haystack.find(ch, pos)
        if idx < 0:
            return None
        score += MATCH_SCORE
        if idx == last + 1:
            score += CONSECUTIVE_BONUS
        if idx == 0 or not haystack[idx - 1].isalnum():
            score += WORD_START_BONUS
        last = idx
        pos = idx + 1
    return score


def fuzzy_filter(query: str, candidates: Sequence[str]) -> List[Tuple[int, str]]:
    """Matching (index, candidate) pairs, best score first; ties keep input order."""
    scored = []
    for i, candidate in enumerate(candidates):
        s = fuzzy_score(query, candidate)
        if s is not None:
            scored.append((s, i, candidate))
    scored.sort(key=lambda x: (-x[0], x[1]))
    return [(i, candidate) for _, i, candidate in scored]
