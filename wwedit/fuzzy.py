"""Fuzzy subsequence matching and ranking."""

from __future__ import annotations

from typing import Iterable

_BOUNDARY_CHARS = "_- /"


def _is_word_boundary(word: str, i: int) -> bool:
    return i == 0 or word[i - 1] in _BOUNDARY_CHARS


def fuzzy_score(word: str, query: str) -> int:
    """Score ``query`` as a case-insensitive subsequence of ``word``.

    Returns -1 when ``query`` is not a subsequence and 0 for an empty query.
    """
    if not query:
        return 0

    wi = 0
    score = 0
    consecutive = False
    lowered = word.lower()

    for qc in query.lower():
        while wi < len(lowered):
            if lowered[wi] == qc:
                score += 10
                if consecutive:
                    score += 15
                if _is_word_boundary(word, wi):
                    score += 20
                consecutive = True
                wi += 1
                break
            consecutive = False
            score -= 1
            wi += 1
        else:
            return -1

    return score


def fuzzy_find(words: Iterable[str], query: str) -> list[str]:
    """Return the words matching ``query``, best score first."""
    scored = [(fuzzy_score(w, query), w) for w in words]
    matches = [(s, w) for s, w in scored if s >= 0]
    matches.sort(key=lambda pair: pair[0], reverse=True)
    return [w for _, w in matches]