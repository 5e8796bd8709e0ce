"""Candidate pool: the words still consistent with every observed mask."""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from correctness import GuessRecord

Weight = Union[int, float]
Entry = tuple[str, Weight]


def filter_pool(entries: Iterable[Entry], record: GuessRecord) -> list[Entry]:
    """Keep only entries whose word is consistent with *record*."""
    return [e for e in entries if record.matches(e[0])]


def refilter(entries: Iterable[Entry], history: Iterable[GuessRecord]) -> list[Entry]:
    """Filter from scratch by every record of *history*."""
    pool = list(entries)
    for record in history:
        pool = filter_pool(pool, record)
    return pool


class CandidatePool:
    """Per-game pool narrowed in place by the newest record each round.

    The pool starts as a view of the caller's sequence and only takes its
    own copy the first time a narrowing removes something, so the shared
    corpus-derived sequence is never modified.

    Parameters
    ----------
    entries : sequence of (word, weight)
        Initial candidates, usually every corpus word with its frequency
        (or a transform of it).
    """

    def __init__(self, entries: Sequence[Entry]) -> None:
        self._entries: Sequence[Entry] = entries
        self._owned = False

    @classmethod
    def from_corpus(cls, corpus) -> CandidatePool:
        return cls(corpus.entries)

    def narrow(self, record: GuessRecord) -> None:
        """Drop every candidate inconsistent with *record*."""
        if self._owned:
            self._entries[:] = [e for e in self._entries if record.matches(e[0])]
            return
        kept = filter_pool(self._entries, record)
        if len(kept) != len(self._entries):
            self._entries = kept
            self._owned = True

    @property
    def entries(self) -> Sequence[Entry]:
        return self._entries

    @property
    def words(self) -> list[str]:
        return [w for w, _ in self._entries]

    @property
    def total(self) -> Weight:
        return sum(weight for _, weight in self._entries)

    def most_frequent(self) -> str:
        """Heaviest candidate; ties go to the lexically smallest word."""
        if not self._entries:
            raise RuntimeError("candidate pool is empty")
        return min(self._entries, key=lambda e: (-e[1], e[0]))[0]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return any(w == word for w, _ in self._entries)
