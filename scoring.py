"""Entropy scoring: how good a guess is against the current candidates.

For a guess ``g`` the candidates are partitioned by the mask each of them
would produce.  With ``p_k`` the weight share of partition ``k``::

    entropy(g)  = -sum(p_k * log2(p_k))          (non-empty partitions only)
    goodness(g) = P(g is the secret) * entropy(g)

Only the ranking of goodness values is meaningful.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Sequence

from candidates import Entry, Weight
from correctness import MAX_MASK_ENUM, compute, enumerate_mask
from lexicon import Corpus

# Best first guess for the standard dictionary.
OPENING_WORD = "tares"


class InvariantViolation(RuntimeError):
    """The candidate pool reached a state filtering should never produce."""


def mask_totals(guess: str, entries: Iterable[Entry]) -> list[Weight]:
    """Sum candidate weights into one slot per mask index."""
    totals: list[Weight] = [0] * MAX_MASK_ENUM
    for word, weight in entries:
        totals[enumerate_mask(compute(word, guess))] += weight
    return totals


def check_totals(guess: str, totals: Iterable[Weight], total: Weight) -> None:
    """Every candidate lands in exactly one partition."""
    bucket_sum = sum(totals)
    if bucket_sum == total:
        return
    if isinstance(total, float) and math.isclose(bucket_sum, total, rel_tol=1e-9):
        return
    raise InvariantViolation(
        f"partitions for {guess!r} hold {bucket_sum}, pool holds {total}"
    )


def pattern_entropy(totals: Iterable[Weight], total: Weight) -> float:
    """Shannon entropy (bits) of the partition; empty slots are skipped."""
    terms = []
    for t in totals:
        if t == 0:
            continue
        p = t / total
        terms.append(p * math.log2(p))
    # fsum is exactly rounded, so the visiting order does not matter.
    return -math.fsum(terms)


def goodness_from_totals(
    guess: str,
    totals: Sequence[Weight],
    total: Weight,
    self_weight: Weight,
) -> float:
    check_totals(guess, totals, total)
    if total == 0:
        # only zero-frequency words left: nothing to rank, ties decide
        return 0.0
    return (self_weight / total) * pattern_entropy(totals, total)


def goodness(guess: str, entries: Sequence[Entry], total: Weight | None = None) -> float:
    """Score *guess* against the pool *entries*.

    Parameters
    ----------
    guess : str
        Word being considered.
    entries : sequence of (word, weight)
        Current candidates.
    total : number, optional
        Precomputed sum of weights; saves a pass when scoring many guesses.
    """
    if not entries:
        raise InvariantViolation(f"no candidates left while scoring {guess!r}")
    if total is None:
        total = sum(w for _, w in entries)
    self_weight = next((w for word, w in entries if word == guess), 0)
    return goodness_from_totals(guess, mask_totals(guess, entries), total, self_weight)


# ------------------------------------------------------------------
# Selection
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Candidate:
    word: str
    goodness: float


def best_word(scored: Iterable[Candidate]) -> str:
    """Highest goodness wins; equal scores go to the lexically smallest word."""
    best: Candidate | None = None
    for c in scored:
        if best is None or c.goodness > best.goodness or (
            c.goodness == best.goodness and c.word < best.word
        ):
            best = c
    if best is None:
        raise InvariantViolation("no candidates to choose from")
    return best.word


def score_pool(entries: Sequence[Entry]) -> str:
    """Score every pool word against the pool and return the best one.

    A single candidate is returned as is.  If every candidate has zero
    frequency all scores are 0 and the lexically smallest word wins.
    """
    if not entries:
        raise InvariantViolation("candidate pool is empty")
    if len(entries) == 1:
        return entries[0][0]
    total = sum(w for _, w in entries)
    return best_word(
        Candidate(
            word,
            goodness_from_totals(word, mask_totals(word, entries), total, weight),
        )
        for word, weight in entries
    )


# ------------------------------------------------------------------
# Opening move
# ------------------------------------------------------------------

def compute_opening(corpus: Corpus) -> str:
    """Best first guess for *corpus*, scoring every word against every word."""
    return score_pool(corpus.entries)


@lru_cache(maxsize=None)
def opening_word(corpus: Corpus) -> str:
    """First guess shared by every strategy; independent of the secret.

    Returns the fixed :data:`OPENING_WORD` when the corpus has it, since
    scoring a full dictionary costs as much as the rest of a game.
    """
    if OPENING_WORD in corpus:
        return OPENING_WORD
    return compute_opening(corpus)
