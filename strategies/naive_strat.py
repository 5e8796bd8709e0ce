"""Naive strategy: recompute everything from the full history every round."""

from __future__ import annotations

from collections import defaultdict

from candidates import refilter
from correctness import GuessRecord, Mask, compute
from scoring import Candidate, InvariantViolation, best_word, goodness_from_totals
from strategy import Strategy


class NaiveStrategy(Strategy):
    """Refilter the corpus by the whole history, then score every candidate.

    Partitions are accumulated in a dict keyed by the mask itself.  Slow,
    but it is the most literal reading of the scoring rule and the other
    strategies are checked against it.
    """

    name = "naive"

    def guess(self, history: list[GuessRecord]) -> str:
        if not history:
            return self.opening()

        pool = refilter(self.corpus.entries, history)
        if not pool:
            raise InvariantViolation(f"no candidates left after {len(history)} guesses")
        total = sum(count for _, count in pool)

        scored = []
        for word, count in pool:
            partition: dict[Mask, int] = defaultdict(int)
            for candidate, c in pool:
                partition[compute(candidate, word)] += c
            scored.append(Candidate(
                word,
                goodness_from_totals(word, list(partition.values()), total, count),
            ))
        return best_word(scored)
