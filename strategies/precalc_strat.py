"""Precalc strategy: tabulate every mask once, then slice the table."""

from __future__ import annotations

import logging

import numpy as np

from candidates import CandidatePool
from correctness import MAX_MASK_ENUM, GuessRecord, compute, enumerate_mask
from lexicon import Corpus
from scoring import Candidate, InvariantViolation, best_word, goodness_from_totals
from strategy import Strategy, StrategyConfig

logger = logging.getLogger(__name__)


def mask_table(words: list[str]) -> np.ndarray:
    """Matrix of mask indices, ``table[i, j] = enumerate_mask(compute(words[i], words[j]))``.

    Rows are secrets, columns are guesses.  Indices are below 243 so the
    table fits in ``uint8``.
    """
    n = len(words)
    table = np.empty((n, n), dtype=np.uint8)
    for i, secret in enumerate(words):
        for j, guess in enumerate(words):
            table[i, j] = enumerate_mask(compute(secret, guess))
    return table


class PrecalcStrategy(Strategy):
    """Entropy search backed by a precomputed mask table.

    The table is built for the pool left after the opening guess, the
    first round that needs scoring.  Later rounds only select the rows
    and columns of the surviving candidates and sum weights per mask
    with :func:`numpy.bincount`.
    """

    name = "precalc"

    def __init__(self, corpus: Corpus, config: StrategyConfig | None = None) -> None:
        super().__init__(corpus, config)
        self.pool = CandidatePool.from_corpus(corpus)
        self._table: np.ndarray | None = None
        self._index: dict[str, int] = {}

    def _masks_for_pool(self, words: list[str]) -> np.ndarray:
        if self._table is None:
            logger.debug("building %dx%d mask table", len(words), len(words))
            self._table = mask_table(words)
            self._index = {w: i for i, w in enumerate(words)}
            return self._table
        idx = np.fromiter((self._index[w] for w in words), dtype=np.intp, count=len(words))
        return self._table[np.ix_(idx, idx)]

    def guess(self, history: list[GuessRecord]) -> str:
        if not history:
            # new game: the table belongs to the previous opening pool
            self.pool = CandidatePool.from_corpus(self.corpus)
            self._table = None
            self._index = {}
            return self.opening()
        self.pool.narrow(history[-1])

        entries = self.pool.entries
        if not entries:
            raise InvariantViolation(f"no candidates left after {len(history)} guesses")
        total = self.pool.total
        masks = self._masks_for_pool(self.pool.words)
        weights = np.array([w for _, w in entries], dtype=np.float64)

        scored = []
        for j, (word, weight) in enumerate(entries):
            totals = np.bincount(masks[:, j], weights=weights, minlength=MAX_MASK_ENUM)
            # counts are integers well below 2**53, so the float sums are exact
            totals = np.rint(totals).astype(np.int64).tolist()
            scored.append(Candidate(word, goodness_from_totals(word, totals, total, weight)))
        return best_word(scored)
