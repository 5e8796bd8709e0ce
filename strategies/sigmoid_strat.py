"""Sigmoid strategy: score with logistic-compressed frequencies."""

from __future__ import annotations

from candidates import CandidatePool
from correctness import GuessRecord
from lexicon import Corpus, sigmoid_weights
from scoring import score_pool
from strategy import Strategy, StrategyConfig


class SigmoidStrategy(Strategy):
    """Like ``enumerate``, with each count mapped through a sigmoid of its log.

    Raw counts span many orders of magnitude; the sigmoid squeezes them
    into (0, 1) around the corpus mean so rare-but-valid words keep a
    meaningful share.  ``steepness=None`` scores with the raw counts.
    """

    name = "sigmoid"

    def __init__(self, corpus: Corpus, config: StrategyConfig | None = None) -> None:
        super().__init__(corpus, config)
        steepness = self.config.steepness
        if steepness is None:
            self._initial = corpus.entries
        else:
            self._initial = sigmoid_weights(corpus, steepness)
        self.pool = CandidatePool(self._initial)

    def guess(self, history: list[GuessRecord]) -> str:
        if not history:
            self.pool = CandidatePool(self._initial)
            return self.opening()
        self.pool.narrow(history[-1])
        return score_pool(self.pool.entries)
