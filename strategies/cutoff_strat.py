"""Cutoff strategy: skip scoring once few candidates remain."""

from __future__ import annotations

from candidates import CandidatePool
from correctness import GuessRecord
from lexicon import Corpus
from scoring import score_pool
from strategy import Strategy, StrategyConfig


class CutoffStrategy(Strategy):
    """Entropy search, except for small pools.

    With fewer than ``config.cutoff`` candidates the entropy term carries
    little signal, so the most frequent candidate is guessed directly.
    A cutoff of 0 never takes the shortcut.
    """

    name = "cutoff"

    def __init__(self, corpus: Corpus, config: StrategyConfig | None = None) -> None:
        super().__init__(corpus, config)
        if self.config.cutoff < 0:
            raise ValueError(f"cutoff must be >= 0, got {self.config.cutoff}")
        self._initial = corpus.entries
        self.pool = CandidatePool(self._initial)

    def guess(self, history: list[GuessRecord]) -> str:
        if not history:
            self.pool = CandidatePool(self._initial)
            return self.opening()
        self.pool.narrow(history[-1])
        if len(self.pool) < self.config.cutoff:
            return self.pool.most_frequent()
        return score_pool(self.pool.entries)
