"""Enumerate strategy: incremental pool, partitions in a 243-slot list."""

from __future__ import annotations

import logging

from candidates import CandidatePool
from correctness import GuessRecord
from lexicon import Corpus
from scoring import score_pool
from strategy import Strategy, StrategyConfig

logger = logging.getLogger(__name__)


class EnumerateStrategy(Strategy):
    """Narrow the pool by the newest mask only and score what is left.

    Each mask is turned into its enumeration index so partition weights
    can be summed into a fixed-size list instead of a dict.
    """

    name = "enumerate"

    def __init__(self, corpus: Corpus, config: StrategyConfig | None = None) -> None:
        super().__init__(corpus, config)
        self._initial = corpus.entries
        self.pool = CandidatePool(self._initial)

    def guess(self, history: list[GuessRecord]) -> str:
        if not history:
            self.pool = CandidatePool(self._initial)
            return self.opening()
        self.pool.narrow(history[-1])
        logger.debug("%s: %d candidates left", self.name, len(self.pool))
        return score_pool(self.pool.entries)
