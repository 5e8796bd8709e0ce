"""Popular strategy: score with frequencies raised to a power."""

from __future__ import annotations

from candidates import CandidatePool
from correctness import GuessRecord
from lexicon import Corpus, popularity_weights
from scoring import score_pool
from strategy import Strategy, StrategyConfig


class PopularStrategy(Strategy):
    """Like ``enumerate``, weighting each word by ``frequency ** exponent``.

    An exponent above 1 pushes probability mass towards common words,
    which both sharpens ``P(word is secret)`` and skews the partitions.
    """

    name = "popular"

    def __init__(self, corpus: Corpus, config: StrategyConfig | None = None) -> None:
        super().__init__(corpus, config)
        self._initial = popularity_weights(corpus, self.config.exponent)
        self.pool = CandidatePool(self._initial)

    def guess(self, history: list[GuessRecord]) -> str:
        if not history:
            self.pool = CandidatePool(self._initial)
            return self.opening()
        self.pool.narrow(history[-1])
        return score_pool(self.pool.entries)
