"""Interface shared by every guess-selection strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from correctness import GuessRecord
from lexicon import Corpus
from scoring import opening_word


@dataclass(frozen=True)
class StrategyConfig:
    """Policy knobs a strategy receives at construction.

    Each variant reads only the fields it needs.

    Attributes
    ----------
    opener : str or None
        First guess override.  None uses the corpus-wide opening word.
    cutoff : int
        Below this many candidates, ``cutoff`` guesses the most frequent
        candidate instead of scoring.  0 disables the shortcut.
    exponent : float
        Power applied to frequencies by ``popular``.  1 keeps raw counts.
    steepness : float or None
        Slope of the logistic applied to log-frequency by ``sigmoid``.
        None keeps raw counts.
    """

    opener: str | None = None
    cutoff: int = 8
    exponent: float = 1.5
    steepness: float | None = 1.5

    @classmethod
    def neutral(cls) -> StrategyConfig:
        """Every policy deviation off: all variants then pick the same words."""
        return cls(cutoff=0, exponent=1.0, steepness=None)


class Strategy(ABC):
    """Picks the next guess from the history of the current game.

    The corpus is shared and read-only; the candidate pool and any tables
    built from it belong to the instance.  An empty history starts a new
    game, so one instance can play any number of games in turn.
    """

    def __init__(self, corpus: Corpus, config: StrategyConfig | None = None) -> None:
        self.corpus = corpus
        self.config = config if config is not None else StrategyConfig()
        if self.config.opener is not None and self.config.opener not in corpus:
            raise ValueError(f"opener {self.config.opener!r} is not in the dictionary")

    @property
    @abstractmethod
    def name(self) -> str:
        """Name used on the command line and in reports.

        Subclasses usually override it with a plain class attribute.
        """
        ...

    @abstractmethod
    def guess(self, history: list[GuessRecord]) -> str:
        """Return the next guess given the (word, mask) records so far."""
        ...

    def opening(self) -> str:
        return self.config.opener or opening_word(self.corpus)
