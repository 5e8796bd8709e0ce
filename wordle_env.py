"""Wordle game loop: feed a strategy masks until it finds the answer."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from correctness import GuessRecord, compute, format_mask
from lexicon import Corpus
from strategy import Strategy

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 32


class GuessNotInDictionary(ValueError):
    """A strategy proposed a word that is not in the dictionary."""


@dataclass(frozen=True)
class GameOutcome:
    """Result of one game.

    ``rounds`` is the number of guesses it took, including the winning
    one, or None if the budget ran out first.
    """

    answer: str
    rounds: int | None

    @property
    def solved(self) -> bool:
        return self.rounds is not None


class Wordle:
    """Referee for games played against a fixed dictionary.

    Parameters
    ----------
    corpus : Corpus
        The shared dictionary; every guess must come from it.
    max_rounds : int
        Guess budget per game.  A game that reaches it is a failure,
        not an error.
    """

    def __init__(self, corpus: Corpus, max_rounds: int = DEFAULT_MAX_ROUNDS) -> None:
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {max_rounds}")
        self._corpus = corpus
        self._max_rounds = max_rounds

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    def play(self, answer: str, strategy: Strategy) -> GameOutcome:
        """Play one game of *strategy* against *answer*.

        Raises
        ------
        ValueError
            If *answer* is not in the dictionary.
        GuessNotInDictionary
            If the strategy guesses a word outside the dictionary.
        """
        if answer not in self._corpus:
            raise ValueError(f"answer {answer!r} is not in the dictionary")

        history: list[GuessRecord] = []
        for round_no in range(1, self._max_rounds + 1):
            word = strategy.guess(history)
            if word not in self._corpus:
                raise GuessNotInDictionary(
                    f"{strategy.name} guessed {word!r}, which is not in the dictionary"
                )
            if word == answer:
                logger.debug("%s: round %d %s solved", answer, round_no, word)
                return GameOutcome(answer, round_no)
            mask = compute(answer, word)
            logger.debug("%s: round %d %s %s", answer, round_no, word, format_mask(mask))
            history.append(GuessRecord(word, mask))

        logger.debug("%s: not found within %d rounds", answer, self._max_rounds)
        return GameOutcome(answer, None)
