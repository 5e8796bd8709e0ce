"""Dictionary and answer-list loading, plus frequency weighting.

The dictionary is line oriented, one ``WORD FREQUENCY`` pair per line::

    tares 1067
    which 2341263

It is loaded once into an immutable :class:`Corpus` that every strategy
shares read-only.

Two frequency transforms are available for strategies that do not score
with raw counts:
  - ``popularity``: ``frequency ** exponent`` (monotonic, favours common words)
  - ``sigmoid``: logistic of log-frequency, compressing the dynamic range
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple

from correctness import WORD_LENGTH

_DIR = Path(__file__).resolve().parent
DATA_DIR = _DIR / "data"

_WORD_RE = re.compile(rf"^[a-z]{{{WORD_LENGTH}}}$")


class MalformedCorpusEntry(ValueError):
    """A dictionary line that is not ``WORD FREQUENCY``."""


# ------------------------------------------------------------------
# Corpus
# ------------------------------------------------------------------

class WordEntry(NamedTuple):
    word: str
    frequency: int


@dataclass(frozen=True, eq=False)
class Corpus:
    """The full frequency-annotated dictionary, in file order.

    Hashing and equality are by identity: one corpus is loaded per process
    and caches keyed on it stay valid for its whole lifetime.
    """

    entries: tuple[WordEntry, ...]
    _words: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_words", frozenset(e.word for e in self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self.entries)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    @property
    def words(self) -> list[str]:
        return [e.word for e in self.entries]


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def parse_corpus(lines: Iterable[str], source: str = "<dictionary>") -> Corpus:
    """Parse ``WORD FREQUENCY`` lines into a :class:`Corpus`.

    Blank lines are skipped and a repeated word keeps its first frequency.

    Raises
    ------
    MalformedCorpusEntry
        On a missing separator, a word that is not five lowercase letters,
        or a frequency that is not a non-negative integer.
    """
    seen: set[str] = set()
    entries: list[WordEntry] = []
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line:
            continue
        word, sep, count = line.partition(" ")
        if not sep:
            raise MalformedCorpusEntry(
                f"{source}:{lineno}: expected 'WORD FREQUENCY', got {line!r}"
            )
        if not _WORD_RE.match(word):
            raise MalformedCorpusEntry(
                f"{source}:{lineno}: {word!r} is not {WORD_LENGTH} lowercase letters"
            )
        count = count.strip()
        if not (count.isascii() and count.isdigit()):
            raise MalformedCorpusEntry(
                f"{source}:{lineno}: frequency {count!r} is not a non-negative integer"
            )
        if word in seen:
            continue
        seen.add(word)
        entries.append(WordEntry(word, int(count)))
    return Corpus(tuple(entries))


def load_corpus(path: str | Path | None = None) -> Corpus:
    """Load the dictionary file.

    *path* defaults to ``data/dictionary.txt`` next to this module.
    """
    src = Path(path) if path is not None else DATA_DIR / "dictionary.txt"
    if not src.exists():
        raise FileNotFoundError(
            f"Dictionary not found: {src}\n"
            f"Expected one 'WORD FREQUENCY' pair per line."
        )
    with src.open("r", encoding="utf-8") as f:
        corpus = parse_corpus(f, source=str(src))
    if not len(corpus):
        raise ValueError(f"No words found in {src}")
    return corpus


def parse_answers(text: str) -> list[str]:
    """Split whitespace-separated answers, validating each one."""
    answers = text.split()
    bad = [w for w in answers if not _WORD_RE.match(w)]
    if bad:
        raise ValueError(
            f"Answers must be {WORD_LENGTH} lowercase letters: {bad[:5]}"
        )
    return answers


def load_answers(path: str | Path | None = None) -> list[str]:
    """Load the answer stream; defaults to ``data/answers.txt``."""
    src = Path(path) if path is not None else DATA_DIR / "answers.txt"
    if not src.exists():
        raise FileNotFoundError(f"Answer list not found: {src}")
    return parse_answers(src.read_text(encoding="utf-8"))


# ------------------------------------------------------------------
# Frequency weighting
# ------------------------------------------------------------------

def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    ex = math.exp(x)
    return ex / (1.0 + ex)


def sigmoid_weights(
    entries: Iterable[WordEntry],
    steepness: float = 1.5,
) -> list[tuple[str, float]]:
    """Map counts into (0, 1) via a sigmoid centred on the mean log-count.

    Very common and very rare words end up within a bounded ratio of each
    other, so raw counts spanning many orders of magnitude no longer
    swamp the entropy term.
    """
    entries = list(entries)
    if not entries:
        return []
    log_counts = [math.log(e.frequency + 1) for e in entries]
    mu = sum(log_counts) / len(log_counts)
    return [
        (e.word, _sigmoid(steepness * (lc - mu)))
        for e, lc in zip(entries, log_counts)
    ]


def popularity_weights(
    entries: Iterable[WordEntry],
    exponent: float = 1.5,
) -> list[tuple[str, int | float]]:
    """Raise counts to *exponent*; ``exponent == 1`` keeps the raw integers."""
    if exponent <= 0:
        raise ValueError(f"exponent must be positive, got {exponent}")
    if exponent == 1:
        return [(e.word, e.frequency) for e in entries]
    return [(e.word, float(e.frequency) ** exponent) for e in entries]
