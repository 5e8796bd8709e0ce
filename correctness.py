"""Feedback oracle: per-letter correctness masks and their integer encoding."""

from __future__ import annotations

from enum import IntEnum
from itertools import product
from typing import Iterator, NamedTuple

WORD_LENGTH = 5

# Every mask maps to one slot in [0, MAX_MASK_ENUM).
MAX_MASK_ENUM = 3 ** WORD_LENGTH


class Correctness(IntEnum):
    """Feedback for a single letter; the values double as base-3 digits."""

    CORRECT = 0     # green
    MISPLACED = 1   # yellow
    INCORRECT = 2   # grey


Mask = tuple[Correctness, ...]

_SYMBOLS = {"C": Correctness.CORRECT, "M": Correctness.MISPLACED, "I": Correctness.INCORRECT}
_LETTERS = {v: k for k, v in _SYMBOLS.items()}


def compute(secret: str, guess: str) -> Mask:
    """Return the mask *guess* receives when the hidden word is *secret*.

    Correct letters are resolved first and consume their secret letter.
    Each remaining guess letter then takes the leftmost unconsumed
    occurrence in the secret, if any.
    """
    if len(secret) != WORD_LENGTH:
        raise ValueError(f"secret {secret!r} must have {WORD_LENGTH} letters")
    if len(guess) != WORD_LENGTH:
        raise ValueError(f"guess {guess!r} must have {WORD_LENGTH} letters")

    mask = [Correctness.INCORRECT] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1 – correct positions
    for i, (s, g) in enumerate(zip(secret, guess)):
        if s == g:
            mask[i] = Correctness.CORRECT
            used[i] = True

    # Pass 2 – misplaced, leftmost unused secret letter wins
    for i, g in enumerate(guess):
        if mask[i] is Correctness.CORRECT:
            continue
        for j, s in enumerate(secret):
            if s == g and not used[j]:
                used[j] = True
                mask[i] = Correctness.MISPLACED
                break

    return tuple(mask)


# ------------------------------------------------------------------
# Mask enumeration
# ------------------------------------------------------------------

def enumerate_mask(mask: Mask) -> int:
    """Encode a mask as a single integer in ``[0, MAX_MASK_ENUM)``."""
    val = 0
    for c in mask:
        val = val * 3 + c
    return val


def decode_mask(index: int) -> Mask:
    """Inverse of :func:`enumerate_mask`."""
    if not 0 <= index < MAX_MASK_ENUM:
        raise ValueError(f"mask index {index} out of range")
    digits = []
    for _ in range(WORD_LENGTH):
        index, digit = divmod(index, 3)
        digits.append(Correctness(digit))
    return tuple(reversed(digits))


def all_masks() -> Iterator[Mask]:
    """Yield every possible mask, in enumeration order."""
    return product(Correctness, repeat=WORD_LENGTH)


def parse_mask(text: str) -> Mask:
    """Build a mask from its letter form, e.g. ``"CMIII"`` or ``"C M I I I"``."""
    letters = "".join(text.split()).upper()
    if len(letters) != WORD_LENGTH:
        raise ValueError(f"mask {text!r} must have {WORD_LENGTH} symbols")
    try:
        return tuple(_SYMBOLS[ch] for ch in letters)
    except KeyError as exc:
        raise ValueError(f"unknown mask symbol {exc.args[0]!r} in {text!r}") from None


def format_mask(mask: Mask) -> str:
    return "".join(_LETTERS[c] for c in mask)


# ------------------------------------------------------------------
# History records
# ------------------------------------------------------------------

class GuessRecord(NamedTuple):
    """One round of a game: the word guessed and the mask it received."""

    word: str
    mask: Mask

    def matches(self, word: str) -> bool:
        """True if *word* would have produced this record's mask."""
        return compute(word, self.word) == self.mask
