from __future__ import annotations

import pytest

from lexicon import Corpus, parse_corpus

WORDS = """\
tares 1067
rates 2214
stare 1804
tears 3120
aster 412
crane 950
slate 733
right 90412
wrong 20811
fight 8120
might 51230
night 40120
light 30211
sight 7021
tight 3201
eight 6012
geese 310
llama 120
"""


@pytest.fixture(scope="session")
def corpus() -> Corpus:
    return parse_corpus(WORDS.splitlines())


@pytest.fixture(scope="session")
def no_opener_corpus() -> Corpus:
    """Same words without the fixed opening word."""
    return parse_corpus(line for line in WORDS.splitlines() if not line.startswith("tares"))


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text(WORDS, encoding="utf-8")
    return path


@pytest.fixture
def answers_file(tmp_path):
    path = tmp_path / "answers.txt"
    path.write_text("right tares\ngeese llama\n  night\n", encoding="utf-8")
    return path
