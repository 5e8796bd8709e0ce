import math

import pytest

from correctness import MAX_MASK_ENUM, GuessRecord, compute
from candidates import filter_pool
from scoring import (
    OPENING_WORD,
    Candidate,
    InvariantViolation,
    best_word,
    check_totals,
    compute_opening,
    goodness,
    mask_totals,
    opening_word,
    pattern_entropy,
    score_pool,
)


def test_bucket_totals_sum_to_pool_mass(corpus):
    entries = corpus.entries
    total = sum(e.frequency for e in entries)
    for word in corpus.words:
        totals = mask_totals(word, entries)
        assert len(totals) == MAX_MASK_ENUM
        assert sum(totals) == total


def test_bucket_totals_after_filtering(corpus):
    entries = filter_pool(corpus.entries, GuessRecord("tares", compute("light", "tares")))
    total = sum(w for _, w in entries)
    for word, _ in entries:
        assert sum(mask_totals(word, entries)) == total


def test_two_way_split():
    entries = [("aaaaa", 1), ("bbbbb", 1)]
    assert goodness("aaaaa", entries) == pytest.approx(0.5)
    assert goodness("bbbbb", entries) == pytest.approx(0.5)


def test_entropy_of_even_partition():
    assert pattern_entropy([0, 5, 0, 5, 5, 5], 20) == pytest.approx(2.0)
    assert pattern_entropy([7], 7) == 0.0


def test_entropy_is_weighted_by_frequency():
    skewed = pattern_entropy([9, 1], 10)
    assert skewed == pytest.approx(-(0.9 * math.log2(0.9) + 0.1 * math.log2(0.1)))
    assert skewed < pattern_entropy([5, 5], 10)


def test_guess_outside_pool_has_zero_goodness():
    entries = [("aaaaa", 3), ("bbbbb", 1)]
    assert goodness("ccccc", entries) == 0.0


def test_single_candidate_scores_zero():
    assert goodness("tares", [("tares", 5)]) == 0.0


def test_empty_pool_is_an_invariant_violation():
    with pytest.raises(InvariantViolation):
        goodness("tares", [])
    with pytest.raises(InvariantViolation):
        score_pool([])


def test_zero_mass_pool_falls_back_to_lexical_order():
    assert goodness("tares", [("tares", 0), ("rates", 0)]) == 0.0
    assert score_pool([("tares", 0), ("rates", 0)]) == "rates"


def test_single_candidate_is_returned_as_is():
    assert score_pool([("right", 0)]) == "right"
    assert score_pool([("right", 0.25)]) == "right"


def test_bucket_mismatch_is_an_invariant_violation():
    with pytest.raises(InvariantViolation):
        check_totals("tares", [3, 4], 8)
    check_totals("tares", [3, 5], 8)
    check_totals("tares", [0.1, 0.2], 0.30000000000000004)


def test_best_word_breaks_ties_lexically():
    scored = [Candidate("stare", 1.0), Candidate("rates", 1.0), Candidate("aster", 0.5)]
    assert best_word(scored) == "rates"
    assert best_word(reversed(scored)) == "rates"


def test_best_word_needs_candidates():
    with pytest.raises(InvariantViolation):
        best_word([])


def test_score_pool_picks_highest_goodness(corpus):
    entries = filter_pool(corpus.entries, GuessRecord("tares", compute("light", "tares")))
    total = sum(w for _, w in entries)
    expected = max(
        (goodness(w, entries, total), w) for w, _ in entries
    )
    best = score_pool(entries)
    assert goodness(best, entries, total) == expected[0]


def test_opening_word_is_fixed_when_present(corpus):
    assert opening_word(corpus) == OPENING_WORD


def test_opening_word_falls_back_to_scoring(no_opener_corpus):
    word = opening_word(no_opener_corpus)
    assert word in no_opener_corpus
    assert word == compute_opening(no_opener_corpus)
    assert word == score_pool(no_opener_corpus.entries)
