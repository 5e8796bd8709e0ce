import pytest

from lexicon import parse_corpus
from strategies import discover_strategies, get_strategy
from strategies.enumerate_strat import EnumerateStrategy
from strategy import Strategy
from wordle_env import DEFAULT_MAX_ROUNDS, GameOutcome, GuessNotInDictionary, Wordle


class ScriptedStrategy(Strategy):
    """Guesses ``right`` once *hits* wrong guesses have been made."""

    name = "scripted"

    def __init__(self, corpus, hits=None, miss="wrong"):
        super().__init__(corpus)
        self.hits = hits
        self.miss = miss
        self.seen = []

    def guess(self, history):
        self.seen.append(list(history))
        if self.hits is not None and len(history) == self.hits:
            return "right"
        return self.miss


@pytest.fixture
def game(corpus):
    return Wordle(corpus)


@pytest.mark.parametrize("hits, rounds", [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6)])
def test_rounds_counted(game, corpus, hits, rounds):
    outcome = game.play("right", ScriptedStrategy(corpus, hits=hits))
    assert outcome == GameOutcome("right", rounds)
    assert outcome.solved


def test_budget_exhausted_is_a_failure(game, corpus):
    strat = ScriptedStrategy(corpus)
    outcome = game.play("right", strat)
    assert outcome == GameOutcome("right", None)
    assert not outcome.solved
    assert len(strat.seen) == DEFAULT_MAX_ROUNDS


def test_custom_budget(corpus):
    outcome = Wordle(corpus, max_rounds=3).play("right", ScriptedStrategy(corpus, hits=3))
    assert not outcome.solved


def test_history_is_fed_back(game, corpus):
    strat = ScriptedStrategy(corpus, hits=2)
    game.play("right", strat)
    assert strat.seen[0] == []
    word, mask = strat.seen[2][1]
    assert word == "wrong"
    assert mask == strat.seen[2][0].mask


def test_guess_outside_dictionary(game, corpus):
    with pytest.raises(GuessNotInDictionary, match="zzzzz"):
        game.play("right", ScriptedStrategy(corpus, miss="zzzzz"))


def test_answer_must_be_in_dictionary(game, corpus):
    with pytest.raises(ValueError):
        game.play("zzzzz", ScriptedStrategy(corpus, hits=0))


def test_budget_must_be_positive(corpus):
    with pytest.raises(ValueError):
        Wordle(corpus, max_rounds=0)


def test_opening_word_solves_in_one(game, corpus):
    assert game.play("tares", EnumerateStrategy(corpus)) == GameOutcome("tares", 1)


def test_every_answer_is_solved(game, corpus):
    for answer in corpus.words:
        outcome = game.play(answer, EnumerateStrategy(corpus))
        assert outcome.solved
        assert 1 <= outcome.rounds <= len(corpus)


def test_games_do_not_share_state(corpus):
    game = Wordle(corpus)
    first = game.play("geese", EnumerateStrategy(corpus))
    game.play("might", EnumerateStrategy(corpus))
    assert game.play("geese", EnumerateStrategy(corpus)) == first


def test_works_without_fixed_opener():
    corpus = parse_corpus(["right 10", "wrong 5", "fight 3"])
    game = Wordle(corpus)
    for answer in corpus.words:
        assert game.play(answer, EnumerateStrategy(corpus)).solved


@pytest.mark.parametrize("name", sorted(discover_strategies()))
def test_zero_frequency_answer_is_solved(name):
    corpus = parse_corpus(["tares 10", "right 0", "fight 5", "night 3"])
    outcome = Wordle(corpus).play("right", get_strategy(name)(corpus))
    assert outcome == GameOutcome("right", 2)


@pytest.mark.parametrize("name", sorted(discover_strategies()))
def test_all_zero_pool_guesses_in_lexical_order(name):
    # after "tares" only fight and night fit, both with frequency 0
    corpus = parse_corpus(["tares 10", "right 0", "fight 0", "night 0"])
    game = Wordle(corpus)
    assert game.play("fight", get_strategy(name)(corpus)) == GameOutcome("fight", 2)
    assert game.play("night", get_strategy(name)(corpus)) == GameOutcome("night", 3)


@pytest.mark.parametrize("name", sorted(discover_strategies()))
def test_one_instance_plays_many_games(name, corpus):
    game = Wordle(corpus)
    reused = get_strategy(name)(corpus)
    for answer in ["geese", "might", "geese", "sight"]:
        fresh = game.play(answer, get_strategy(name)(corpus))
        assert game.play(answer, reused) == fresh
