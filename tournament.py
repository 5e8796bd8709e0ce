#!/usr/bin/env python3
"""Play a strategy against a stream of answers and report how it did.

Features:
  - Picks any strategy from the ``strategies/`` package by name.
  - Optionally spreads games over worker processes.
  - Outputs per-game lines, a summary with the round distribution, and
    optional CSV, JSON and histogram files.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
import time as _time_mod
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from dataclasses import asdict, dataclass, field
from pathlib import Path

from lexicon import Corpus, load_answers, load_corpus
from scoring import compute_opening
from strategies import discover_strategies, get_strategy
from strategy import StrategyConfig
from wordle_env import DEFAULT_MAX_ROUNDS, Wordle

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------
# Result containers
# ------------------------------------------------------------------

@dataclass
class GameResult:
    strategy: str
    answer: str
    rounds: int | None
    solved: bool


@dataclass
class TournamentResults:
    games: list[GameResult] = field(default_factory=list)

    @property
    def solved(self) -> list[GameResult]:
        return [g for g in self.games if g.solved]

    @property
    def failed(self) -> list[GameResult]:
        return [g for g in self.games if not g.solved]

    @property
    def average_rounds(self) -> float | None:
        """Mean rounds over solved games; failures are left out, not penalised."""
        solved = self.solved
        if not solved:
            return None
        return sum(g.rounds for g in solved) / len(solved)

    def distribution(self) -> dict[int, int]:
        """Number of solved games per round count."""
        return dict(sorted(Counter(g.rounds for g in self.solved).items()))

    def to_csv(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["strategy", "answer", "rounds", "solved"])
            for g in self.games:
                writer.writerow([g.strategy, g.answer,
                                 "" if g.rounds is None else g.rounds, int(g.solved)])

    def to_json(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "summary": {
                "games": len(self.games),
                "solved": len(self.solved),
                "failed": len(self.failed),
                "average_rounds": self.average_rounds,
                "distribution": {str(k): v for k, v in self.distribution().items()},
            },
            "games": [asdict(g) for g in self.games],
        }
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def print_summary(self, name: str) -> None:
        n = len(self.games)
        avg = self.average_rounds
        print(f"\n=== {name} - {n} games ===")
        print(f"  Solved: {len(self.solved)}/{n}  Failed: {len(self.failed)}")
        if avg is None:
            print("  Average rounds: n/a (nothing solved)")
            return
        print(f"  Average rounds (solved only): {avg:.3f}")
        dist = self.distribution()
        width = max(dist.values())
        for rounds, count in dist.items():
            bar = "#" * max(1, round(40 * count / width))
            print(f"  {rounds:>3} | {bar} {count}")

    def plot_histogram(self, name: str, path: str | Path | None = None) -> None:
        try:
            import matplotlib
            matplotlib.use("Agg")
            import matplotlib.pyplot as plt
        except ImportError:
            print("matplotlib not installed - skipping plot", file=sys.stderr)
            return

        rounds = [g.rounds for g in self.solved]
        if not rounds:
            return
        bins = list(range(1, max(rounds) + 2))

        fig, ax = plt.subplots(figsize=(6, 4))
        ax.hist(rounds, bins=bins, edgecolor="black", align="left")
        ax.set_title(f"{name} - rounds to solve ({len(self.failed)} failed)")
        ax.set_xlabel("Rounds")
        ax.set_ylabel("Games")
        fig.tight_layout()

        dest = Path(path) if path else RESULTS_DIR / f"{name}_histogram.png"
        dest.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(dest, dpi=150)
        plt.close(fig)
        print(f"Histogram saved to {dest}")


# ------------------------------------------------------------------
# Running games
# ------------------------------------------------------------------

def _run_batch(
    strategy_name: str,
    corpus: Corpus,
    answers: list[str],
    config: StrategyConfig,
    max_rounds: int,
    echo: bool = True,
) -> list[GameResult]:
    """Play one fresh strategy instance per answer.  Runs in a worker process."""
    cls = get_strategy(strategy_name)
    game = Wordle(corpus, max_rounds=max_rounds)
    results: list[GameResult] = []
    for answer in answers:
        outcome = game.play(answer, cls(corpus, config))
        if echo:
            if outcome.solved:
                print(f"guessed '{answer}' in {outcome.rounds}", flush=True)
            else:
                print(f"failed to guess '{answer}'", file=sys.stderr, flush=True)
        results.append(GameResult(
            strategy=cls.name,
            answer=answer,
            rounds=outcome.rounds,
            solved=outcome.solved,
        ))
    return results


def run_games(
    corpus: Corpus,
    answers: list[str],
    strategy_name: str = "enumerate",
    config: StrategyConfig | None = None,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    max_games: int | None = None,
    workers: int = 1,
    echo: bool = True,
) -> TournamentResults:
    """Play *strategy_name* once per answer, in answer order.

    Each game gets its own strategy instance; only the corpus is shared,
    so games can run in separate processes.  With ``workers > 1`` the
    answers are split into contiguous batches, one per worker.
    """
    config = config if config is not None else StrategyConfig()
    get_strategy(strategy_name)  # fail fast on a bad name
    if max_games is not None:
        answers = answers[:max_games]

    results = TournamentResults()
    if workers <= 1 or len(answers) <= 1:
        results.games.extend(
            _run_batch(strategy_name, corpus, answers, config, max_rounds, echo)
        )
        return results

    size = -(-len(answers) // workers)
    batches = [answers[i:i + size] for i in range(0, len(answers), size)]
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_run_batch, strategy_name, corpus, batch, config, max_rounds, echo)
            for batch in batches
        ]
        for fut in futures:
            results.games.extend(fut.result())
    return results


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    strategies = sorted(discover_strategies())
    defaults = StrategyConfig()
    parser = argparse.ArgumentParser(
        description="Entropy Wordle solver benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python tournament.py                                   # enumerate on data/answers.txt
  python tournament.py --strategy naive --max-games 20   # slow reference strategy
  python tournament.py --strategy cutoff --cutoff 4
  python tournament.py --strategy sigmoid --raw-counts
  python tournament.py --workers 4 --csv results/run.csv
  python tournament.py --compute-opener                  # best first guess for the dictionary
""",
    )
    parser.add_argument("--dictionary", type=str, default=None,
                        help="Path to 'WORD FREQUENCY' list (default: data/dictionary.txt)")
    parser.add_argument("--answers", type=str, default=None,
                        help="Path to whitespace-separated answers (default: data/answers.txt)")
    parser.add_argument("--strategy", choices=strategies, default="enumerate",
                        help="Strategy to play (default: enumerate)")
    parser.add_argument("--max-games", type=int, default=None,
                        help="Only play the first N answers")
    parser.add_argument("--max-rounds", type=int, default=DEFAULT_MAX_ROUNDS,
                        help=f"Guess budget per game (default: {DEFAULT_MAX_ROUNDS})")
    parser.add_argument("--opener", type=str, default=None,
                        help="Override the first guess")
    parser.add_argument("--cutoff", type=int, default=defaults.cutoff,
                        help=f"Pool size below which 'cutoff' guesses the most "
                             f"frequent word (default: {defaults.cutoff})")
    parser.add_argument("--exponent", type=float, default=defaults.exponent,
                        help=f"Frequency exponent for 'popular' (default: {defaults.exponent})")
    parser.add_argument("--steepness", type=float, default=defaults.steepness,
                        help=f"Sigmoid slope for 'sigmoid' (default: {defaults.steepness})")
    parser.add_argument("--raw-counts", action="store_true",
                        help="Score 'sigmoid' with raw counts instead of the sigmoid")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes (default: 1)")
    parser.add_argument("--csv", type=str, default=None, help="Save per-game CSV")
    parser.add_argument("--json", type=str, default=None, help="Save results JSON")
    parser.add_argument("--plot", type=str, default=None, help="Save histogram PNG")
    parser.add_argument("--quiet", action="store_true", help="Skip per-game lines")
    parser.add_argument("--verbose", action="store_true", help="Log every round")
    parser.add_argument("--compute-opener", action="store_true",
                        help="Score the whole dictionary for the best first guess and exit")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    corpus = load_corpus(args.dictionary)
    print(f"Dictionary: {len(corpus)} words")

    if args.compute_opener:
        t0 = _time_mod.time()
        word = compute_opening(corpus)
        print(f"Best opener: {word} ({_time_mod.time() - t0:.1f}s)")
        return

    answers = load_answers(args.answers)
    config = StrategyConfig(
        opener=args.opener,
        cutoff=args.cutoff,
        exponent=args.exponent,
        steepness=None if args.raw_counts else args.steepness,
    )

    t0 = _time_mod.time()
    results = run_games(
        corpus,
        answers,
        strategy_name=args.strategy,
        config=config,
        max_rounds=args.max_rounds,
        max_games=args.max_games,
        workers=args.workers,
        echo=not args.quiet,
    )
    elapsed = _time_mod.time() - t0

    results.print_summary(args.strategy)
    print(f"Elapsed: {elapsed:.1f}s")

    if args.csv:
        results.to_csv(args.csv)
        print(f"CSV saved to {args.csv}")
    if args.json:
        results.to_json(args.json)
        print(f"JSON saved to {args.json}")
    if args.plot:
        results.plot_histogram(args.strategy, args.plot)


if __name__ == "__main__":
    main()
