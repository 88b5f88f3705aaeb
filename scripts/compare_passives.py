"""Compare every passive perk over many simulated battles.

Usage:
    python scripts/compare_passives.py [--quiz PATH] [--boss PRESET]
        [--runs N] [--accuracy P] [--parallel] [--out PATH]
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from quiz_boss.balance.metrics import compute_passive_metrics
from quiz_boss.content.perks import PassivePerk
from quiz_boss.content.presets import get_preset
from quiz_boss.content.quiz import QuizPayload
from quiz_boss.sim.runner import BatchRunner
from quiz_boss.sim.stats import AttemptSummary

_DEFAULT_QUIZ = Path(__file__).resolve().parents[1] / "data" / "demo_quiz.json"


def run_comparison(
    payload: QuizPayload,
    n_runs: int,
    accuracy: float,
    parallel: bool,
) -> dict[str, list[AttemptSummary]]:
    runner = BatchRunner(payload, agent_config={"accuracy": accuracy})
    results: dict[str, list[AttemptSummary]] = {}

    for passive in PassivePerk:
        print(f"\nRunning {n_runs} battles with {passive.value}...")
        t0 = time.time()
        attempts = runner.run_batch(n_runs, passive=passive, base_seed=0, parallel=parallel)
        elapsed = time.time() - t0
        results[passive.value] = attempts

        scores = np.array([a.score for a in attempts])
        answers = np.array([a.answers_summary.total for a in attempts])
        wins = sum(1 for a in attempts if a.result.value == "WIN")
        print(f"  Time: {elapsed:.1f}s ({elapsed/n_runs*1000:.0f}ms/battle)")
        print(f"  Win rate: {wins}/{n_runs} ({wins/n_runs*100:.1f}%)")
        print(f"  Score: mean {scores.mean():.0f}, median {np.median(scores):.0f}")
        print(f"  Answers per battle: mean {answers.mean():.1f}, max {answers.max()}")

    return results


def generate_chart(results: dict[str, list[AttemptSummary]], n_runs: int, out: Path) -> None:
    metrics = compute_passive_metrics(results)
    labels = [m.passive for m in metrics]
    win_rates = [m.metrics.win_rate * 100 for m in metrics]
    scores = [m.metrics.avg_score for m in metrics]

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle(f"Passive comparison -- {n_runs} battles each", fontsize=14, fontweight="bold")

    ax = axes[0]
    bars = ax.bar(labels, win_rates, color="#3498db", edgecolor="black", linewidth=0.5)
    for bar, rate in zip(bars, win_rates):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + 1,
                f"{rate:.1f}%", ha="center", fontsize=9)
    ax.set_ylabel("Win rate (%)")
    ax.set_ylim(0, 110)

    ax = axes[1]
    ax.bar(labels, scores, color="#2ecc71", edgecolor="black", linewidth=0.5)
    ax.set_ylabel("Mean score")

    plt.tight_layout()
    plt.savefig(out, dpi=120)
    print(f"\nChart saved to {out}")

    print("\nSummary (best first):")
    for m in metrics:
        print(f"  {m.passive:8s} win {m.metrics.win_rate*100:5.1f}% "
              f"({m.win_rate_delta*100:+.1f})  score {m.metrics.avg_score:7.0f}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare passive perks by simulation")
    parser.add_argument("--quiz", type=Path, default=_DEFAULT_QUIZ, help="Quiz JSON file")
    parser.add_argument("--boss", default=None, help="Replace the quiz boss with a preset")
    parser.add_argument("--runs", type=int, default=200, help="Battles per passive")
    parser.add_argument("--accuracy", type=float, default=0.7, help="Agent accuracy")
    parser.add_argument("--parallel", action="store_true", help="Use multiprocessing")
    parser.add_argument("--out", type=Path, default=Path("passive_comparison.png"))
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    payload = QuizPayload.model_validate_json(args.quiz.read_text(encoding="utf-8"))
    if args.boss:
        payload = payload.model_copy(update={"boss": get_preset(args.boss)})

    results = run_comparison(payload, args.runs, args.accuracy, args.parallel)
    generate_chart(results, args.runs, args.out)


if __name__ == "__main__":
    main()
