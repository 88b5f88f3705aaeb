"""Pure metric computation functions for balance analysis.

All functions take a list of AttemptSummary and return structured
metrics.  No side effects, no I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quiz_boss.balance.models import BatchMetrics, PassiveMetrics
from quiz_boss.sim.core.battle_session import BattleResult

if TYPE_CHECKING:
    from quiz_boss.sim.stats import AttemptSummary


def compute_batch_metrics(attempts: list[AttemptSummary]) -> BatchMetrics:
    """Compute aggregate statistics over *attempts*."""
    total = len(attempts)
    if total == 0:
        return BatchMetrics(
            total_runs=0, wins=0, losses=0, win_rate=0.0, perfect_wins=0,
            avg_score=0.0, avg_accuracy=0.0, avg_answers=0.0, avg_damage=0.0,
            avg_max_hit=0.0, avg_potions_looted=0.0, avg_potions_used=0.0,
            avg_boss_heals=0.0, avg_time=0.0,
        )

    wins = sum(1 for a in attempts if a.result == BattleResult.WIN)

    def mean(values: list[float]) -> float:
        return sum(values) / total

    return BatchMetrics(
        total_runs=total,
        wins=wins,
        losses=total - wins,
        win_rate=wins / total,
        perfect_wins=sum(1 for a in attempts if a.perfect_win),
        avg_score=mean([a.score for a in attempts]),
        avg_accuracy=mean([a.accuracy for a in attempts]),
        avg_answers=mean([a.answers_summary.total for a in attempts]),
        avg_damage=mean([a.stats["total_damage"] for a in attempts]),
        avg_max_hit=mean([a.stats["max_hit"] for a in attempts]),
        avg_potions_looted=mean([a.stats["potions_looted"] for a in attempts]),
        avg_potions_used=mean([a.stats["potions_used"] for a in attempts]),
        avg_boss_heals=mean([a.stats["boss_heals"] for a in attempts]),
        avg_time=mean([a.total_time for a in attempts]),
    )


def compute_passive_metrics(
    attempts_by_passive: dict[str, list[AttemptSummary]],
) -> list[PassiveMetrics]:
    """Per-passive metrics, sorted by win rate (best first).

    The delta is measured against the win rate of all attempts pooled.
    """
    pooled = [a for attempts in attempts_by_passive.values() for a in attempts]
    overall = compute_batch_metrics(pooled).win_rate

    results = []
    for passive, attempts in attempts_by_passive.items():
        metrics = compute_batch_metrics(attempts)
        results.append(PassiveMetrics(
            passive=passive,
            metrics=metrics,
            win_rate_delta=metrics.win_rate - overall,
        ))

    results.sort(key=lambda m: m.metrics.win_rate, reverse=True)
    return results
