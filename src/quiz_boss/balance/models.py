"""Pydantic v2 models for batch balance analysis.

These models define the structured output of a batch of simulated
battles: aggregate metrics for the whole batch and a breakdown per
passive perk.  All are serializable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel


class BatchMetrics(BaseModel):
    """Aggregate statistics over a batch of attempts."""

    total_runs: int
    wins: int
    losses: int
    win_rate: float
    perfect_wins: int
    avg_score: float
    avg_accuracy: float
    """Mean accuracy percentage."""
    avg_answers: float
    """Mean resolved turns per battle."""
    avg_damage: float
    avg_max_hit: float
    avg_potions_looted: float
    avg_potions_used: float
    avg_boss_heals: float
    avg_time: float
    """Mean play time in seconds."""


class PassiveMetrics(BaseModel):
    """Batch metrics for the attempts played with one passive."""

    passive: str
    metrics: BatchMetrics
    win_rate_delta: float
    """win_rate - overall win rate."""
