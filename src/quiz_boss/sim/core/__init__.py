"""Core simulation primitives for the quiz boss battle engine."""

from quiz_boss.sim.core.battle_session import (
    BattleResult,
    BattleSession,
    Phase,
    TurnState,
)
from quiz_boss.sim.core.entities import Boss, Combatant, Player, StatusEffect
from quiz_boss.sim.core.question_queue import (
    AdvanceResult,
    QuestionQueue,
    prepare_questions,
)
from quiz_boss.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # entities
    "StatusEffect",
    "Combatant",
    "Player",
    "Boss",
    # question_queue
    "AdvanceResult",
    "QuestionQueue",
    "prepare_questions",
    # battle_session
    "BattleResult",
    "BattleSession",
    "Phase",
    "TurnState",
]
