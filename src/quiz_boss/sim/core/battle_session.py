"""Battle session -- the full mutable state of one boss battle.

The session is a plain data aggregate.  All transitions go through
:class:`~quiz_boss.sim.engine.BattleEngine`, which owns exactly one
session for its lifetime.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from quiz_boss.content.boss import BossSettings, DifficultyProfile
from quiz_boss.content.perks import PassivePerk
from quiz_boss.content.questions import Question
from quiz_boss.sim.core.entities import Boss, Player
from quiz_boss.sim.core.question_queue import QuestionQueue


class Phase(str, Enum):
    """Top-level game phases.  ``STATS`` is terminal."""

    LOBBY = "LOBBY"
    ROULETTE = "ROULETTE"
    PLAYING = "PLAYING"
    FINISH_IT = "FINISH_IT"
    STATS = "STATS"


class TurnState(str, Enum):
    """Per-turn sub-state.  Input is only accepted while ``IDLE``."""

    IDLE = "IDLE"
    RESOLVING = "RESOLVING"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"


class BattleResult(str, Enum):
    WIN = "WIN"
    LOSE = "LOSE"


class BattleSession(BaseModel):
    """Everything that changes during a battle."""

    quiz_title: str
    boss_settings: BossSettings
    profile: DifficultyProfile
    boss: Boss
    player: Player
    queue: QuestionQueue = Field(default_factory=QuestionQueue)

    phase: Phase = Phase.LOBBY
    turn_state: TurnState = TurnState.IDLE
    result: BattleResult | None = None

    passive: PassivePerk | None = None
    score: int = 0
    streak: int = 0
    damage_dealt: int = 0
    """Total boss HP removed this run (hits and poison)."""

    turns: int = 0
    elapsed_seconds: float = 0.0

    # -- queries -------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.STATS

    @property
    def in_battle(self) -> bool:
        return self.phase in (Phase.PLAYING, Phase.FINISH_IT)

    @property
    def accepts_input(self) -> bool:
        return self.in_battle and self.turn_state == TurnState.IDLE

    @property
    def current_question(self) -> Question | None:
        if not self.in_battle:
            return None
        return self.queue.current_question(self.phase)
