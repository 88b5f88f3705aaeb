"""Battle statistics and the end-of-run attempt summary.

- **BattleStats**: running accumulators for one battle (damage, dodges,
  potions, answers).  A plain ``dataclass`` updated on every resolved
  turn, kept cheap for batch runs.
- **StatsRecorder**: the only writer of ``BattleStats``.
- **AttemptSummary**: the Pydantic record handed to the persistence
  collaborator when the session ends.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel

from quiz_boss.sim.core.battle_session import BattleResult

if TYPE_CHECKING:
    from quiz_boss.sim.core.battle_session import BattleSession
    from quiz_boss.sim.resolver import TurnResolution


@dataclass
class BattleStats:
    """Accumulated statistics for one battle.

    Attributes
    ----------
    total_damage:
        Boss HP removed by player hits and poison.
    max_hit:
        Largest single player hit.
    dodge_count:
        Boss attacks the player evaded.
    boss_dodges:
        Correct answers the boss dodged.
    crits:
        Critical hits landed.
    potions_used:
        Potions drunk.
    potions_looted:
        Potions dropped by the boss.
    boss_heals:
        Times the boss healed.
    correct_answers:
        Correct answers, dodged ones included.
    total_answers:
        Every resolved turn, timeouts included.
    timeouts:
        Turns forced by the countdown.
    """

    total_damage: int = 0
    max_hit: int = 0
    dodge_count: int = 0
    boss_dodges: int = 0
    crits: int = 0
    potions_used: int = 0
    potions_looted: int = 0
    boss_heals: int = 0
    correct_answers: int = 0
    total_answers: int = 0
    timeouts: int = 0

    @property
    def incorrect_answers(self) -> int:
        return self.total_answers - self.correct_answers

    @property
    def accuracy(self) -> int:
        """Percentage of correct answers, rounded to an integer."""
        if self.total_answers == 0:
            return 0
        return round(self.correct_answers / self.total_answers * 100)


class StatsRecorder:
    """Accumulates :class:`BattleStats` from resolved turns."""

    def __init__(self) -> None:
        self.stats = BattleStats()

    def record_turn(self, resolution: TurnResolution, boss_hp_lost: int) -> None:
        """Fold one applied turn into the stats.

        *boss_hp_lost* is the HP the boss actually lost to the hit after
        clamping.
        """
        s = self.stats
        s.total_answers += 1
        if resolution.correct:
            s.correct_answers += 1
        if resolution.timed_out:
            s.timeouts += 1
        if resolution.dodged:
            s.boss_dodges += 1
        if resolution.evaded:
            s.dodge_count += 1
        if resolution.crit:
            s.crits += 1
        if resolution.loot is not None:
            s.potions_looted += 1
        if resolution.boss_heal:
            s.boss_heals += 1
        if boss_hp_lost:
            s.total_damage += boss_hp_lost
            s.max_hit = max(s.max_hit, boss_hp_lost)

    def record_poison(self, boss_hp_lost: int) -> None:
        self.stats.total_damage += boss_hp_lost

    def record_potion_used(self) -> None:
        self.stats.potions_used += 1


class AnswersSummary(BaseModel):
    correct: int
    incorrect: int
    total: int


class AttemptSummary(BaseModel):
    """Final record of one attempt, ready for persistence."""

    nickname: str
    quiz_title: str
    boss_name: str
    result: BattleResult
    score: int
    total_time: float
    """Seconds the battle was played, as fed through ``tick``."""

    accuracy: int
    perfect_win: bool
    answers_summary: AnswersSummary
    loot_found: int
    stats: dict[str, int]


def build_summary(session: BattleSession, stats: BattleStats, nickname: str) -> AttemptSummary:
    """Assemble the :class:`AttemptSummary` for a finished *session*."""
    if session.result is None:
        raise ValueError("Cannot summarise a battle that has not ended")

    return AttemptSummary(
        nickname=nickname,
        quiz_title=session.quiz_title,
        boss_name=session.boss.name,
        result=session.result,
        score=session.score,
        total_time=round(session.elapsed_seconds, 3),
        accuracy=stats.accuracy,
        perfect_win=(
            session.result == BattleResult.WIN
            and stats.total_answers > 0
            and stats.incorrect_answers == 0
        ),
        answers_summary=AnswersSummary(
            correct=stats.correct_answers,
            incorrect=stats.incorrect_answers,
            total=stats.total_answers,
        ),
        loot_found=stats.potions_looted,
        stats=asdict(stats),
    )
