"""Combat resolver -- the math of one answered question.

:func:`resolve_turn` reads the session, draws the turn's random rolls in
a fixed order and returns a :class:`TurnResolution` describing what
should happen.  It never mutates the session; the engine applies the
resolution.  Roll order (one draw each, only when reached):

1. correct answer: boss dodge -> crit -> loot
2. miss branch (wrong answer, timeout or dodge): agil evade (skipped
   when smoke is active) -> boss heal (only when the boss is below half
   HP and the attack landed)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from quiz_boss.content.perks import PassivePerk, PotionKind, StatusKind
from quiz_boss.sim.events import CombatEvent, CombatEventKind
from quiz_boss.sim.mechanics.answers import Timeout, is_answer_correct
from quiz_boss.sim.mechanics.damage import (
    calculate_boss_damage,
    calculate_player_damage,
    fraction_of,
)
from quiz_boss.sim.mechanics.rewards import crit_chance, maybe_drop_potion
from quiz_boss.sim.mechanics.status_effects import has_status

if TYPE_CHECKING:
    from quiz_boss.content.questions import Question
    from quiz_boss.sim.config import BattleRules
    from quiz_boss.sim.core.battle_session import BattleSession
    from quiz_boss.sim.core.rng import GameRNG
    from quiz_boss.sim.mechanics.answers import PlayerAnswer


@dataclass
class TurnResolution:
    """Outcome of the turn math, before it is applied to the session.

    Attributes
    ----------
    correct:
        Whether the answer was right.  Stays ``True`` on a boss dodge so
        accuracy counts it.
    timed_out:
        The turn was forced by the countdown.
    dodged:
        The boss dodged a correct answer.
    crit:
        The player hit was critical.
    boss_damage_taken:
        Damage to apply to the boss (before clamping).
    player_damage_taken:
        Damage to apply to the player (before clamping).
    evaded:
        The player evaded the boss attack.
    boss_heal:
        HP the boss regains (0 if the heal did not trigger).
    loot:
        Potion granted to the player, if any.
    score_gain:
        Score added this turn.
    streak:
        Streak value after the turn.
    record_miss:
        The question must go into the missed partition.
    events:
        Ordered combat events for the host.
    """

    correct: bool
    timed_out: bool = False
    dodged: bool = False
    crit: bool = False
    boss_damage_taken: int = 0
    player_damage_taken: int = 0
    evaded: bool = False
    boss_heal: int = 0
    loot: PotionKind | None = None
    score_gain: int = 0
    streak: int = 0
    record_miss: bool = False
    events: list[CombatEvent] = field(default_factory=list)

    @property
    def landed_hit(self) -> bool:
        return self.correct and not self.dodged


def resolve_turn(
    session: BattleSession,
    question: Question,
    answer: PlayerAnswer,
    rng: GameRNG,
    rules: BattleRules,
) -> TurnResolution:
    """Judge *answer* and compute the consequences of this turn."""
    timed_out = isinstance(answer, Timeout)
    correct = is_answer_correct(question, answer)
    res = TurnResolution(correct=correct, timed_out=timed_out, streak=session.streak)

    if correct:
        if rng.roll(session.profile.dodge_chance):
            res.dodged = True
            res.streak = 0
            res.events.append(CombatEvent(
                kind=CombatEventKind.BOSS_DODGE,
                message=f"{session.boss.name} dodged the attack",
            ))
            _resolve_boss_attack(session, rng, rules, res)
        else:
            _resolve_player_hit(session, rng, rules, res)
        return res

    if not session.queue.is_missed(question.id):
        res.record_miss = True
    res.streak = 0
    _resolve_boss_attack(session, rng, rules, res)
    return res


# ---------------------------------------------------------------------------
# Branches
# ---------------------------------------------------------------------------

def _resolve_player_hit(
    session: BattleSession,
    rng: GameRNG,
    rules: BattleRules,
    res: TurnResolution,
) -> None:
    previous_streak = session.streak
    res.streak = previous_streak + 1
    res.score_gain = rules.score_base + rules.streak_bonus * previous_streak

    res.crit = rng.roll(crit_chance(rules, session.passive))
    damage = calculate_player_damage(
        rules, session.player, session.boss, session.passive, res.crit,
    )
    res.boss_damage_taken = damage
    if res.crit:
        res.events.append(CombatEvent(kind=CombatEventKind.CRIT, amount=damage))
    res.events.append(CombatEvent(kind=CombatEventKind.BOSS_HIT, amount=damage))

    if session.boss_settings.mechanics.enable_power_ups:
        res.loot = maybe_drop_potion(rules, rng, session.passive)
        if res.loot is not None:
            res.events.append(CombatEvent(kind=CombatEventKind.LOOT_DROP, potion=res.loot))


def _resolve_boss_attack(
    session: BattleSession,
    rng: GameRNG,
    rules: BattleRules,
    res: TurnResolution,
) -> None:
    player = session.player
    boss = session.boss

    # Smoke short-circuits: the agil roll is only drawn without it.
    if has_status(player, StatusKind.EVASIVE_SMOKE) or (
        session.passive == PassivePerk.AGIL and rng.roll(rules.agil_evade_chance)
    ):
        res.evaded = True
        res.events.append(CombatEvent(
            kind=CombatEventKind.EVADE,
            message=f"{player.name} evaded {boss.name}",
        ))
        return

    damage = calculate_boss_damage(rules, session.profile, player, boss, session.passive)
    res.player_damage_taken = damage
    res.events.append(CombatEvent(kind=CombatEventKind.PLAYER_HIT, amount=damage))

    if boss.current_hp < boss.max_hp * rules.heal_threshold:
        if rng.roll(session.profile.boss_heal_chance):
            res.boss_heal = fraction_of(boss.max_hp, rules.heal_ratio)
            res.events.append(CombatEvent(kind=CombatEventKind.BOSS_HEAL, amount=res.boss_heal))
