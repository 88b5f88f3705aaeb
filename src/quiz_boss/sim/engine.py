"""Battle engine -- the state machine that runs one boss battle.

The engine owns exactly one :class:`BattleSession` plus the RNG,
countdown and stats recorder that go with it.  The host drives it with
discrete events:

- :meth:`BattleEngine.open_roulette` / :meth:`BattleEngine.select_passive`
  move the session from the lobby into play.
- :meth:`BattleEngine.submit` resolves an answer.
- :meth:`BattleEngine.tick` advances the countdown and resolves a timeout
  when it expires.
- :meth:`BattleEngine.use_potion` drinks a potion between turns.

Each call returns the combat events it produced.  Turn resolution is
synchronous and always runs to completion; inputs arriving while the
session is not idle are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ValidationError

from quiz_boss.content.perks import PassivePerk, PotionKind, StatusKind
from quiz_boss.content.questions import Question
from quiz_boss.content.quiz import QuizPayload
from quiz_boss.sim.config import DEFAULT_RULES, BattleRules
from quiz_boss.sim.core.battle_session import (
    BattleResult,
    BattleSession,
    Phase,
    TurnState,
)
from quiz_boss.sim.core.entities import Boss, Player
from quiz_boss.sim.core.question_queue import (
    AdvanceResult,
    QuestionQueue,
    prepare_questions,
)
from quiz_boss.sim.core.rng import GameRNG
from quiz_boss.sim.events import CombatEvent, CombatEventKind
from quiz_boss.sim.mechanics.answers import PlayerAnswer, Timeout
from quiz_boss.sim.mechanics.damage import ceil_int, fraction_of
from quiz_boss.sim.mechanics.potions import use_potion as drink_potion
from quiz_boss.sim.mechanics.rewards import spin_roulette
from quiz_boss.sim.mechanics.status_effects import has_status, tick_statuses
from quiz_boss.sim.resolver import TurnResolution, resolve_turn
from quiz_boss.sim.stats import AttemptSummary, BattleStats, StatsRecorder, build_summary
from quiz_boss.sim.timer import Countdown

logger = logging.getLogger(__name__)


class BattleConfigError(ValueError):
    """The quiz payload cannot start a battle."""


class TurnOutcome(str, Enum):
    """What a resolved turn led to."""

    CONTINUE = "CONTINUE"
    FINISH_IT = "FINISH_IT"
    REVIVE = "REVIVE"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"


@dataclass
class TurnResult:
    """Returned by :meth:`BattleEngine.submit` and :meth:`BattleEngine.tick`."""

    outcome: TurnOutcome
    correct: bool
    resolution: TurnResolution
    events: list[CombatEvent] = field(default_factory=list)


class BattleEngine:
    """Runs one battle from the lobby to the stats screen.

    Parameters
    ----------
    payload:
        The quiz to fight over, as a :class:`QuizPayload` or a raw dict.
    rules:
        Balance rules.  Defaults to the shipped balance.
    seed:
        Seed for a fresh :class:`GameRNG` (ignored when *rng* is given).
    rng:
        RNG to use for every roll and shuffle.
    player_name:
        Display name of the player side; also the default nickname of
        the attempt summary.
    """

    def __init__(
        self,
        payload: QuizPayload | dict[str, Any],
        *,
        rules: BattleRules | None = None,
        seed: int | None = None,
        rng: GameRNG | None = None,
        player_name: str = "Player",
    ) -> None:
        payload = _validate_payload(payload)
        boss_settings = payload.boss

        self.rules = rules or DEFAULT_RULES
        self.rng = rng or GameRNG(seed)
        self.player_name = player_name
        self.default_time_limit = payload.default_time_limit

        profile = boss_settings.profile
        boss_hp = ceil_int(boss_settings.health.boss_hp * profile.hp_multiplier)
        player_hp = boss_settings.health.player_hp

        primary = prepare_questions(payload.questions, self.rng, payload.question_count)

        self.session = BattleSession(
            quiz_title=payload.title,
            boss_settings=boss_settings,
            profile=profile,
            boss=Boss(name=boss_settings.boss_name, max_hp=boss_hp, current_hp=boss_hp),
            player=Player(name=player_name, max_hp=player_hp, current_hp=player_hp),
            queue=QuestionQueue(primary=primary),
        )
        self.countdown = Countdown(self.default_time_limit)
        self.recorder = StatsRecorder()

        logger.debug(
            "Battle created: %r vs %s (%d HP, %s), %d questions",
            payload.title, boss_settings.boss_name, boss_hp,
            boss_settings.difficulty.value, len(primary),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.session.phase

    @property
    def current_question(self) -> Question | None:
        return self.session.current_question

    @property
    def stats(self) -> BattleStats:
        return self.recorder.stats

    @property
    def is_over(self) -> bool:
        return self.session.is_over

    # ------------------------------------------------------------------
    # Lobby / roulette
    # ------------------------------------------------------------------

    def open_roulette(self) -> None:
        """Leave the lobby for the passive roulette."""
        if self.session.phase != Phase.LOBBY:
            raise ValueError(f"Cannot open the roulette from {self.session.phase.value}")
        self._set_phase(Phase.ROULETTE)

    def select_passive(self, perk: PassivePerk | None = None) -> PassivePerk:
        """Lock in the session's passive and start playing.

        With no *perk*, the roulette is spun with the session RNG.
        Returns the selected perk.
        """
        if self.session.phase != Phase.ROULETTE:
            raise ValueError(f"Cannot select a passive during {self.session.phase.value}")
        if perk is None:
            perk = spin_roulette(self.rng)
        self.session.passive = perk
        self._set_phase(Phase.PLAYING)
        self.session.turn_state = TurnState.IDLE
        self._arm_timer()
        return perk

    # ------------------------------------------------------------------
    # Turn input
    # ------------------------------------------------------------------

    def submit(self, answer: PlayerAnswer) -> TurnResult | None:
        """Resolve *answer* for the current question.

        Returns ``None`` (and changes nothing) when the session is not
        waiting for input.
        """
        if not self.session.accepts_input:
            logger.debug(
                "Ignoring answer during %s/%s",
                self.session.phase.value, self.session.turn_state.value,
            )
            return None
        return self._resolve(answer)

    def tick(self, dt: float) -> TurnResult | None:
        """Advance the countdown by *dt* seconds.

        Returns the timeout turn if the countdown expired while idle,
        otherwise ``None``.
        """
        if not self.session.in_battle:
            return None
        self.session.elapsed_seconds += max(dt, 0.0)
        expired = self.countdown.advance(dt)
        if expired and self.session.accepts_input:
            logger.debug("Countdown expired on %s", self._question_id())
            return self._resolve(Timeout())
        return None

    def use_potion(self, kind: PotionKind) -> list[CombatEvent]:
        """Drink one *kind* potion.  Only allowed between turns.

        Does not consume a turn.  Returns an empty list if the potion
        cannot be used right now.
        """
        if not self.session.accepts_input:
            logger.warning("Potion %s rejected: session is not idle", kind.value)
            return []
        if not self.session.player.has_potion(kind):
            logger.warning("Potion %s rejected: none in inventory", kind.value)
            return []

        event = drink_potion(self.session, kind, self.rules)
        self.recorder.record_potion_used()
        logger.debug("Potion used: %s", event)
        return [event]

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def summary(self, nickname: str | None = None) -> AttemptSummary:
        """Build the attempt summary.  Only valid once the battle ended."""
        if not self.session.is_over:
            raise ValueError("The battle is still running")
        return build_summary(self.session, self.recorder.stats, nickname or self.player_name)

    # ------------------------------------------------------------------
    # Turn resolution
    # ------------------------------------------------------------------

    def _resolve(self, answer: PlayerAnswer) -> TurnResult | None:
        session = self.session
        question = session.current_question
        if question is None:
            logger.warning("No current question during %s", session.phase.value)
            return None

        session.turn_state = TurnState.RESOLVING
        self.countdown.cancel()

        res = resolve_turn(session, question, answer, self.rng, self.rules)
        events = list(res.events)
        self._apply(res, question)
        events.extend(self._end_of_turn())

        outcome = self._transition(res, events)
        session.turns += 1

        if not session.is_over:
            session.turn_state = TurnState.IDLE
            self._arm_timer()

        logger.debug(
            "Turn %d on %s: correct=%s outcome=%s boss=%d/%d player=%d/%d",
            session.turns, question.id, res.correct, outcome.value,
            session.boss.current_hp, session.boss.max_hp,
            session.player.current_hp, session.player.max_hp,
        )
        return TurnResult(outcome=outcome, correct=res.correct, resolution=res, events=events)

    def _apply(self, res: TurnResolution, question: Question) -> None:
        session = self.session

        boss_hp_lost = session.boss.take_damage(res.boss_damage_taken)
        session.damage_dealt += boss_hp_lost
        session.player.take_damage(res.player_damage_taken)

        if res.loot is not None:
            session.player.potions.append(res.loot)
        if res.boss_heal:
            session.boss.heal(res.boss_heal)

        session.score += res.score_gain
        session.streak = res.streak
        if res.record_miss:
            session.queue.record_miss(question)

        self.recorder.record_turn(res, boss_hp_lost)

    def _end_of_turn(self) -> list[CombatEvent]:
        """Poison damage, then one status tick for each side."""
        session = self.session
        events: list[CombatEvent] = []

        if has_status(session.boss, StatusKind.POISON) and not session.boss.is_dead:
            lost = session.boss.take_damage(fraction_of(session.boss.max_hp, self.rules.poison_ratio))
            session.damage_dealt += lost
            self.recorder.record_poison(lost)
            events.append(CombatEvent(kind=CombatEventKind.POISON_TICK, amount=lost))

        tick_statuses(session.player)
        tick_statuses(session.boss)
        return events

    def _transition(self, res: TurnResolution, events: list[CombatEvent]) -> TurnOutcome:
        """Apply the post-turn rules in order: defeat, boss down, revive,
        advance."""
        session = self.session
        queue = session.queue
        finish_move = session.boss_settings.mechanics.finish_him_move

        if session.player.is_dead:
            return self._end(BattleResult.LOSE, events)

        if session.boss.is_dead:
            if queue.has_pending() and session.phase != Phase.FINISH_IT and finish_move:
                session.boss.set_hp(fraction_of(session.boss.max_hp, self.rules.revive_ratio))
                return self._enter_finish_phase(events)
            return self._end(BattleResult.WIN, events)

        if session.phase == Phase.FINISH_IT and not res.correct:
            # A revive never lowers the HP of a boss that was not knocked out.
            revive_hp = fraction_of(session.boss.max_hp, self.rules.revive_ratio)
            session.boss.set_hp(max(session.boss.current_hp, revive_hp))
            queue.return_to_primary(queue.primary_cursor + 1)
            self._set_phase(Phase.PLAYING)
            events.append(CombatEvent(
                kind=CombatEventKind.REVIVE,
                amount=session.boss.current_hp,
                message=f"{session.boss.name} rises again",
            ))
            return TurnOutcome.REVIVE

        if queue.advance(session.phase) == AdvanceResult.NEXT_IN_PHASE:
            return TurnOutcome.CONTINUE

        if session.phase == Phase.FINISH_IT:
            return self._end(BattleResult.WIN, events)

        if queue.missed and finish_move:
            return self._enter_finish_phase(events)

        if session.damage_dealt == 0:
            return self._end(BattleResult.LOSE, events)

        logger.debug("Primary round exhausted with the boss standing; wrapping around")
        queue.restart_primary()
        return TurnOutcome.CONTINUE

    def _enter_finish_phase(self, events: list[CombatEvent]) -> TurnOutcome:
        session = self.session
        session.queue.start_finish_phase()
        if not session.queue.retry:
            return self._end(BattleResult.WIN, events)
        self._set_phase(Phase.FINISH_IT)
        events.append(CombatEvent(
            kind=CombatEventKind.FINISH_IT,
            amount=session.boss.current_hp,
            message=f"{len(session.queue.retry)} questions to finish {session.boss.name}",
        ))
        return TurnOutcome.FINISH_IT

    def _end(self, result: BattleResult, events: list[CombatEvent]) -> TurnOutcome:
        session = self.session
        session.result = result
        session.turn_state = (
            TurnState.VICTORY if result == BattleResult.WIN else TurnState.DEFEAT
        )
        self.countdown.cancel()
        self._set_phase(Phase.STATS)

        if result == BattleResult.WIN:
            events.append(CombatEvent(
                kind=CombatEventKind.VICTORY,
                message=session.boss_settings.messages.player_wins,
            ))
            outcome = TurnOutcome.VICTORY
        else:
            events.append(CombatEvent(
                kind=CombatEventKind.DEFEAT,
                message=session.boss_settings.messages.boss_wins,
            ))
            outcome = TurnOutcome.DEFEAT

        stats = self.recorder.stats
        logger.info(
            "Battle over: %s, score %d, %d/%d correct",
            result.value, session.score, stats.correct_answers, stats.total_answers,
        )
        return outcome

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _set_phase(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.session.phase.value, phase.value)
        self.session.phase = phase

    def _arm_timer(self) -> None:
        question = self.session.current_question
        if question is None:
            self.countdown.cancel()
            return
        self.countdown.arm(question.time_limit or self.default_time_limit)

    def _question_id(self) -> str:
        question = self.session.current_question
        return question.id if question is not None else "-"


def _validate_payload(payload: QuizPayload | dict[str, Any]) -> QuizPayload:
    """Turn *payload* into a startable :class:`QuizPayload` or raise
    :class:`BattleConfigError`."""
    if not isinstance(payload, QuizPayload):
        try:
            payload = QuizPayload.model_validate(payload)
        except ValidationError as exc:
            raise BattleConfigError(f"Invalid quiz payload: {exc}") from exc

    if payload.boss is None:
        raise BattleConfigError(f"Quiz {payload.title!r} has no boss configuration")
    if not payload.questions:
        raise BattleConfigError(f"Quiz {payload.title!r} has no questions")
    if payload.question_count is not None and payload.question_count < 1:
        raise BattleConfigError(
            f"question_count must be >= 1, got {payload.question_count}"
        )
    return payload
