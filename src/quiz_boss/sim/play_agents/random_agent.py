"""Random agent -- answers correctly with a fixed probability.

The ``RandomAgent`` is the baseline for batch balance runs: it stands in
for a class with a given accuracy so boss and passive tuning can be
compared under the same conditions.

Behaviour:
    - With probability ``accuracy`` it submits the correct answer.
    - Otherwise, with probability ``timeout_chance`` it lets the countdown
      expire, else it submits a plausible wrong answer.
    - It drinks a heal potion when below 40 % HP and any other potion as
      soon as it has one whose status is not already active.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quiz_boss.content.perks import PotionKind, StatusKind
from quiz_boss.content.questions import QuestionType
from quiz_boss.sim.core.rng import GameRNG
from quiz_boss.sim.mechanics.answers import (
    ChoiceAnswer,
    MultiChoiceAnswer,
    OrderAnswer,
    TextAnswer,
)
from quiz_boss.sim.play_agents.base import QuizAgent

if TYPE_CHECKING:
    from quiz_boss.content.questions import Question
    from quiz_boss.sim.core.battle_session import BattleSession
    from quiz_boss.sim.mechanics.answers import PlayerAnswer

_HEAL_BELOW = 0.4


class RandomAgent(QuizAgent):
    """Agent that answers right with probability *accuracy*.

    Parameters
    ----------
    rng:
        Seeded RNG for the agent's own decisions.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    accuracy:
        Probability (0.0 -- 1.0) of answering correctly.
    timeout_chance:
        Probability that a wrong answer is a timeout instead.
    use_potions:
        Whether the agent drinks potions at all.
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        accuracy: float = 0.7,
        timeout_chance: float = 0.1,
        use_potions: bool = True,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._accuracy = accuracy
        self._timeout_chance = timeout_chance
        self._use_potions = use_potions

    # ------------------------------------------------------------------
    # QuizAgent interface
    # ------------------------------------------------------------------

    def choose_answer(
        self,
        session: BattleSession,
        question: Question,
    ) -> PlayerAnswer | None:
        if self._rng.roll(self._accuracy):
            return correct_answer(question)
        if self._rng.roll(self._timeout_chance):
            return None
        return self._wrong_answer(question)

    def choose_potion(self, session: BattleSession) -> PotionKind | None:
        if not self._use_potions:
            return None
        potions = session.player.potions
        if not potions:
            return None

        if PotionKind.HEAL in potions and session.player.hp_fraction < _HEAL_BELOW:
            return PotionKind.HEAL

        active = {e.kind for e in session.player.status_effects}
        active |= {e.kind for e in session.boss.status_effects}
        for kind in potions:
            if kind == PotionKind.HEAL:
                continue
            if _POTION_STATUS[kind] not in active:
                return kind
        return None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _wrong_answer(self, question: Question) -> PlayerAnswer:
        qtype = question.type
        ids = question.option_ids

        if qtype in (QuestionType.SINGLE_CHOICE, QuestionType.TRUE_FALSE):
            wrong = [i for i in ids if i not in question.correct_option_ids]
            return ChoiceAnswer(option_id=self._rng.random_choice(wrong) if wrong else "")

        if qtype == QuestionType.MULTI_SELECT:
            chosen = set(question.correct_option_ids)
            flip = self._rng.random_choice(ids)
            chosen ^= {flip}
            return MultiChoiceAnswer(option_ids=frozenset(chosen))

        if qtype == QuestionType.ORDER:
            shuffled = list(reversed(ids))
            return OrderAnswer(option_ids=tuple(shuffled))

        return TextAnswer(text="")


def correct_answer(question: Question) -> PlayerAnswer:
    """Build the answer that *question* accepts."""
    qtype = question.type
    if qtype == QuestionType.MULTI_SELECT:
        return MultiChoiceAnswer(option_ids=question.correct_option_ids)
    if qtype == QuestionType.ORDER:
        return OrderAnswer(option_ids=tuple(question.option_ids))
    if qtype == QuestionType.FREE_TEXT:
        return TextAnswer(text=question.accepted_answers[0])
    return ChoiceAnswer(option_id=sorted(question.correct_option_ids)[0])


_POTION_STATUS = {
    PotionKind.POISON: StatusKind.POISON,
    PotionKind.WEAKEN: StatusKind.WEAK,
    PotionKind.VULNERABLE: StatusKind.VULNERABLE,
    PotionKind.SMOKE: StatusKind.EVASIVE_SMOKE,
    PotionKind.STRENGTH: StatusKind.STRENGTH,
}
