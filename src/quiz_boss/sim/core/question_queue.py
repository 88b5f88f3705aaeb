"""Question queue -- the three partitions that pace a battle.

``primary`` is the main round, ``missed`` collects every question the
class got wrong (once per id), and ``retry`` is the finishing round
replayed against a revived boss.  ``missed`` feeds ``retry`` at the
phase boundary so the two are never active together.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from quiz_boss.content.questions import SHUFFLED_TYPES, Question

if TYPE_CHECKING:
    from quiz_boss.sim.core.battle_session import Phase
    from quiz_boss.sim.core.rng import GameRNG


class AdvanceResult(str, Enum):
    NEXT_IN_PHASE = "NEXT_IN_PHASE"
    PHASE_EXHAUSTED = "PHASE_EXHAUSTED"


def prepare_questions(
    questions: list[Question] | tuple[Question, ...],
    rng: GameRNG,
    limit: int | None = None,
) -> list[Question]:
    """Shuffle *questions*, cap them at *limit*, and shuffle the options of
    choice-type questions.

    Ordering and true/false questions keep their source option order.
    """
    pool = list(questions)
    rng.shuffle(pool)
    if limit is not None:
        pool = pool[:limit]

    prepared: list[Question] = []
    for q in pool:
        if q.type in SHUFFLED_TYPES:
            options = list(q.options)
            rng.shuffle(options)
            q = q.model_copy(update={"options": tuple(options)})
        prepared.append(q)
    return prepared


class QuestionQueue(BaseModel):
    """Owns the primary, retry and missed partitions plus the cursor."""

    primary: list[Question] = Field(default_factory=list)
    retry: list[Question] = Field(default_factory=list)
    missed: list[Question] = Field(default_factory=list)
    cursor: int = 0
    primary_cursor: int = 0
    """Primary-round position saved while the finishing round runs."""

    # -- queries -------------------------------------------------------------

    def current_question(self, phase: Phase) -> Question | None:
        """Return the question under the cursor, or ``None`` once the
        active partition is exhausted."""
        items = self._active(phase)
        if 0 <= self.cursor < len(items):
            return items[self.cursor]
        return None

    def has_pending(self) -> bool:
        """True if any question is waiting in ``missed`` or ``retry``."""
        return bool(self.missed or self.retry)

    def is_missed(self, question_id: str) -> bool:
        return any(q.id == question_id for q in self.missed)

    # -- mutations -----------------------------------------------------------

    def record_miss(self, question: Question) -> bool:
        """Append *question* to ``missed`` unless its id is already there.

        Returns ``True`` if it was added.
        """
        if self.is_missed(question.id):
            return False
        self.missed.append(question)
        return True

    def advance(self, phase: Phase) -> AdvanceResult:
        """Move the cursor to the next question of the active partition."""
        self.cursor += 1
        if self.cursor < len(self._active(phase)):
            return AdvanceResult.NEXT_IN_PHASE
        return AdvanceResult.PHASE_EXHAUSTED

    def start_finish_phase(self) -> None:
        """Seed ``retry`` from ``missed`` and rewind the cursor.

        A pre-seeded ``retry`` is kept when ``missed`` is empty.
        """
        if self.missed:
            self.retry = list(self.missed)
        self.missed = []
        # An exhausted round leaves the cursor one past the end.
        self.primary_cursor = min(self.cursor, max(len(self.primary) - 1, 0))
        self.cursor = 0

    def return_to_primary(self, index: int) -> None:
        """Discard ``retry`` and resume the primary round at *index*
        (wrapped to the primary length)."""
        self.retry = []
        self.cursor = index % len(self.primary) if self.primary else 0

    def restart_primary(self) -> None:
        """Wrap the primary round back to its first question."""
        self.cursor = 0

    # -- internal ------------------------------------------------------------

    def _active(self, phase: Phase) -> list[Question]:
        # Imported here to avoid a circular import with battle_session.
        from quiz_boss.sim.core.battle_session import Phase

        return self.retry if phase == Phase.FINISH_IT else self.primary
