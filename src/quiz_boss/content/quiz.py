"""Quiz payload -- the top-level container a battle is created from."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .boss import BossSettings
from .questions import Question


class QuizPayload(BaseModel):
    """Everything the engine needs to start a session.

    Built by the host (usually via ``QuizPayload.model_validate`` on JSON
    it fetched).  ``boss`` is optional at the schema level so that the
    engine can report a missing boss as a configuration error.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    boss: BossSettings | None = None
    questions: tuple[Question, ...] = ()
    question_count: int | None = None
    """Cap on the number of questions drawn for the primary round."""

    default_time_limit: float = Field(default=20.0, gt=0)
    """Seconds per question when a question sets no limit of its own."""

    @model_validator(mode="after")
    def _check_unique_ids(self) -> QuizPayload:
        seen: set[str] = set()
        for q in self.questions:
            if q.id in seen:
                raise ValueError(f"duplicate question id {q.id!r}")
            seen.add(q.id)
        return self
