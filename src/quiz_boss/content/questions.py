"""Question definitions -- the quiz content a battle is fought over."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QuestionType(str, Enum):
    """How a question is answered and judged."""

    SINGLE_CHOICE = "SINGLE_CHOICE"
    """Exactly one option is picked."""

    TRUE_FALSE = "TRUE_FALSE"
    """Two-option single choice.  Option order is never shuffled."""

    MULTI_SELECT = "MULTI_SELECT"
    """Any number of options are picked; the set must match exactly."""

    ORDER = "ORDER"
    """Options are rearranged; the source order is the answer key."""

    FREE_TEXT = "FREE_TEXT"
    """A typed answer compared against the accepted strings."""


# Question types whose options are shuffled once when the session loads.
SHUFFLED_TYPES = frozenset({QuestionType.SINGLE_CHOICE, QuestionType.MULTI_SELECT})

# Question types judged by option-id membership.
CHOICE_TYPES = frozenset({
    QuestionType.SINGLE_CHOICE,
    QuestionType.TRUE_FALSE,
    QuestionType.MULTI_SELECT,
})


class Option(BaseModel):
    """A single answer option."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    image_url: str | None = None


class MatchConfig(BaseModel):
    """Comparison rules for free-text answers."""

    model_config = ConfigDict(frozen=True)

    case_sensitive: bool = False
    ignore_accents: bool = False


class Question(BaseModel):
    """Complete, immutable definition of one quiz question."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    type: QuestionType = QuestionType.SINGLE_CHOICE
    options: tuple[Option, ...] = ()
    """Options in source order.  For ``ORDER`` questions this order is
    the correct sequence."""

    correct_option_ids: frozenset[str] = frozenset()
    """Ids of the correct options for choice-type questions."""

    accepted_answers: tuple[str, ...] = ()
    """Accepted strings for ``FREE_TEXT`` questions."""

    time_limit: float | None = Field(default=None, gt=0)
    """Seconds allowed to answer.  ``None`` falls back to the quiz default."""

    match_config: MatchConfig = Field(default_factory=MatchConfig)

    @model_validator(mode="after")
    def _check_answer_key(self) -> Question:
        if self.type in CHOICE_TYPES:
            if not self.options:
                raise ValueError(f"question {self.id!r} has no options")
            if not self.correct_option_ids:
                raise ValueError(f"question {self.id!r} has no correct option")
            unknown = self.correct_option_ids - set(self.option_ids)
            if unknown:
                raise ValueError(
                    f"question {self.id!r} marks unknown options as correct: "
                    f"{sorted(unknown)}"
                )
        elif self.type == QuestionType.ORDER:
            if len(self.options) < 2:
                raise ValueError(f"ordering question {self.id!r} needs 2+ options")
        elif self.type == QuestionType.FREE_TEXT:
            if not any(a.strip() for a in self.accepted_answers):
                raise ValueError(f"free-text question {self.id!r} has no accepted answer")
        return self

    @property
    def option_ids(self) -> list[str]:
        return [o.id for o in self.options]
