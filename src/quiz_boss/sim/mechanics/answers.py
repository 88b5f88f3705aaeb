"""Player answers and correctness evaluation.

Each answer kind is a small Pydantic model tagged by ``kind`` so the
host can send answers as JSON and the engine can validate them into the
:data:`PlayerAnswer` union.  A submitted answer that does not fit the
question (wrong kind, unknown option id) is never an error: it is simply
judged incorrect.
"""

from __future__ import annotations

import unicodedata
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from quiz_boss.content.questions import MatchConfig, Question, QuestionType


class ChoiceAnswer(BaseModel):
    """A single picked option (single choice, true/false)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["choice"] = "choice"
    option_id: str


class MultiChoiceAnswer(BaseModel):
    """A set of picked options (multi-select)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multi_choice"] = "multi_choice"
    option_ids: frozenset[str]


class TextAnswer(BaseModel):
    """A typed answer (free text)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class OrderAnswer(BaseModel):
    """The option ids as the player rearranged them (ordering)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["order"] = "order"
    option_ids: tuple[str, ...]


class Timeout(BaseModel):
    """The countdown ran out before an answer arrived."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["timeout"] = "timeout"


PlayerAnswer = Annotated[
    Union[ChoiceAnswer, MultiChoiceAnswer, TextAnswer, OrderAnswer, Timeout],
    Field(discriminator="kind"),
]


def normalize_text(text: str, config: MatchConfig | None = None) -> str:
    """Trim and case-fold *text* (and strip accents when configured)."""
    config = config or MatchConfig()
    value = text.strip()
    if not config.case_sensitive:
        value = value.casefold()
    if config.ignore_accents:
        decomposed = unicodedata.normalize("NFD", value)
        value = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return value


def is_answer_correct(question: Question, answer: PlayerAnswer) -> bool:
    """Judge *answer* against *question*.

    * single choice / true-false -- the picked id is a correct id.
    * multi-select -- the picked set equals the correct set exactly.
    * free text -- the normalised input equals a normalised accepted answer.
    * ordering -- the submitted ids match the source order position by
      position.
    * timeout -- always wrong.
    """
    if isinstance(answer, Timeout):
        return False

    qtype = question.type

    if qtype in (QuestionType.SINGLE_CHOICE, QuestionType.TRUE_FALSE):
        if not isinstance(answer, ChoiceAnswer):
            return False
        return answer.option_id in question.correct_option_ids

    if qtype == QuestionType.MULTI_SELECT:
        if not isinstance(answer, MultiChoiceAnswer):
            return False
        chosen = set(answer.option_ids)
        return (
            len(chosen) == len(question.correct_option_ids)
            and chosen <= question.correct_option_ids
        )

    if qtype == QuestionType.FREE_TEXT:
        if not isinstance(answer, TextAnswer):
            return False
        given = normalize_text(answer.text, question.match_config)
        if not given:
            return False
        return any(
            given == normalize_text(accepted, question.match_config)
            for accepted in question.accepted_answers
        )

    if qtype == QuestionType.ORDER:
        if not isinstance(answer, OrderAnswer):
            return False
        return list(answer.option_ids) == question.option_ids

    return False
