"""Shared fixtures and helpers for simulation tests."""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

import pytest

from quiz_boss.content.boss import BossHealth, BossMechanics, BossSettings, Difficulty
from quiz_boss.content.questions import Option, Question, QuestionType
from quiz_boss.content.quiz import QuizPayload
from quiz_boss.sim.core.rng import GameRNG

T = TypeVar("T")


class ScriptedRNG(GameRNG):
    """RNG stub that returns queued floats, then *default* forever.

    ``random_choice`` always picks the first element and ``shuffle`` is a
    no-op, so question and option order stay as written.
    """

    def __init__(self, floats: Sequence[float] = (), default: float = 0.99) -> None:
        super().__init__(seed=0)
        self._floats = list(floats)
        self.default = default
        self.draws = 0

    def queue(self, *floats: float) -> None:
        self._floats.extend(floats)

    def random_float(self) -> float:
        self.draws += 1
        if self._floats:
            return self._floats.pop(0)
        return self.default

    def random_choice(self, seq: Sequence[T]) -> T:
        return seq[0]

    def shuffle(self, lst: list[T]) -> None:
        pass


def make_question(qid: str = "q1", **kwargs: Any) -> Question:
    """Single-choice question with options a/b/c/d and ``a`` correct."""
    defaults: dict[str, Any] = dict(
        id=qid,
        text=f"Question {qid}",
        type=QuestionType.SINGLE_CHOICE,
        options=tuple(Option(id=o, text=o.upper()) for o in "abcd"),
        correct_option_ids=frozenset({"a"}),
    )
    defaults.update(kwargs)
    return Question(**defaults)


def make_payload(
    n_questions: int = 10,
    boss_hp: int = 1000,
    player_hp: int = 100,
    difficulty: Difficulty = Difficulty.EASY,
    enable_power_ups: bool = True,
    finish_him_move: bool = True,
    **kwargs: Any,
) -> QuizPayload:
    boss = BossSettings(
        boss_name="Cyborg Prime",
        health=BossHealth(boss_hp=boss_hp, player_hp=player_hp),
        difficulty=difficulty,
        mechanics=BossMechanics(
            enable_power_ups=enable_power_ups, finish_him_move=finish_him_move,
        ),
    )
    questions = tuple(make_question(f"q{i}") for i in range(1, n_questions + 1))
    defaults: dict[str, Any] = dict(title="Test Quiz", boss=boss, questions=questions)
    defaults.update(kwargs)
    return QuizPayload(**defaults)


@pytest.fixture
def scripted_rng() -> type[ScriptedRNG]:
    """The ScriptedRNG class, used as a factory."""
    return ScriptedRNG


@pytest.fixture
def question_factory():
    return make_question


@pytest.fixture
def payload_factory():
    return make_payload
