"""Tests for the content schema -- questions, boss settings, quiz payloads."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from quiz_boss.content import (
    DIFFICULTY_PROFILES,
    PRESET_BOSSES,
    BossHealth,
    BossSettings,
    Difficulty,
    Option,
    Question,
    QuestionType,
    QuizPayload,
    get_preset,
)

DEMO_QUIZ = Path(__file__).resolve().parents[2] / "data" / "demo_quiz.json"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _options(*ids: str) -> tuple[Option, ...]:
    return tuple(Option(id=i, text=i) for i in ids)


def _make_boss(**kwargs) -> BossSettings:
    defaults = dict(boss_name="Cyborg Prime", health=BossHealth(boss_hp=1000, player_hp=100))
    defaults.update(kwargs)
    return BossSettings(**defaults)


# ---------------------------------------------------------------------------
# Question
# ---------------------------------------------------------------------------

class TestQuestion:
    def test_single_choice(self):
        q = Question(
            id="q1", text="?", options=_options("a", "b"), correct_option_ids=frozenset({"a"}),
        )
        assert q.type == QuestionType.SINGLE_CHOICE
        assert q.option_ids == ["a", "b"]
        assert q.time_limit is None

    def test_choice_needs_correct_option(self):
        with pytest.raises(ValidationError):
            Question(id="q1", text="?", options=_options("a", "b"))

    def test_correct_option_must_exist(self):
        with pytest.raises(ValidationError, match="unknown options"):
            Question(
                id="q1", text="?", options=_options("a", "b"),
                correct_option_ids=frozenset({"z"}),
            )

    def test_order_needs_two_options(self):
        with pytest.raises(ValidationError):
            Question(id="q1", text="?", type=QuestionType.ORDER, options=_options("a"))

    def test_free_text_needs_an_answer(self):
        with pytest.raises(ValidationError):
            Question(
                id="q1", text="?", type=QuestionType.FREE_TEXT, accepted_answers=("  ",),
            )

    def test_time_limit_positive(self):
        with pytest.raises(ValidationError):
            Question(
                id="q1", text="?", options=_options("a"),
                correct_option_ids=frozenset({"a"}), time_limit=0,
            )

    def test_frozen(self):
        q = Question(
            id="q1", text="?", options=_options("a"), correct_option_ids=frozenset({"a"}),
        )
        with pytest.raises(ValidationError):
            q.text = "changed"

    def test_json_round_trip(self):
        q = Question(
            id="q1", text="?", type=QuestionType.MULTI_SELECT,
            options=_options("a", "b", "c"), correct_option_ids=frozenset({"a", "c"}),
        )
        assert Question.model_validate_json(q.model_dump_json()) == q


# ---------------------------------------------------------------------------
# Boss settings
# ---------------------------------------------------------------------------

class TestBossSettings:
    def test_defaults(self):
        boss = _make_boss()
        assert boss.difficulty == Difficulty.MEDIUM
        assert boss.mechanics.enable_power_ups
        assert boss.mechanics.finish_him_move

    def test_profile_follows_difficulty(self):
        boss = _make_boss(difficulty=Difficulty.LEGEND)
        assert boss.profile is DIFFICULTY_PROFILES[Difficulty.LEGEND]
        assert boss.profile.hp_multiplier == 1.5

    def test_difficulty_from_string(self):
        boss = BossSettings.model_validate({
            "boss_name": "X",
            "health": {"boss_hp": 10, "player_hp": 10},
            "difficulty": "hard",
        })
        assert boss.difficulty == Difficulty.HARD

    def test_hp_must_be_positive(self):
        with pytest.raises(ValidationError):
            BossHealth(boss_hp=0, player_hp=100)

    def test_profiles_cover_every_difficulty(self):
        assert set(DIFFICULTY_PROFILES) == set(Difficulty)

    def test_profiles_get_harder(self):
        order = [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD, Difficulty.LEGEND]
        mults = [DIFFICULTY_PROFILES[d].damage_multiplier for d in order]
        assert mults == sorted(mults)


class TestPresets:
    def test_lookup_is_case_insensitive(self):
        assert get_preset("vampire_lord").boss_name == "Conde Byte"

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown boss preset"):
            get_preset("DRAGON")

    def test_glitch_monster_has_no_finish_move(self):
        assert not PRESET_BOSSES["GLITCH_MONSTER"].mechanics.finish_him_move


# ---------------------------------------------------------------------------
# QuizPayload
# ---------------------------------------------------------------------------

class TestQuizPayload:
    def test_duplicate_ids_rejected(self):
        q = Question(id="q1", text="?", options=_options("a"), correct_option_ids=frozenset({"a"}))
        with pytest.raises(ValidationError, match="duplicate"):
            QuizPayload(title="Dup", boss=_make_boss(), questions=(q, q))

    def test_boss_optional_at_schema_level(self):
        assert QuizPayload(title="No boss").boss is None

    def test_demo_quiz_loads(self):
        payload = QuizPayload.model_validate(json.loads(DEMO_QUIZ.read_text(encoding="utf-8")))

        assert payload.title == "Sistema Solar"
        assert payload.boss.boss_name == "Cyborg Prime"
        assert len(payload.questions) == 12
        assert {q.type for q in payload.questions} == set(QuestionType)
