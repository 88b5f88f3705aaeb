"""Content schema for quiz boss battles.

Questions, boss settings, difficulty profiles, perks and potions are all
Pydantic models (or closed enums) that validate and serialise cleanly
to/from JSON.  :class:`QuizPayload` is the top-level container handed to
the battle engine.
"""

from .boss import (
    DIFFICULTY_PROFILES,
    BossHealth,
    BossMechanics,
    BossMessages,
    BossSettings,
    Difficulty,
    DifficultyProfile,
)
from .perks import PassivePerk, PotionKind, StatusKind
from .presets import PRESET_BOSSES, get_preset
from .questions import MatchConfig, Option, Question, QuestionType
from .quiz import QuizPayload

__all__ = [
    # boss
    "BossHealth",
    "BossMechanics",
    "BossMessages",
    "BossSettings",
    "Difficulty",
    "DifficultyProfile",
    "DIFFICULTY_PROFILES",
    # perks
    "PassivePerk",
    "PotionKind",
    "StatusKind",
    # presets
    "PRESET_BOSSES",
    "get_preset",
    # questions
    "MatchConfig",
    "Option",
    "Question",
    "QuestionType",
    # quiz
    "QuizPayload",
]
