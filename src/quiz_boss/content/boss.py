"""Boss settings and difficulty profiles."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    LEGEND = "legend"


class DifficultyProfile(BaseModel):
    """Read-only balance knobs selected once from the boss difficulty."""

    model_config = ConfigDict(frozen=True)

    hp_multiplier: float = Field(gt=0)
    """Scales the configured boss HP."""

    damage_multiplier: float = Field(ge=0)
    """Scales the boss counter-attack."""

    dodge_chance: float = Field(ge=0, le=1)
    """Chance the boss dodges an otherwise-successful hit."""

    boss_heal_chance: float = Field(ge=0, le=1)
    """Chance a wounded boss heals after attacking."""


DIFFICULTY_PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(
        hp_multiplier=0.8, damage_multiplier=0.5, dodge_chance=0.0, boss_heal_chance=0.0,
    ),
    Difficulty.MEDIUM: DifficultyProfile(
        hp_multiplier=1.0, damage_multiplier=1.0, dodge_chance=0.05, boss_heal_chance=0.10,
    ),
    Difficulty.HARD: DifficultyProfile(
        hp_multiplier=1.2, damage_multiplier=1.5, dodge_chance=0.10, boss_heal_chance=0.20,
    ),
    Difficulty.LEGEND: DifficultyProfile(
        hp_multiplier=1.5, damage_multiplier=2.0, dodge_chance=0.15, boss_heal_chance=0.30,
    ),
}


class BossHealth(BaseModel):
    model_config = ConfigDict(frozen=True)

    boss_hp: int = Field(gt=0)
    player_hp: int = Field(gt=0)


class BossMessages(BaseModel):
    """Flavour lines shown by the host at the end of a battle."""

    model_config = ConfigDict(frozen=True)

    boss_wins: str = ""
    player_wins: str = ""
    perfect_win: str = ""


class BossMechanics(BaseModel):
    model_config = ConfigDict(frozen=True)

    enable_power_ups: bool = True
    """When false no potions drop during the battle."""

    finish_him_move: bool = True
    """When false the boss dies for good at 0 HP and missed questions are
    never replayed."""


class BossSettings(BaseModel):
    """Complete boss configuration attached to a quiz."""

    model_config = ConfigDict(frozen=True)

    boss_name: str = Field(min_length=1)
    health: BossHealth
    difficulty: Difficulty = Difficulty.MEDIUM
    messages: BossMessages = Field(default_factory=BossMessages)
    mechanics: BossMechanics = Field(default_factory=BossMechanics)

    @property
    def profile(self) -> DifficultyProfile:
        return DIFFICULTY_PROFILES[self.difficulty]
