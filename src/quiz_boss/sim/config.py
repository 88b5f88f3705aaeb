"""Balance rules for the battle engine.

Every number the turn math uses lives on :class:`BattleRules`.  The
defaults are the shipped game balance; tests and balance experiments
pass a modified copy to the engine instead of patching constants.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from quiz_boss.content.perks import PotionKind, StatusKind


class PotionEffect(BaseModel):
    """What drinking one potion does."""

    model_config = ConfigDict(frozen=True)

    status: StatusKind | None = None
    """Status attached by the potion, or ``None`` for instant potions."""

    target: Literal["player", "boss"] = "player"

    turns: int = 0


class BattleRules(BaseModel):
    """Tunable balance constants."""

    model_config = ConfigDict(frozen=True)

    # -- player attack -------------------------------------------------------
    base_damage: int = 100
    score_base: int = 100
    streak_bonus: int = 10
    """Extra score per answer already in the streak."""

    fuerza_multiplier: float = 1.2
    strength_multiplier: float = 1.5
    vulnerable_multiplier: float = 2.0
    crit_chance: float = Field(default=0.10, ge=0, le=1)
    certero_crit_chance: float = Field(default=0.30, ge=0, le=1)
    crit_multiplier: float = 1.5

    # -- loot ----------------------------------------------------------------
    loot_chance: float = Field(default=0.10, ge=0, le=1)
    suerte_loot_chance: float = Field(default=0.25, ge=0, le=1)

    # -- boss attack ---------------------------------------------------------
    boss_attack_ratio: float = 0.2
    """Fraction of the player's max HP dealt per boss attack."""

    agil_evade_chance: float = Field(default=0.20, ge=0, le=1)
    escudo_multiplier: float = 0.85
    weak_multiplier: float = 0.5

    # -- boss recovery -------------------------------------------------------
    heal_threshold: float = 0.5
    heal_ratio: float = 0.1
    revive_ratio: float = 0.1
    poison_ratio: float = 0.05
    """Fraction of boss max HP lost per resolved turn while poisoned."""

    # -- potions -------------------------------------------------------------
    potion_effects: dict[PotionKind, PotionEffect] = Field(
        default_factory=lambda: {
            PotionKind.HEAL: PotionEffect(),
            PotionKind.POISON: PotionEffect(status=StatusKind.POISON, target="boss", turns=3),
            PotionKind.WEAKEN: PotionEffect(status=StatusKind.WEAK, target="boss", turns=3),
            PotionKind.VULNERABLE: PotionEffect(
                status=StatusKind.VULNERABLE, target="boss", turns=2,
            ),
            PotionKind.SMOKE: PotionEffect(
                status=StatusKind.EVASIVE_SMOKE, target="player", turns=1,
            ),
            PotionKind.STRENGTH: PotionEffect(
                status=StatusKind.STRENGTH, target="player", turns=3,
            ),
        }
    )


DEFAULT_RULES = BattleRules()
