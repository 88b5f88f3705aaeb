"""Damage calculation for both sides of the battle.

Player hits:
    base -> fuerza -> strength -> boss vulnerable -> crit -> ceil

Boss attacks:
    ceil(player max HP * ratio * difficulty) -> escudo -> boss weak
    -> player vulnerable -> ceil

Multipliers compose multiplicatively and are applied independently in
that order.  Rounding always goes up, once at the end.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from quiz_boss.content.perks import PassivePerk, StatusKind

from .status_effects import has_status

if TYPE_CHECKING:
    from quiz_boss.content.boss import DifficultyProfile
    from quiz_boss.sim.config import BattleRules
    from quiz_boss.sim.core.entities import Boss, Player

# Float products such as 1200 * 0.1 land a hair above the integer; round
# them off before taking the ceiling.
_CEIL_PRECISION = 9


def ceil_int(value: float) -> int:
    """Round *value* up to an integer, ignoring float representation noise."""
    return math.ceil(round(value, _CEIL_PRECISION))


def calculate_player_damage(
    rules: BattleRules,
    player: Player,
    boss: Boss,
    passive: PassivePerk | None,
    crit: bool,
) -> int:
    """Damage of one successful player hit on the boss."""
    damage = float(rules.base_damage)

    if passive == PassivePerk.FUERZA:
        damage *= rules.fuerza_multiplier

    if has_status(player, StatusKind.STRENGTH):
        damage *= rules.strength_multiplier

    if has_status(boss, StatusKind.VULNERABLE):
        damage *= rules.vulnerable_multiplier

    if crit:
        damage *= rules.crit_multiplier

    return max(0, ceil_int(damage))


def calculate_boss_damage(
    rules: BattleRules,
    profile: DifficultyProfile,
    player: Player,
    boss: Boss,
    passive: PassivePerk | None,
) -> int:
    """Damage of one boss counter-attack on the player."""
    damage = float(ceil_int(player.max_hp * rules.boss_attack_ratio * profile.damage_multiplier))

    if passive == PassivePerk.ESCUDO:
        damage *= rules.escudo_multiplier

    if has_status(boss, StatusKind.WEAK):
        damage *= rules.weak_multiplier

    if has_status(player, StatusKind.VULNERABLE):
        damage *= rules.vulnerable_multiplier

    return max(0, ceil_int(damage))


def fraction_of(max_hp: int, ratio: float) -> int:
    """``ceil(max_hp * ratio)`` -- used for heals, revives and poison."""
    return ceil_int(max_hp * ratio)
