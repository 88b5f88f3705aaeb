"""Random rewards -- loot drops after a hit and the passive roulette.

- Loot: 10 % chance per successful hit (25 % with ``suerte``), one
  uniformly random potion kind.
- Roulette: one uniform pick among the passive perks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quiz_boss.content.perks import PassivePerk, PotionKind

if TYPE_CHECKING:
    from quiz_boss.sim.config import BattleRules
    from quiz_boss.sim.core.rng import GameRNG

_POTION_POOL: tuple[PotionKind, ...] = tuple(PotionKind)
_PASSIVE_POOL: tuple[PassivePerk, ...] = tuple(PassivePerk)


def loot_chance(rules: BattleRules, passive: PassivePerk | None) -> float:
    if passive == PassivePerk.SUERTE:
        return rules.suerte_loot_chance
    return rules.loot_chance


def crit_chance(rules: BattleRules, passive: PassivePerk | None) -> float:
    if passive == PassivePerk.CERTERO:
        return rules.certero_crit_chance
    return rules.crit_chance


def maybe_drop_potion(
    rules: BattleRules,
    rng: GameRNG,
    passive: PassivePerk | None,
) -> PotionKind | None:
    """Roll the loot chance once; on success pick a random potion kind.

    Returns the potion kind if dropped, ``None`` otherwise.
    """
    if not rng.roll(loot_chance(rules, passive)):
        return None
    return rng.random_choice(_POTION_POOL)


def spin_roulette(rng: GameRNG) -> PassivePerk:
    """Pick the session's passive perk uniformly at random."""
    return rng.random_choice(_PASSIVE_POOL)
