"""Potion usage -- consume one unit and apply its effect."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quiz_boss.content.perks import PotionKind
from quiz_boss.sim.events import CombatEvent, CombatEventKind

from .status_effects import apply_status

if TYPE_CHECKING:
    from quiz_boss.sim.config import BattleRules
    from quiz_boss.sim.core.battle_session import BattleSession


def use_potion(
    session: BattleSession,
    kind: PotionKind,
    rules: BattleRules,
) -> CombatEvent:
    """Drink one *kind* potion from the player's inventory.

    ``heal`` restores the player to full HP at once; every other potion
    attaches its timed status to the player or the boss.  Raises
    ``ValueError`` if the inventory holds no such potion.

    Parameters
    ----------
    session:
        The battle state (mutated in-place).
    kind:
        The potion to drink.
    rules:
        Balance rules carrying each potion's status and duration.
    """
    session.player.take_potion(kind)

    if kind == PotionKind.HEAL:
        restored = session.player.heal(session.player.max_hp)
        return CombatEvent(kind=CombatEventKind.POTION_USED, potion=kind, amount=restored)

    effect = rules.potion_effects[kind]
    target = session.boss if effect.target == "boss" else session.player
    apply_status(target, effect.status, effect.turns)
    return CombatEvent(
        kind=CombatEventKind.POTION_USED,
        potion=kind,
        message=f"{effect.status.value} on {target.name} for {effect.turns} turns",
    )
