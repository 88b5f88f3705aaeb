"""Combatant models for the boss battle.

All data classes use Pydantic v2 BaseModel for validation and
serialization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from quiz_boss.content.perks import PotionKind, StatusKind


# ---------------------------------------------------------------------------
# StatusEffect
# ---------------------------------------------------------------------------

class StatusEffect(BaseModel):
    """One timed effect attached to a combatant.

    Several entries of the same ``kind`` may coexist; they are never
    merged.
    """

    kind: StatusKind
    remaining_turns: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Combatant base
# ---------------------------------------------------------------------------

class Combatant(BaseModel):
    """Common base for anything with HP and status effects.

    HP is kept within ``[0, max_hp]`` by every mutator.
    """

    name: str
    max_hp: int = Field(gt=0)
    current_hp: int
    status_effects: list[StatusEffect] = Field(default_factory=list)

    # -- HP queries ----------------------------------------------------------

    @property
    def is_dead(self) -> bool:
        return self.current_hp <= 0

    @property
    def hp_fraction(self) -> float:
        return self.current_hp / self.max_hp

    # -- damage / heal -------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Apply *amount* damage, clamped at 0 HP.

        Returns the HP actually lost.
        """
        if amount <= 0:
            return 0
        hp_lost = min(self.current_hp, amount)
        self.current_hp -= hp_lost
        return hp_lost

    def heal(self, amount: int) -> int:
        """Heal *amount* HP, capped at ``max_hp``.  Returns HP restored."""
        if amount <= 0:
            return 0
        restored = min(self.max_hp - self.current_hp, amount)
        self.current_hp += restored
        return restored

    def set_hp(self, amount: int) -> None:
        """Set HP to *amount*, clamped to ``[0, max_hp]``."""
        self.current_hp = max(0, min(self.max_hp, amount))


# ---------------------------------------------------------------------------
# Player / Boss
# ---------------------------------------------------------------------------

class Player(Combatant):
    """The class, fighting as one."""

    potions: list[PotionKind] = Field(default_factory=list)
    """Ordered multiset of potions in the inventory."""

    def has_potion(self, kind: PotionKind) -> bool:
        return kind in self.potions

    def take_potion(self, kind: PotionKind) -> None:
        """Remove one unit of *kind* from the inventory."""
        try:
            self.potions.remove(kind)
        except ValueError:
            raise ValueError(f"No {kind.value!r} potion in inventory") from None


class Boss(Combatant):
    """The boss being fought."""
