"""Combat events emitted for presentation and audio cues.

Every engine call that changes the battle returns the ordered list of
events it produced.  The host drives animations, sounds and pacing
delays from this list; the simulation itself never waits on them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from quiz_boss.content.perks import PotionKind


class CombatEventKind(str, Enum):
    PLAYER_HIT = "PLAYER_HIT"
    """The boss damaged the player."""

    BOSS_HIT = "BOSS_HIT"
    """The player damaged the boss."""

    BOSS_DODGE = "BOSS_DODGE"
    """The boss dodged a correct answer."""

    EVADE = "EVADE"
    """The player evaded a boss attack."""

    CRIT = "CRIT"
    LOOT_DROP = "LOOT_DROP"
    BOSS_HEAL = "BOSS_HEAL"
    POISON_TICK = "POISON_TICK"
    POTION_USED = "POTION_USED"
    FINISH_IT = "FINISH_IT"
    """The boss is down; the finishing round replays missed questions."""

    REVIVE = "REVIVE"
    """A miss in the finishing round revived the boss."""

    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"


class CombatEvent(BaseModel):
    """One discrete thing that happened during a turn."""

    model_config = ConfigDict(frozen=True)

    kind: CombatEventKind
    amount: int = 0
    """HP moved by the event (damage, heal), where it applies."""

    potion: PotionKind | None = None
    message: str = ""

    def __str__(self) -> str:
        parts = [self.kind.value]
        if self.amount:
            parts.append(str(self.amount))
        if self.potion is not None:
            parts.append(self.potion.value)
        return " ".join(parts)
