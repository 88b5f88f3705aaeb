"""Passive perks, potions and the status effects they attach."""

from __future__ import annotations

from enum import Enum


class PassivePerk(str, Enum):
    """Permanent perk chosen once per session by the roulette."""

    FUERZA = "fuerza"
    """Player hits deal x1.2 damage."""

    CERTERO = "certero"
    """Critical chance rises from 10 % to 30 %."""

    SUERTE = "suerte"
    """Loot chance rises from 10 % to 25 %."""

    AGIL = "agil"
    """20 % chance to evade each boss attack."""

    ESCUDO = "escudo"
    """Boss attacks deal 15 % less damage."""


class StatusKind(str, Enum):
    """Timed effects attached to the player or the boss."""

    POISON = "poison"
    WEAK = "weak"
    VULNERABLE = "vulnerable"
    EVASIVE_SMOKE = "evasive_smoke"
    STRENGTH = "strength"


class PotionKind(str, Enum):
    """Consumables the player can loot and drink."""

    HEAL = "heal"
    POISON = "poison"
    WEAKEN = "weaken"
    VULNERABLE = "vulnerable"
    SMOKE = "smoke"
    STRENGTH = "strength"
