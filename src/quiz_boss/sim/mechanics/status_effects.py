"""Status effect lifecycle -- apply, tick, query, remove.

Manages the ``status_effects`` list on Combatant objects.  Each entry is
an independent :class:`StatusEffect` with its own remaining turns;
applying the same kind twice adds a second entry rather than merging,
since every rule only asks whether *any* entry of a kind is present.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quiz_boss.sim.core.entities import StatusEffect

if TYPE_CHECKING:
    from quiz_boss.content.perks import StatusKind
    from quiz_boss.sim.core.entities import Combatant


def apply_status(entity: Combatant, kind: StatusKind, turns: int) -> StatusEffect:
    """Attach a new effect of *kind* lasting *turns* resolved turns.

    Parameters
    ----------
    entity:
        The combatant receiving the status.
    kind:
        Which effect to attach.
    turns:
        Duration in resolved turns; must be >= 1.

    Returns
    -------
    StatusEffect
        The entry that was appended.
    """
    if turns < 1:
        raise ValueError(f"status duration must be >= 1, got {turns}")
    effect = StatusEffect(kind=kind, remaining_turns=turns)
    entity.status_effects.append(effect)
    return effect


def tick_statuses(entity: Combatant) -> list[StatusKind]:
    """Decrement every effect on *entity* by one turn.

    Entries that reach 0 are dropped.  Called exactly once per resolved
    turn for each combatant.

    Returns
    -------
    list[StatusKind]
        Kinds of the entries that expired on this tick.
    """
    expired: list[StatusKind] = []
    remaining: list[StatusEffect] = []
    for effect in entity.status_effects:
        effect.remaining_turns -= 1
        if effect.remaining_turns <= 0:
            expired.append(effect.kind)
        else:
            remaining.append(effect)
    entity.status_effects = remaining
    return expired


def has_status(entity: Combatant, kind: StatusKind) -> bool:
    """Check whether *entity* has at least one effect of *kind*."""
    return any(e.kind == kind for e in entity.status_effects)


def remaining_turns(entity: Combatant, kind: StatusKind) -> int:
    """Longest remaining duration among effects of *kind*, or ``0``."""
    return max(
        (e.remaining_turns for e in entity.status_effects if e.kind == kind),
        default=0,
    )


def remove_status(entity: Combatant, kind: StatusKind) -> None:
    """Remove every effect of *kind* from *entity*."""
    entity.status_effects = [e for e in entity.status_effects if e.kind != kind]
