"""Core battle mechanics.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from quiz_boss.sim.mechanics import (
        is_answer_correct,
        calculate_player_damage, calculate_boss_damage,
        apply_status, tick_statuses, has_status,
        maybe_drop_potion, spin_roulette,
        use_potion,
    )
"""

# -- answers -----------------------------------------------------------------
from .answers import (
    ChoiceAnswer,
    MultiChoiceAnswer,
    OrderAnswer,
    PlayerAnswer,
    TextAnswer,
    Timeout,
    is_answer_correct,
    normalize_text,
)

# -- damage ------------------------------------------------------------------
from .damage import calculate_boss_damage, calculate_player_damage, ceil_int, fraction_of

# -- potions -----------------------------------------------------------------
from .potions import use_potion

# -- rewards -----------------------------------------------------------------
from .rewards import crit_chance, loot_chance, maybe_drop_potion, spin_roulette

# -- status effects ----------------------------------------------------------
from .status_effects import (
    apply_status,
    has_status,
    remaining_turns,
    remove_status,
    tick_statuses,
)

__all__ = [
    # answers
    "ChoiceAnswer",
    "MultiChoiceAnswer",
    "OrderAnswer",
    "PlayerAnswer",
    "TextAnswer",
    "Timeout",
    "is_answer_correct",
    "normalize_text",
    # damage
    "calculate_player_damage",
    "calculate_boss_damage",
    "ceil_int",
    "fraction_of",
    # potions
    "use_potion",
    # rewards
    "crit_chance",
    "loot_chance",
    "maybe_drop_potion",
    "spin_roulette",
    # status effects
    "apply_status",
    "tick_statuses",
    "has_status",
    "remaining_turns",
    "remove_status",
]
