"""Ready-made bosses a teacher can attach to any quiz."""

from __future__ import annotations

from .boss import BossHealth, BossMechanics, BossMessages, BossSettings, Difficulty

PRESET_BOSSES: dict[str, BossSettings] = {
    "CYBORG_PRIME": BossSettings(
        boss_name="Cyborg Prime",
        health=BossHealth(boss_hp=1000, player_hp=100),
        difficulty=Difficulty.MEDIUM,
        messages=BossMessages(
            boss_wins="Tu lógica es inferior. He vencido.",
            player_wins="Error crítico... Sistema apagándose...",
            perfect_win="Imposible. Cero errores detectados.",
        ),
        mechanics=BossMechanics(enable_power_ups=True, finish_him_move=True),
    ),
    "VAMPIRE_LORD": BossSettings(
        boss_name="Conde Byte",
        health=BossHealth(boss_hp=1500, player_hp=80),
        difficulty=Difficulty.HARD,
        messages=BossMessages(
            boss_wins="Tu conocimiento se ha desangrado...",
            player_wins="¡Maldición! La luz del saber quema...",
            perfect_win="Una mente inmaculada... delicioso.",
        ),
        mechanics=BossMechanics(enable_power_ups=True, finish_him_move=True),
    ),
    "GLITCH_MONSTER": BossSettings(
        boss_name="M1ssingN0",
        health=BossHealth(boss_hp=800, player_hp=120),
        difficulty=Difficulty.MEDIUM,
        messages=BossMessages(
            boss_wins="404: SKILL NOT FOUND.",
            player_wins="Seg.Fault... Core Dumped...",
            perfect_win="System.Optimized(100%).",
        ),
        mechanics=BossMechanics(enable_power_ups=True, finish_him_move=False),
    ),
}


def get_preset(key: str) -> BossSettings:
    """Return the preset boss registered under *key* (case-insensitive)."""
    try:
        return PRESET_BOSSES[key.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown boss preset {key!r}; expected one of {sorted(PRESET_BOSSES)}"
        ) from None
