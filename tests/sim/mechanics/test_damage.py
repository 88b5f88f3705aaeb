"""Tests for damage calculation on both sides."""

import pytest

from quiz_boss.content.boss import DIFFICULTY_PROFILES, Difficulty
from quiz_boss.content.perks import PassivePerk, StatusKind
from quiz_boss.sim.config import BattleRules
from quiz_boss.sim.core.entities import Boss, Player
from quiz_boss.sim.mechanics.damage import (
    calculate_boss_damage,
    calculate_player_damage,
    ceil_int,
    fraction_of,
)
from quiz_boss.sim.mechanics.status_effects import apply_status

RULES = BattleRules()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_player(**kwargs) -> Player:
    defaults = dict(name="Class", max_hp=100, current_hp=100)
    defaults.update(kwargs)
    return Player(**defaults)


def _make_boss(**kwargs) -> Boss:
    defaults = dict(name="Cyborg Prime", max_hp=1000, current_hp=1000)
    defaults.update(kwargs)
    return Boss(**defaults)


# ---------------------------------------------------------------------------
# calculate_player_damage
# ---------------------------------------------------------------------------

class TestPlayerDamage:
    def test_base_damage(self):
        assert calculate_player_damage(RULES, _make_player(), _make_boss(), None, False) == 100

    def test_fuerza(self):
        dmg = calculate_player_damage(RULES, _make_player(), _make_boss(), PassivePerk.FUERZA, False)
        assert dmg == 120

    def test_strength_status(self):
        player = _make_player()
        apply_status(player, StatusKind.STRENGTH, 2)
        assert calculate_player_damage(RULES, player, _make_boss(), None, False) == 150

    def test_fuerza_and_vulnerable_boss(self):
        boss = _make_boss()
        apply_status(boss, StatusKind.VULNERABLE, 2)
        dmg = calculate_player_damage(RULES, _make_player(), boss, PassivePerk.FUERZA, False)
        assert dmg == 240

    def test_fuerza_vulnerable_and_crit(self):
        boss = _make_boss()
        apply_status(boss, StatusKind.VULNERABLE, 2)
        dmg = calculate_player_damage(RULES, _make_player(), boss, PassivePerk.FUERZA, True)
        assert dmg == 360

    def test_all_multipliers(self):
        player = _make_player()
        boss = _make_boss()
        apply_status(player, StatusKind.STRENGTH, 1)
        apply_status(boss, StatusKind.VULNERABLE, 1)
        # 100 * 1.2 * 1.5 * 2 * 1.5
        dmg = calculate_player_damage(RULES, player, boss, PassivePerk.FUERZA, True)
        assert dmg == 540

    def test_rounds_up(self):
        rules = BattleRules(base_damage=33)
        # 33 * 1.5 = 49.5
        assert calculate_player_damage(rules, _make_player(), _make_boss(), None, True) == 50

    def test_other_passives_do_not_change_damage(self):
        for perk in (PassivePerk.CERTERO, PassivePerk.SUERTE, PassivePerk.AGIL, PassivePerk.ESCUDO):
            assert calculate_player_damage(RULES, _make_player(), _make_boss(), perk, False) == 100


# ---------------------------------------------------------------------------
# calculate_boss_damage
# ---------------------------------------------------------------------------

class TestBossDamage:
    def test_medium(self):
        profile = DIFFICULTY_PROFILES[Difficulty.MEDIUM]
        assert calculate_boss_damage(RULES, profile, _make_player(), _make_boss(), None) == 20

    def test_easy_halves(self):
        profile = DIFFICULTY_PROFILES[Difficulty.EASY]
        assert calculate_boss_damage(RULES, profile, _make_player(), _make_boss(), None) == 10

    def test_base_rounds_up(self):
        profile = DIFFICULTY_PROFILES[Difficulty.HARD]
        # 85 * 0.2 * 1.5 = 25.5
        player = _make_player(max_hp=85, current_hp=85)
        assert calculate_boss_damage(RULES, profile, player, _make_boss(), None) == 26

    def test_escudo(self):
        profile = DIFFICULTY_PROFILES[Difficulty.MEDIUM]
        dmg = calculate_boss_damage(RULES, profile, _make_player(), _make_boss(), PassivePerk.ESCUDO)
        assert dmg == 17

    def test_player_vulnerable_doubles(self):
        profile = DIFFICULTY_PROFILES[Difficulty.MEDIUM]
        player = _make_player()
        apply_status(player, StatusKind.VULNERABLE, 1)
        assert calculate_boss_damage(RULES, profile, player, _make_boss(), None) == 40

    def test_weakened_boss(self):
        profile = DIFFICULTY_PROFILES[Difficulty.MEDIUM]
        boss = _make_boss()
        apply_status(boss, StatusKind.WEAK, 1)
        assert calculate_boss_damage(RULES, profile, _make_player(), boss, None) == 10

    def test_escudo_and_vulnerable(self):
        profile = DIFFICULTY_PROFILES[Difficulty.MEDIUM]
        player = _make_player()
        apply_status(player, StatusKind.VULNERABLE, 1)
        # 20 * 0.85 * 2 = 34
        dmg = calculate_boss_damage(RULES, profile, player, _make_boss(), PassivePerk.ESCUDO)
        assert dmg == 34


# ---------------------------------------------------------------------------
# Rounding helpers
# ---------------------------------------------------------------------------

class TestRounding:
    @pytest.mark.parametrize("value,expected", [(240.0, 240), (49.5, 50), (0.0, 0), (10.01, 11)])
    def test_ceil_int(self, value, expected):
        assert ceil_int(value) == expected

    def test_fraction_ignores_float_noise(self):
        # 1200 * 0.1 is 120.00000000000001 in binary floating point.
        assert fraction_of(1200, 0.1) == 120

    def test_fraction_rounds_up(self):
        assert fraction_of(805, 0.1) == 81
