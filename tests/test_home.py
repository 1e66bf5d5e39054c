import pytest

from tdguard.config import ConfigManager
from tdguard.home import HomeManager


class _CountingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_starts_with_initial_hp_from_config():
    config = ConfigManager()
    home = HomeManager(config.num_initial_hp)
    assert home.current_hp == config.num_initial_hp


def test_decrease_subtracts():
    home = HomeManager(10)
    home.decrease_hp(3)
    assert home.current_hp == pytest.approx(7)


def test_hp_never_goes_below_zero():
    home = HomeManager(2)
    home.decrease_hp(5)
    assert home.current_hp == 0
    home.decrease_hp(1)
    assert home.current_hp == 0


def test_sound_played_on_every_hit():
    sound = _CountingSound()
    home = HomeManager(10, sound)
    home.decrease_hp(1)
    home.decrease_hp(20)
    assert sound.plays == 2
    assert home.current_hp == 0