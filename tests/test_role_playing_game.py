from dataclasses import replace

from katas.role_playing_game import Player


def test_reviving_dead_player():
    dead = Player(health=0, mana=0, level=34)
    revived = dead.revive()
    assert revived == Player(health=100, mana=100, level=34)


def test_reviving_dead_level9_player():
    dead = Player(health=0, mana=None, level=9)
    revived = dead.revive()
    assert revived == Player(health=100, mana=None, level=9)


def test_reviving_dead_level10_player():
    dead = Player(health=0, mana=0, level=10)
    revived = dead.revive()
    assert revived == Player(health=100, mana=100, level=10)


def test_reviving_alive_player():
    assert Player(health=1, mana=None, level=8).revive() is None


def test_cast_spell_with_enough_mana():
    wizard = Player(health=99, mana=100, level=100)
    assert wizard.cast_spell(3) == 6
    assert wizard == Player(health=99, mana=97, level=100)


def test_cast_spell_with_insufficient_mana():
    wizard = Player(health=56, mana=2, level=22)
    before = replace(wizard)
    assert wizard.cast_spell(3) == 0
    assert wizard == before


def test_cast_spell_with_no_mana_pool():
    player = Player(health=87, mana=None, level=6)
    assert player.cast_spell(10) == 0
    assert player == Player(health=77, mana=None, level=6)


def test_cast_large_spell_with_no_mana_pool():
    player = Player(health=20, mana=None, level=6)
    assert player.cast_spell(30) == 0
    assert player == Player(health=0, mana=None, level=6)