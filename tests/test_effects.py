import pytest

from sorcery.board import Board
from sorcery.effects import BuffEffect, DamageEffect, Effect, SummonEffect
from sorcery.minion import Minion


def _minion(name="Target", attack=1, defence=3):
    return Minion(0, name, 0, attack, defence)


def _doubler(base):
    return Minion(base.card_id, base.name, base.cost, base.attack * 2, base.defence * 2)


def test_effect_is_abstract():
    with pytest.raises(TypeError):
        Effect()


def test_damage_effect_without_target_raises():
    with pytest.raises(ValueError):
        DamageEffect(1).apply()


def test_damage_effect_hits_target(capsys):
    target = _minion(defence=3)
    effect = DamageEffect(1)
    effect.set_target(target)
    effect.apply()
    assert target.defence == 3 - 1
    assert "Target takes 1 damage!" in capsys.readouterr().out


def test_damage_effect_supports_target_and_clone_drops_it():
    effect = DamageEffect(4)
    effect.set_target(_minion())
    copy = effect.clone()
    assert effect.supports_target is True
    assert copy.damage == 4
    assert copy.target is None


def test_summon_effect_fills_board():
    board = Board()
    air = Minion(0, "Air Elemental", 0, 1, 1)
    SummonEffect(air, 3, board).apply()
    assert len(board) == 3
    assert all(m is not air for m in board)
    assert [m.name for m in board] == ["Air Elemental"] * 3


def test_summon_effect_stops_when_board_full():
    board = Board()
    SummonEffect(_minion(), 8, board).apply()
    assert len(board) == Board.MAX_MINIONS


def test_summon_effect_needs_board():
    with pytest.raises(ValueError):
        SummonEffect(_minion(), 1).apply()


def test_summon_effect_needs_minion():
    with pytest.raises(ValueError):
        SummonEffect(None, 1, Board()).apply()


def test_summon_effect_does_not_support_target():
    assert SummonEffect(_minion(), 1).supports_target is False


def test_summon_set_board_and_clone():
    board = Board()
    effect = SummonEffect(_minion("Air"), 1)
    effect.set_board(board)
    copy = effect.clone()
    assert copy.board is board
    assert copy.amount == 1
    assert copy.to_summon is not effect.to_summon
    assert copy.to_summon.name == "Air"


def test_buff_effect_replaces_slot_and_moves_enchantments(capsys):
    original = _minion(attack=2, defence=3)
    original.add_enchantment_card("marker")
    slots = [original]
    effect = BuffEffect(_doubler)
    effect.set_slot(slots, 0)
    enchanted = effect.apply()
    assert slots[0] is enchanted
    assert enchanted.attack == original.attack * 2
    assert enchanted.enchantments == ["marker"]
    assert original.enchantments == []
    assert "Applied enchantment to Target" in capsys.readouterr().out


def test_buff_set_target_writes_slot():
    slots = [_minion("A")]
    other = _minion("B")
    effect = BuffEffect(_doubler, slots, 0)
    effect.set_target(other)
    assert slots[0] is other


def test_buff_without_slot_raises():
    effect = BuffEffect(_doubler)
    with pytest.raises(ValueError):
        effect.set_target(_minion())
    with pytest.raises(ValueError):
        effect.apply()


def test_buff_on_empty_slot_raises():
    effect = BuffEffect(_doubler, [None], 0)
    with pytest.raises(ValueError):
        effect.apply()


def test_buff_clone_has_no_slot():
    effect = BuffEffect(_doubler, [_minion()], 0)
    copy = effect.clone()
    assert copy.applicator is _doubler
    with pytest.raises(ValueError):
        copy.apply()