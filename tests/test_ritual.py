import pytest

from sorcery.graphics import display_ritual
from sorcery.ritual import DarkRitual


class _Owner:
    def __init__(self):
        self.name = "Alice"
        self.magic = 0
        self.ritual = None

    def gain_magic(self, amount):
        self.magic += amount


def test_dark_ritual_card_values():
    ritual = DarkRitual()
    assert ritual.card_id == 19
    assert ritual.name == "Dark Ritual"
    assert ritual.charges == 5
    assert ritual.trigger_condition == "Start of Turn"
    assert ritual.card_text == "Gain 1 magic each turn"


def test_trigger_gives_magic_and_spends_charge(capsys):
    ritual = DarkRitual()
    owner = _Owner()
    before = ritual.charges
    ritual.trigger("Start of Turn", owner)
    assert owner.magic == 1
    assert ritual.charges == before - ritual.activation_cost
    assert "Dark Ritual triggers: Alice gains +1 magic." in capsys.readouterr().out


def test_other_events_are_ignored():
    ritual = DarkRitual()
    owner = _Owner()
    ritual.trigger("End of Turn", owner)
    assert owner.magic == 0
    assert ritual.charges == DarkRitual().charges


def test_missing_player_is_ignored():
    ritual = DarkRitual()
    ritual.trigger("Start of Turn", None)
    assert ritual.charges == DarkRitual().charges


def test_charges_run_out():
    ritual = DarkRitual()
    owner = _Owner()
    initial = ritual.charges
    for _ in range(initial + 3):
        ritual.trigger("Start of Turn", owner)
    assert owner.magic == initial
    assert ritual.charges == 0


def test_clone_keeps_charges_and_is_independent():
    ritual = DarkRitual()
    ritual.trigger("Start of Turn", _Owner())
    copy = ritual.clone()
    assert copy is not ritual
    assert copy.charges == ritual.charges
    copy.trigger("Start of Turn", _Owner())
    assert copy.charges < ritual.charges


def test_play_assigns_copy_to_owner(capsys):
    ritual = DarkRitual()
    owner = _Owner()
    ritual.play(owner)
    assert isinstance(owner.ritual, DarkRitual)
    assert owner.ritual is not ritual
    assert "assigned to player Alice" in capsys.readouterr().out


def test_play_without_owner_raises():
    with pytest.raises(ValueError):
        DarkRitual().play()


def test_template():
    ritual = DarkRitual()
    lines = ritual.template()
    assert lines == display_ritual(
        ritual.name, ritual.cost, ritual.activation_cost, ritual.card_text, ritual.charges
    )
    assert "Ritual" in lines[3]