import random

import pytest

from sorcery.enchantments import EnrageEnchantment, GiantStrengthEnchantment
from sorcery.factory import CardFactory
from sorcery.player import STARTING_LIFE, STARTING_MAGIC, Player
from sorcery.zones import Deck

FACTORY = CardFactory()


def cards(*names):
    return [FACTORY.clone_by_name(name) for name in names]


class FakeGame:
    def __init__(self, testing_mode=True):
        self.testing_mode = testing_mode
        self.inactive_player = None
        self.defeated = []

    def player_defeated(self, loser):
        self.defeated.append(loser)


def make_pair(names1=(), names2=(), testing=True):
    game = FakeGame(testing)
    p1 = Player("alice", Deck(cards(*names1)), game)
    p2 = Player("bob", Deck(cards(*names2)), game)
    game.inactive_player = p2
    return game, p1, p2


def summon(player, name):
    minion = FACTORY.clone_by_name(name)
    player.board.add_minion(minion)
    minion.actions = 1
    return minion


def test_initial_state_draws_from_top_of_deck():
    names = [
        "Air Elemental", "Earth Elemental", "Bone Golem",
        "Fire Elemental", "Potion Seller", "Novice Pyromancer",
    ]
    _, p1, _ = make_pair(names)
    assert p1.life == 20 == STARTING_LIFE
    assert p1.magic == 3 == STARTING_MAGIC
    assert [c.name for c in p1.hand] == names[:0:-1]
    assert [c.name for c in p1.deck.cards] == ["Air Elemental"]


def test_player_needs_game():
    with pytest.raises(ValueError):
        Player("x", Deck(), None)


def test_shuffled_deck_keeps_all_cards():
    names = ["Air Elemental", "Earth Elemental", "Bone Golem", "Fire Elemental",
             "Potion Seller", "Novice Pyromancer", "Haste"]
    player = Player("x", Deck(cards(*names)), FakeGame(False), rng=random.Random(1))
    seen = [c.name for c in player.hand] + [c.name for c in player.deck.cards]
    assert sorted(seen) == sorted(names)
    assert len(player.hand) == 5


def test_start_turn_magic_and_draw():
    _, p1, _ = make_pair(["Air Elemental"] * 7)
    p1.play_card(1)
    assert len(p1.hand) == 4
    p1.start_turn()
    assert p1.magic == STARTING_MAGIC
    assert len(p1.hand) == 5
    assert len(p1.deck) == 1
    p1.start_turn()
    assert p1.magic == STARTING_MAGIC + 1
    assert len(p1.hand) == 5


def test_start_turn_resets_minion_actions():
    _, p1, _ = make_pair()
    minion = summon(p1, "Earth Elemental")
    minion.actions = 0
    p1.start_turn()
    assert minion.actions == 1


def test_ritual_played_and_triggered():
    _, p1, _ = make_pair(["Dark Ritual"])
    p1.play_card(1)
    assert p1.ritual.name == "Dark Ritual"
    assert len(p1.hand) == 0
    charges = p1.ritual.charges
    p1.start_turn()
    assert p1.magic == STARTING_MAGIC + 1
    assert p1.ritual.charges == charges - p1.ritual.activation_cost


def test_take_damage_and_defeat():
    game, _, p2 = make_pair()
    p2.take_damage(5)
    assert p2.life == STARTING_LIFE - 5
    assert game.defeated == []
    p2.take_damage(100)
    assert p2.life == 0
    assert game.defeated == [p2]


def test_play_minion_spends_magic():
    _, p1, _ = make_pair(["Earth Elemental"] * 5, testing=False)
    p1.play_card(1)
    assert p1.magic == STARTING_MAGIC - 3
    assert [m.name for m in p1.board] == ["Earth Elemental"]
    assert len(p1.hand) == 4


def test_play_without_enough_magic():
    _, p1, _ = make_pair(["Earth Elemental"] * 5, testing=False)
    p1.spend_magic(1)
    with pytest.raises(ValueError):
        p1.play_card(1)
    assert len(p1.hand) == 5
    assert p1.magic == STARTING_MAGIC - 1
    assert len(p1.board) == 0


def test_play_invalid_hand_index():
    _, p1, _ = make_pair(["Air Elemental"])
    with pytest.raises(IndexError):
        p1.play_card(3)


def test_untargeted_buff_spell_needs_target():
    _, p1, _ = make_pair(["Giant Strength"])
    with pytest.raises(ValueError):
        p1.play_card(1)
    assert [c.name for c in p1.hand] == ["Giant Strength"]


def test_giant_strength_on_own_minion():
    _, p1, _ = make_pair(["Giant Strength"])
    earth = summon(p1, "Earth Elemental")
    p1.play_card(1, p1, 1)
    enchanted = p1.board.minions[0]
    assert isinstance(enchanted, GiantStrengthEnchantment)
    assert enchanted.attack == earth.attack + 2
    assert enchanted.defence == earth.defence + 2
    assert enchanted.top() is earth
    assert [c.name for c in enchanted.enchantments] == ["Giant Strength"]
    assert len(p1.hand) == 0


def test_enrage_on_opponent_minion():
    _, p1, p2 = make_pair(["Enrage"])
    air = summon(p2, "Air Elemental")
    p1.play_card(1, p2, 1)
    enchanted = p2.board.minions[0]
    assert isinstance(enchanted, EnrageEnchantment)
    assert enchanted.attack == air.attack * 2


def test_buff_without_target_minion_returns_card():
    _, p1, p2 = make_pair(["Giant Strength"])
    with pytest.raises(ValueError):
        p1.play_card(1, p2, 1)
    assert [c.name for c in p1.hand] == ["Giant Strength"]


def test_board_full_returns_minion_to_hand():
    _, p1, _ = make_pair(["Air Elemental"])
    for _ in range(5):
        summon(p1, "Earth Elemental")
    with pytest.raises(ValueError):
        p1.play_card(1)
    assert [c.name for c in p1.hand] == ["Air Elemental"]
    assert len(p1.board) == 5


def test_attack_player():
    _, p1, p2 = make_pair()
    earth = summon(p1, "Earth Elemental")
    p1.attack(1)
    assert p2.life == STARTING_LIFE - earth.attack
    assert earth.actions == 0
    with pytest.raises(ValueError):
        p1.attack(1)
    assert p2.life == STARTING_LIFE - earth.attack


def test_attack_invalid_indices():
    _, p1, _ = make_pair()
    with pytest.raises(IndexError):
        p1.attack(1)
    summon(p1, "Earth Elemental")
    with pytest.raises(IndexError):
        p1.attack(1, 1)


def test_attack_minion_kills_defender():
    _, p1, p2 = make_pair()
    earth = summon(p1, "Earth Elemental")
    air = summon(p2, "Air Elemental")
    start_defence = earth.defence
    p1.attack(1, 1)
    assert len(p2.board) == 0
    assert p2.graveyard.top is air
    assert earth.defence == start_defence - air.attack
    assert [m.name for m in p1.board] == ["Earth Elemental"]


def test_use_targeted_damage_ability():
    _, p1, p2 = make_pair()
    pyro = summon(p1, "Novice Pyromancer")
    summon(p2, "Air Elemental")
    p1.use_ability(1, p2, 1)
    assert len(p2.board) == 0
    assert p2.graveyard.top.name == "Air Elemental"
    assert pyro.actions == 0


def test_use_summon_ability():
    _, p1, _ = make_pair()
    summon(p1, "Apprentice Summoner")
    p1.use_ability(1)
    assert [m.name for m in p1.board] == ["Apprentice Summoner", "Air Elemental"]


def test_use_ability_spends_magic():
    _, p1, _ = make_pair(["Apprentice Summoner"] * 5, testing=False)
    p1.play_card(1)
    p1.board.reset_actions()
    before = p1.magic
    cost = p1.board.minions[0].ability.cost
    p1.use_ability(1)
    assert p1.magic == before - cost
    assert len(p1.board) == 2


def test_use_ability_without_activated_ability():
    _, p1, _ = make_pair()
    summon(p1, "Earth Elemental")
    with pytest.raises(ValueError):
        p1.use_ability(1)


def test_silenced_minion_cannot_use_ability():
    _, p1, _ = make_pair(["Silence"])
    summon(p1, "Apprentice Summoner")
    p1.play_card(1, p1, 1)
    with pytest.raises(ValueError):
        p1.use_ability(1)
    assert len(p1.board) == 1


def test_draw_card_limits():
    _, p1, _ = make_pair(["Air Elemental"] * 6)
    p1.draw_card()
    assert len(p1.hand) == 5
    assert len(p1.deck) == 1
    _, p3, _ = make_pair(["Air Elemental"] * 2)
    p3.draw_card()
    assert len(p3.hand) == 2
    assert len(p3.deck) == 0


def test_cleanup_dead_minions_order():
    _, p1, _ = make_pair()
    first = summon(p1, "Air Elemental")
    summon(p1, "Earth Elemental")
    third = summon(p1, "Bone Golem")
    first.take_damage(10)
    third.take_damage(10)
    p1.cleanup_dead_minions()
    assert [m.name for m in p1.board] == ["Earth Elemental"]
    assert p1.graveyard.minions == [third, first]


def test_end_turn_keeps_state():
    _, p1, _ = make_pair(["Air Elemental"])
    minion = summon(p1, "Earth Elemental")
    p1.end_turn()
    assert p1.board.minions == [minion]
    assert (p1.life, p1.magic) == (STARTING_LIFE, STARTING_MAGIC)