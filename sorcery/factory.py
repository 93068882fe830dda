"""The catalogue of every card in the game."""

from __future__ import annotations

from typing import List

from .abilities import ActivatedAbility
from .card import Card
from .effects import BuffEffect, DamageEffect, SummonEffect
from .enchantments import (
    EnrageEnchantment,
    GiantStrengthEnchantment,
    HasteEnchantment,
    MagicFatigueEnchantment,
    SilenceEnchantment,
)
from .minion import Minion
from .ritual import DarkRitual
from .spell import Spell


class CardFactory:
    """Holds one master copy of each card and hands out fresh copies."""

    def __init__(self) -> None:
        air_elemental = Minion(0, "Air Elemental", 0, 1, 1, None, "")
        self.master_list: List[Card] = [
            air_elemental,
            Minion(1, "Earth Elemental", 3, 4, 4, None, ""),
            Minion(2, "Bone Golem", 2, 1, 3, None, "Gain +1/+1 whenever a minion leaves play"),
            Minion(
                3, "Fire Elemental", 2, 2, 2, None,
                "When an opponent's minion enters play, deal 1 damage to it",
            ),
            Minion(
                4, "Potion Seller", 2, 1, 3, None,
                "At the end of your turn, all your minions gain +0/+1",
            ),
            Minion(
                5, "Novice Pyromancer", 1, 0, 1,
                ActivatedAbility(1, "Deal 1 damage", DamageEffect(1)),
                "Deal 1 damage to target minion",
            ),
            Minion(
                6, "Apprentice Summoner", 1, 1, 1,
                ActivatedAbility(1, "Summon 1 Air Elemental", SummonEffect(air_elemental, 1)),
                "Summon a 1/1 air elemental",
            ),
            Minion(
                7, "Master Summoner", 3, 2, 3,
                ActivatedAbility(1, "Summon 3 Air Elementals", SummonEffect(air_elemental, 3)),
                "Summon up to three 1/1 air elementals",
            ),
            Spell(14, "Giant Strength", 1, "Give a minion +2/+2",
                  BuffEffect(GiantStrengthEnchantment)),
            Spell(15, "Enrage", 2, "Give a minion *2/*2", BuffEffect(EnrageEnchantment)),
            Spell(16, "Haste", 1, "Minion gains +1 action each turn",
                  BuffEffect(HasteEnchantment)),
            Spell(17, "Magic Fatigue", 1, "Minion abilities cost +2 mana",
                  BuffEffect(MagicFatigueEnchantment)),
            Spell(18, "Silence", 1, "Minion cannot use abilities",
                  BuffEffect(SilenceEnchantment)),
            DarkRitual(),
        ]

    def clone_by_id(self, card_id: int) -> Card:
        """Return a fresh copy of the card with ``card_id``; KeyError if unknown."""
        for card in self.master_list:
            if card.card_id == card_id:
                return card.clone()
        raise KeyError(card_id)

    def clone_by_name(self, name: str) -> Card:
        """Return a fresh copy of the card called ``name``; KeyError if unknown."""
        for card in self.master_list:
            if card.name == name:
                return card.clone()
        raise KeyError(name)