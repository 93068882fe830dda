"""Minions: cards that stay on the board, attack and use abilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from .abilities import Ability, ActivatedAbility
from .card import Card
from .effects import SummonEffect
from .graphics import (
    CardTemplate,
    display_minion_activated_ability,
    display_minion_no_ability,
    display_minion_triggered_ability,
)

if TYPE_CHECKING:
    from .board import Board


class Minion(Card):
    """A creature with attack, defence, actions per round and an optional ability."""

    def __init__(
        self,
        card_id: int,
        name: str,
        cost: int,
        attack: int,
        defence: int,
        ability: Optional[Ability] = None,
        card_text: str = "",
    ) -> None:
        super().__init__(card_id, name, cost, card_text)
        self._attack = attack
        self._defence = defence
        self._ability = ability
        self.actions = 0
        self.enchantments: List[Card] = []

    @property
    def attack(self) -> int:
        return self._attack

    @property
    def defence(self) -> int:
        return self._defence

    @property
    def ability(self) -> Optional[Ability]:
        return self._ability

    def attack_minion(self, target: Minion) -> None:
        """Trade damage with ``target``; does nothing without an action left."""
        if self.actions <= 0:
            return
        if target is None:
            raise ValueError("no minion to attack")
        print(f"{self.name} deals {self.attack} damage to {target.name}")
        print(f"{target.name} deals {target.attack} damage to {self.name}")
        target.take_damage(self.attack)
        self.take_damage(target.attack)
        self.use_actions(1)

    def attack_player(self, target: Any) -> None:
        """Deal this minion's attack as damage to a player."""
        if target is None:
            raise ValueError("no player to attack")
        print(f"{self.name} deals {self.attack} damage to {target.name}")
        target.take_damage(self.attack)

    def take_damage(self, dmg: int) -> None:
        self._defence -= dmg
        if self._defence <= 0:
            print(f"{self.name} has been destroyed!")

    def trigger(self, event: str) -> None:
        print(f"Trigger some event: {event}")

    def play(self) -> None:
        print(f"Playing {self.name}.")

    def use_ability(self, target: Optional[Minion] = None, board: Optional[Board] = None) -> None:
        """Use the minion's ability, on ``target`` or onto ``board`` as the effect needs."""
        if self.actions <= 0:
            print("That minion is out of actions!")
            return
        ability = self.ability
        if ability is None:
            print(f"{self.name} has no ability.")
            return
        effect = ability.effect
        if effect is None:
            raise ValueError("ability has no effect")

        if isinstance(effect, SummonEffect):
            if board is None:
                raise ValueError(f"{self.name}'s summon ability requires a board")
            effect.set_board(board)
            ability.use_effect()
        elif effect.supports_target:
            if target is None:
                raise ValueError(f"{self.name}'s ability needs a target")
            effect.set_target(target)
            ability.use_effect(target)
        else:
            ability.use_effect()

        self.use_actions(1)
        print(f"{self.name} uses its ability: {ability.description}")

    def top(self) -> Minion:
        """Return the bare minion beneath any enchantments."""
        return self

    def round_start(self) -> None:
        if self.actions <= 0:
            self.actions = 1

    def round_end(self) -> None:
        """Minions have nothing to do at the end of a round."""
        return None

    def use_actions(self, amount: int) -> None:
        """Spend ``amount`` actions if that many are left."""
        if self.actions >= amount:
            self.actions -= amount

    def top_enchantment(self) -> Optional[Minion]:
        """Return the most recent enchantment card if it is an enchantment."""
        if not self.enchantments:
            return None
        from .enchantments import Enchantment

        last = self.enchantments[-1]
        return last if isinstance(last, Enchantment) else None

    def add_enchantment_card(self, card: Card) -> None:
        self.enchantments.append(card)

    def clone(self) -> Minion:
        ability = self._ability.clone() if self._ability is not None else None
        return Minion(
            self.card_id, self.name, self.cost, self._attack, self._defence, ability, self.card_text
        )

    def template(self) -> CardTemplate:
        ability = self._ability
        if ability is None:
            return display_minion_no_ability(self.name, self.cost, self._attack, self._defence)
        if isinstance(ability, ActivatedAbility):
            return display_minion_activated_ability(
                self.name, self.cost, self._attack, self._defence, ability.cost, ability.description
            )
        return display_minion_triggered_ability(
            self.name, self.cost, self._attack, self._defence, ability.description
        )