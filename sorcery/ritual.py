"""Rituals: cards that stay with a player and fire on game events."""

from __future__ import annotations

import copy
from abc import abstractmethod
from typing import Any

from .card import Card
from .graphics import CardTemplate, display_ritual


class Ritual(Card):
    """A lasting card with charges that are spent each time it fires."""

    def __init__(
        self,
        card_id: int,
        name: str,
        cost: int,
        card_text: str,
        activation_cost: int,
        charges: int,
        trigger_condition: str,
    ) -> None:
        super().__init__(card_id, name, cost, card_text)
        self.activation_cost = activation_cost
        self.charges = charges
        self.trigger_condition = trigger_condition

    @abstractmethod
    def trigger(self, event: str, player: Any) -> None:
        """React to ``event`` on behalf of ``player``."""

    def play(self, owner: Any = None) -> None:
        """Give ``owner`` a copy of this ritual."""
        if owner is None:
            raise ValueError("no player provided to ritual")
        owner.ritual = self.clone()
        print(f"Ritual {self.name} has been played and assigned to player {owner.name}.")

    def template(self) -> CardTemplate:
        return display_ritual(
            self.name, self.cost, self.activation_cost, self.card_text, self.charges
        )

    @abstractmethod
    def clone(self) -> Ritual:
        """Return a copy that keeps the remaining charges."""


class DarkRitual(Ritual):
    """Gives its owner one magic at the start of each turn."""

    def __init__(self) -> None:
        super().__init__(19, "Dark Ritual", 0, "Gain 1 magic each turn", 1, 5, "Start of Turn")

    def trigger(self, event: str, player: Any) -> None:
        if event == "Start of Turn" and self.charges > 0 and player is not None:
            player.gain_magic(1)
            self.charges -= self.activation_cost
            print(f"Dark Ritual triggers: {player.name} gains +1 magic.")

    def clone(self) -> DarkRitual:
        return copy.copy(self)