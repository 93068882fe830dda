"""The common base of every card in the game."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .graphics import CardTemplate


class Card(ABC):
    """A card with an identifier, a name, a magic cost and descriptive text."""

    def __init__(self, card_id: int, name: str, cost: int, card_text: str = "") -> None:
        self.card_id = card_id
        self.name = name
        self.cost = cost
        self.card_text = card_text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(card_id={self.card_id!r}, name={self.name!r}, cost={self.cost!r})"

    @abstractmethod
    def play(self) -> None:
        """Put the card into play."""

    @abstractmethod
    def template(self) -> CardTemplate:
        """Return the card drawn as a block of text lines."""

    @abstractmethod
    def clone(self) -> Card:
        """Return a fresh, independent copy of the card."""