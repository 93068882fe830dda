"""The places cards live: a player's hand, graveyard and deck."""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Union

from .card import Card

if TYPE_CHECKING:
    from .factory import CardFactory
    from .minion import Minion


class Hand:
    """Up to five cards, addressed by 1-based position."""

    MAX_HAND_SIZE = 5

    def __init__(self) -> None:
        self.cards: List[Card] = []

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def is_full(self) -> bool:
        return len(self.cards) >= self.MAX_HAND_SIZE

    def _check_index(self, i: int) -> None:
        if not 1 <= i <= len(self.cards):
            raise IndexError(f"invalid card index: {i}")

    def add_card(self, card: Card) -> None:
        """Add ``card`` at the right end; raise ValueError if the hand is full."""
        if self.is_full:
            raise ValueError("hand is full, cannot add card")
        self.cards.append(card)

    def remove_card(self, i: int) -> Card:
        """Remove and return the card at 1-based position ``i``."""
        self._check_index(i)
        return self.cards.pop(i - 1)

    def get_card(self, i: int) -> Card:
        """Return the card at 1-based position ``i``."""
        self._check_index(i)
        return self.cards[i - 1]


class Graveyard:
    """A pile of dead minions; the most recent one is on top."""

    def __init__(self) -> None:
        self.minions: List[Minion] = []

    def __len__(self) -> int:
        return len(self.minions)

    @property
    def is_empty(self) -> bool:
        return not self.minions

    @property
    def top(self) -> Optional[Minion]:
        """The most recently buried minion, or None if the pile is empty."""
        return self.minions[-1] if self.minions else None

    def add_minion(self, minion: Minion) -> None:
        if minion is None:
            raise ValueError("cannot add a missing minion to the graveyard")
        self.minions.append(minion)

    def resurrect_top(self) -> Optional[Minion]:
        """Remove and return the top minion, or None if the pile is empty."""
        return self.minions.pop() if self.minions else None


class Deck:
    """Cards waiting to be drawn; the last card is the top of the deck."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self.cards: List[Card] = list(cards) if cards is not None else []

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def draw(self) -> Card:
        """Remove and return the top card; raise IndexError if the deck is empty."""
        if not self.cards:
            raise IndexError("deck is empty, cannot draw a card")
        return self.cards.pop()

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        (rng or random.Random()).shuffle(self.cards)

    def load(self, path: Union[str, Path], factory: CardFactory) -> None:
        """Append one card for each card name listed, one per line, in ``path``.

        Blank lines are skipped; unknown names are reported and skipped.
        """
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                name = line.rstrip("\n")
                if not name:
                    continue
                try:
                    self.cards.append(factory.clone_by_name(name))
                except KeyError:
                    print(f"Unknown card name in deck file: {name}", file=sys.stderr)