"""The text display of the game: the board, a hand and a single minion."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from itertools import islice, zip_longest
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Protocol, Sequence, TextIO

from .graphics import (
    CARD_TEMPLATE_BORDER,
    CARD_TEMPLATE_EMPTY,
    CENTRE_GRAPHIC,
    EXTERNAL_BORDER_CHAR_BOTTOM_LEFT,
    EXTERNAL_BORDER_CHAR_BOTTOM_RIGHT,
    EXTERNAL_BORDER_CHAR_LEFT_RIGHT,
    EXTERNAL_BORDER_CHAR_TOP_LEFT,
    EXTERNAL_BORDER_CHAR_TOP_RIGHT,
    display_player_card,
)

if TYPE_CHECKING:
    from .player import Player

BOARD_WIDTH = 185
BOARD_SLOTS = 5
ENCHANTMENTS_PER_ROW = 5


class Observer(ABC):
    """Something that wants to hear when the game state changes."""

    @abstractmethod
    def notify(self) -> None:
        """React to a change in the game."""


class _Game(Protocol):
    """What the text display needs from the game it shows."""

    def get_player(self, idx: int) -> Player: ...

    @property
    def active_player(self) -> Player: ...

    def attach(self, observer: Observer) -> None: ...

    def detach(self, observer: Observer) -> None: ...


def card_row(cards: Sequence[Sequence[str]]) -> List[str]:
    """Lay card drawings side by side, as many lines as the first card has."""
    if not cards:
        return []
    rows = islice(zip_longest(*cards, fillvalue=""), len(cards[0]))
    return ["".join(parts) for parts in rows]


def _chunks(items: Iterable, size: int) -> Iterator[list]:
    it = iter(items)
    while chunk := list(islice(it, size)):
        yield chunk


def _joined(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


class TextView(Observer):
    """Draws the game as text and redraws the board whenever it is notified."""

    def __init__(self, game: _Game, out: Optional[TextIO] = None, attach: bool = True) -> None:
        self.game = game
        self.out = out
        if attach:
            game.attach(self)

    def close(self) -> None:
        """Stop listening to the game."""
        self.game.detach(self)

    def notify(self) -> None:
        try:
            board = self.render_board()
        except IndexError:
            print("Error: Players not found in game.", file=sys.stderr)
            return
        print(board, end="", file=self.out)

    @staticmethod
    def _outer_row(player: Player) -> List[Sequence[str]]:
        ritual = player.ritual
        top = player.graveyard.top
        return [
            ritual.template() if ritual is not None else CARD_TEMPLATE_BORDER,
            CARD_TEMPLATE_EMPTY,
            display_player_card(1, player.name, player.life, player.magic),
            CARD_TEMPLATE_EMPTY,
            top.template() if top is not None else CARD_TEMPLATE_BORDER,
        ]

    @staticmethod
    def _minion_row(player: Player) -> List[Sequence[str]]:
        minions = list(player.board)[:BOARD_SLOTS]
        drawn: List[Sequence[str]] = [
            m.template() if m is not None else CARD_TEMPLATE_BORDER for m in minions
        ]
        return drawn + [CARD_TEMPLATE_BORDER] * (BOARD_SLOTS - len(drawn))

    def render_board(self) -> str:
        """The whole board, ending with a prompt for the player whose turn it is."""
        first = self.game.get_player(0)
        second = self.game.get_player(1)
        border = EXTERNAL_BORDER_CHAR_LEFT_RIGHT * BOARD_WIDTH

        lines = [EXTERNAL_BORDER_CHAR_TOP_LEFT + border + EXTERNAL_BORDER_CHAR_TOP_RIGHT]
        lines += card_row(self._outer_row(first))
        lines += card_row(self._minion_row(first))
        lines += CENTRE_GRAPHIC
        lines += card_row(self._minion_row(second))
        lines += card_row(self._outer_row(second))
        lines.append(EXTERNAL_BORDER_CHAR_BOTTOM_LEFT + border + EXTERNAL_BORDER_CHAR_BOTTOM_RIGHT)
        lines.append("Type 'help' for commands.")
        return _joined(lines) + f"{self.game.active_player.name}'s turn > "

    def render_hand(self, player_idx: int) -> str:
        """Every card in the hand of player ``player_idx`` (0-based), side by side."""
        player = self.game.get_player(player_idx)
        templates = [
            card.template() if card is not None else CARD_TEMPLATE_EMPTY for card in player.hand
        ]
        return _joined(card_row(templates))

    def render_minion(self, player_idx: int, minion_idx: int) -> str:
        """A minion (1-based position) followed by its enchantments in rows of five."""
        player = self.game.get_player(player_idx)
        if not 1 <= minion_idx <= BOARD_SLOTS:
            raise IndexError(f"invalid minion index: {minion_idx}")
        minions = player.board.minions
        if minion_idx > len(minions) or minions[minion_idx - 1] is None:
            raise IndexError(f"no minion at index {minion_idx}")
        minion = minions[minion_idx - 1]

        lines = card_row([minion.template()])
        for chunk in _chunks(minion.enchantments, ENCHANTMENTS_PER_ROW):
            lines += card_row([card.template() for card in chunk])
        return _joined(lines)