"""The row of minions a player has in play."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional

if TYPE_CHECKING:
    from .minion import Minion


class Board:
    """Up to five minions in play, addressed by 1-based position."""

    MAX_MINIONS = 5

    def __init__(self) -> None:
        self.minions: List[Optional[Minion]] = []

    def __len__(self) -> int:
        return len(self.minions)

    def __iter__(self) -> Iterator[Optional[Minion]]:
        return iter(self.minions)

    def _check_index(self, idx: int) -> None:
        if not 1 <= idx <= len(self.minions):
            raise IndexError(f"invalid minion index: {idx}")

    def add_minion(self, minion: Minion) -> None:
        """Add a minion at the right end; raise ValueError if full or missing."""
        if len(self.minions) >= self.MAX_MINIONS:
            raise ValueError("board is full, cannot add minion")
        if minion is None:
            raise ValueError("cannot add a missing minion to the board")
        self.minions.append(minion)

    def remove_minion(self, idx: int) -> Minion:
        """Remove and return the minion at 1-based position ``idx``."""
        self._check_index(idx)
        return self.minions.pop(idx - 1)

    def reset_actions(self) -> None:
        """Start a new round for every minion on the board."""
        for minion in self.minions:
            if minion is not None:
                minion.round_start()

    def replace_minion(self, idx: int, new_minion: Minion) -> None:
        """Put ``new_minion`` at 1-based position ``idx``."""
        self._check_index(idx)
        self.minions[idx - 1] = new_minion