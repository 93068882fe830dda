"""Effects that abilities and spells carry out."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, MutableSequence, Optional

if TYPE_CHECKING:
    from .board import Board
    from .minion import Minion


class Effect(ABC):
    """Something that happens when an ability or spell resolves."""

    supports_target: bool = False

    @abstractmethod
    def apply(self) -> None:
        """Carry out the effect."""

    def set_target(self, target: Optional[Minion]) -> None:
        """Effects that take no target ignore it."""
        del target

    @abstractmethod
    def clone(self) -> Effect:
        """Return an independent copy of the effect."""


class DamageEffect(Effect):
    """Deal a fixed amount of damage to one minion."""

    supports_target = True

    def __init__(self, damage: int) -> None:
        self.damage = damage
        self.target: Optional[Minion] = None

    def set_target(self, target: Optional[Minion]) -> None:
        self.target = target

    def apply(self) -> None:
        if self.target is None:
            raise ValueError("damage effect has no target")
        print(f"{self.target.name} takes {self.damage} damage!")
        self.target.take_damage(self.damage)

    def clone(self) -> DamageEffect:
        return DamageEffect(self.damage)


class SummonEffect(Effect):
    """Put copies of a minion onto a board until the amount or the board runs out."""

    def __init__(self, to_summon: Optional[Minion], amount: int, board: Optional[Board] = None) -> None:
        self.to_summon = to_summon
        self.amount = amount
        self.board = board

    def set_board(self, board: Board) -> None:
        self.board = board

    def apply(self) -> None:
        if self.board is None or self.to_summon is None:
            raise ValueError("summon effect is missing its board or minion")
        for _ in range(self.amount):
            try:
                self.board.add_minion(self.to_summon.clone())
            except ValueError:
                break
        print(f"Summoned {self.amount} {self.to_summon.name}(s) to the board.")

    def clone(self) -> SummonEffect:
        summoned = self.to_summon.clone() if self.to_summon is not None else None
        return SummonEffect(summoned, self.amount, self.board)


class BuffEffect(Effect):
    """Wrap the minion in a board slot with an enchantment."""

    supports_target = True

    def __init__(
        self,
        applicator: Callable[[Minion], Minion],
        minions: Optional[MutableSequence[Optional[Minion]]] = None,
        index: Optional[int] = None,
    ) -> None:
        self.applicator = applicator
        self._minions = minions
        self._index = index

    def set_slot(self, minions: MutableSequence[Optional[Minion]], index: int) -> None:
        """Point the effect at position ``index`` (0-based) of ``minions``."""
        self._minions = minions
        self._index = index

    def _has_slot(self) -> bool:
        return self._minions is not None and self._index is not None

    def set_target(self, target: Optional[Minion]) -> None:
        if not self._has_slot():
            raise ValueError("buff effect has no slot to place its target in")
        self._minions[self._index] = target

    def apply(self) -> Minion:
        """Enchant the minion in the slot and return the enchanted minion."""
        if not self._has_slot() or self._minions[self._index] is None:
            raise ValueError("buff effect has no valid target")
        current = self._minions[self._index]
        enchanted = self.applicator(current)
        enchanted.enchantments = current.enchantments
        current.enchantments = []
        self._minions[self._index] = enchanted
        print(f"Applied enchantment to {current.name}")
        return enchanted

    def clone(self) -> BuffEffect:
        return BuffEffect(self.applicator)