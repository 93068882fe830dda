"""Minion abilities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .effects import Effect

if TYPE_CHECKING:
    from .minion import Minion


class Ability(ABC):
    """An effect a minion can bring about, with a description for display."""

    def __init__(self, effect: Optional[Effect], description: str) -> None:
        self.effect = effect
        self.description = description

    @abstractmethod
    def use_effect(self, target: Optional[Minion] = None) -> None:
        """Carry out the ability, on ``target`` where the effect takes one."""

    @abstractmethod
    def clone(self) -> Ability:
        """Return an independent copy of the ability."""


class ActivatedAbility(Ability):
    """An ability the owner pays magic to use."""

    def __init__(self, cost: int, description: str, effect: Optional[Effect]) -> None:
        super().__init__(effect, description)
        self.cost = cost

    def use_effect(self, target: Optional[Minion] = None) -> None:
        print(f"ActivatedAbility: {self.description}")
        if self.effect is None:
            raise ValueError("ability has no effect")
        if self.effect.supports_target:
            self.effect.set_target(target)
        self.effect.apply()

    def clone_effect(self) -> Optional[Effect]:
        """Return a copy of the effect so that no two abilities share one."""
        return self.effect.clone() if self.effect is not None else None

    def clone(self) -> ActivatedAbility:
        return ActivatedAbility(self.cost, self.description, self.clone_effect())