"""Spells: cards whose effect resolves once and then leaves play."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .card import Card
from .effects import Effect
from .graphics import CardTemplate, display_spell

if TYPE_CHECKING:
    from .minion import Minion


class Spell(Card):
    """A one-shot card carrying a single effect."""

    def __init__(
        self, card_id: int, name: str, cost: int, text: str, effect: Optional[Effect]
    ) -> None:
        super().__init__(card_id, name, cost, text)
        self.effect = effect

    def play(self, target: Optional[Minion] = None) -> None:
        """Resolve the effect, aimed at ``target`` when the effect takes one."""
        if self.effect is None:
            raise ValueError("spell has no effect")
        if self.effect.supports_target:
            self.effect.set_target(target)
        self.effect.apply()
        print(f"{self.name} is played: {self.card_text}")

    def template(self) -> CardTemplate:
        return display_spell(self.name, self.cost, self.card_text)

    def clone(self) -> Spell:
        effect = self.effect.clone() if self.effect is not None else None
        return Spell(self.card_id, self.name, self.cost, self.card_text, effect)