"""Enchantments: minions wrapped in layers that change their stats or abilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .abilities import Ability, ActivatedAbility
from .graphics import (
    CardTemplate,
    display_minion_activated_ability,
    display_minion_no_ability,
)
from .minion import Minion

if TYPE_CHECKING:
    from .board import Board


class Enchantment(Minion):
    """A layer over another minion that passes its stats through unchanged."""

    def __init__(self, base: Minion) -> None:
        base_ability = base.ability
        super().__init__(
            base.card_id,
            base.name,
            base.cost,
            base.attack,
            base.defence,
            base_ability.clone() if base_ability is not None else None,
            base.card_text,
        )
        self.base: Optional[Minion] = base

    @property
    def attack(self) -> int:
        return self.base.attack

    @property
    def defence(self) -> int:
        return self.base.defence

    def top(self) -> Minion:
        """Return the bare minion beneath every layer."""
        return self.base.top()

    def template(self) -> CardTemplate:
        ability = self.ability
        if isinstance(ability, ActivatedAbility):
            return display_minion_activated_ability(
                self.name,
                self.cost,
                self.attack,
                self.defence,
                ability.cost,
                ability.description,
            )
        return display_minion_no_ability(self.name, self.cost, self.attack, self.defence)


def remove_top_enchantment(minion: Minion) -> Minion:
    """Peel the outermost enchantment off ``minion`` and return what was beneath."""
    if not isinstance(minion, Enchantment):
        return minion
    base = minion.base
    minion.base = None
    return base


def remove_all_enchantments(minion: Minion) -> Minion:
    """Peel every enchantment off ``minion`` and return the bare minion."""
    while isinstance(minion, Enchantment):
        minion = remove_top_enchantment(minion)
    return minion


class EnrageEnchantment(Enchantment):
    """Doubles attack and defence."""

    @property
    def attack(self) -> int:
        return self.base.attack * 2

    @property
    def defence(self) -> int:
        return self.base.defence * 2


class GiantStrengthEnchantment(Enchantment):
    """Adds two to attack and defence."""

    @property
    def attack(self) -> int:
        return self.base.attack + 2

    @property
    def defence(self) -> int:
        return self.base.defence + 2


class HasteEnchantment(Enchantment):
    """Gives one extra action when applied and at the start of every round."""

    def __init__(self, base: Minion) -> None:
        super().__init__(base)
        self.actions += 1
        print(f"{self.name} gains 1 extra action from Haste!")

    def round_start(self) -> None:
        self.base.round_start()
        print(f"{self.name} is Hasted! +1 action.")
        self.actions += 1


class MagicFatigueEnchantment(Enchantment):
    """Makes an activated ability cost two more magic."""

    def __init__(self, base: Minion) -> None:
        super().__init__(base)
        print(f"{self.name} is affected by Magic Fatigue! Ability costs 2 more mana.")

    @property
    def ability(self) -> Optional[Ability]:
        original = self.base.ability
        if not isinstance(original, ActivatedAbility):
            return original
        return ActivatedAbility(
            original.cost + 2,
            f"{original.description} (Magic Fatigue +2)",
            original.clone_effect(),
        )


class SilenceEnchantment(Enchantment):
    """Stops the minion from using its ability."""

    def __init__(self, base: Minion) -> None:
        super().__init__(base)
        print(f"{self.name} is Silenced! It can't use its ability.")

    @property
    def ability(self) -> Optional[Ability]:
        return None

    def use_ability(self, target: Optional[Minion] = None, board: Optional[Board] = None) -> None:
        print(f"{self.name} is Silenced! It can't use its ability.")