"""A player: life, magic and the hand, deck, board and graveyard they own."""

from __future__ import annotations

import random
from typing import Optional, Protocol

from .abilities import ActivatedAbility
from .board import Board
from .card import Card
from .effects import BuffEffect
from .minion import Minion
from .ritual import Ritual
from .spell import Spell
from .zones import Deck, Graveyard, Hand

STARTING_LIFE = 20
STARTING_MAGIC = 3
OPENING_HAND = 5


class _Game(Protocol):
    """What a player needs from the game it takes part in."""

    testing_mode: bool

    @property
    def inactive_player(self) -> Player: ...

    def player_defeated(self, loser: Player) -> None: ...


def _minion_at(player: Player, card_idx: Optional[int]) -> Optional[Minion]:
    """The minion at 1-based position ``card_idx`` of ``player``'s board, if any."""
    minions = player.board.minions
    if card_idx is not None and 1 <= card_idx <= len(minions):
        return minions[card_idx - 1]
    return None


class Player:
    """One side of the game.

    Positions in the hand and on the board are 1-based.  Actions that break
    the rules raise ValueError; positions that do not exist raise IndexError.
    In testing mode cards and abilities cost no magic and the deck is not
    shuffled.
    """

    def __init__(
        self,
        name: str,
        deck: Deck,
        game: _Game,
        rng: Optional[random.Random] = None,
    ) -> None:
        if game is None:
            raise ValueError("a player needs a game")
        self.name = name
        self.life = STARTING_LIFE
        self.magic = STARTING_MAGIC
        self.deck = deck
        self.hand = Hand()
        self.board = Board()
        self.graveyard = Graveyard()
        self.ritual: Optional[Ritual] = None
        self.game = game
        self._first_turn = True
        if not game.testing_mode:
            deck.shuffle(rng)
        for _ in range(OPENING_HAND):
            self.draw_card()

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, life={self.life!r}, magic={self.magic!r})"

    # turn structure

    def start_turn(self) -> None:
        """Gain magic (except on the first turn), draw, fire the ritual, ready minions."""
        if self._first_turn:
            self._first_turn = False
        else:
            self.gain_magic(1)
        self.draw_card()
        if self.ritual is not None:
            self.ritual.trigger("Start of Turn", self)
        self.board.reset_actions()

    def end_turn(self) -> None:
        """Let every minion on the board finish its round."""
        for minion in self.board:
            if minion is not None:
                minion.round_end()

    # life and magic

    def take_damage(self, amount: int) -> None:
        """Lose life; at zero the game is told this player is defeated."""
        self.life -= amount
        if self.life <= 0:
            self.life = 0
            self.game.player_defeated(self)

    def gain_magic(self, amount: int) -> None:
        self.magic += amount

    def spend_magic(self, cost: int) -> None:
        self.magic -= cost

    def _check_affordable(self, cost: int, what: str) -> None:
        if not self.game.testing_mode and cost > self.magic:
            raise ValueError(f"not enough magic to {what}")

    def _charge(self, cost: int) -> None:
        if not self.game.testing_mode:
            self.spend_magic(cost)

    # cards

    def draw_card(self) -> None:
        """Move the top card of the deck to the hand, if there is room and a card."""
        if not self.hand.is_full and not self.deck.is_empty:
            self.hand.add_card(self.deck.draw())

    def _return_to_hand(self, card: Card) -> None:
        self.hand.add_card(card)

    def _put_minion_in_play(self, minion: Minion) -> None:
        try:
            self.board.add_minion(minion)
        except ValueError:
            self._return_to_hand(minion)
            raise
        minion.play()

    def play_card(self, idx: int, target: Optional[Player] = None, card_idx: int = 0) -> None:
        """Play the card at hand position ``idx``.

        With ``target`` given, the card is aimed at the minion at position
        ``card_idx`` of that player's board.
        """
        if target is None:
            self._play_untargeted(idx)
        else:
            self._play_targeted(idx, target, card_idx)

    def _play_untargeted(self, idx: int) -> None:
        card = self.hand.get_card(idx)
        self._check_affordable(card.cost, f"play card {card.name}")
        if isinstance(card, Spell) and card.effect is not None and card.effect.supports_target:
            raise ValueError(f"spell {card.name} requires a target")
        self._charge(card.cost)
        card = self.hand.remove_card(idx)

        if isinstance(card, Minion):
            self._put_minion_in_play(card)
        elif isinstance(card, Ritual):
            card.play(self)
        elif isinstance(card, Spell):
            card.play()
        else:
            self._return_to_hand(card)
            raise TypeError(f"unknown card type for card {card.name}")

        self.cleanup_dead_minions()
        self.game.inactive_player.cleanup_dead_minions()

    def _play_targeted(self, idx: int, target: Player, card_idx: int) -> None:
        card = self.hand.get_card(idx)
        self._check_affordable(card.cost, f"play card {card.name}")
        self._charge(card.cost)
        card = self.hand.remove_card(idx)
        target_minion = _minion_at(target, card_idx)

        if isinstance(card, Spell):
            effect = card.effect
            if isinstance(effect, BuffEffect):
                if target_minion is None:
                    self._return_to_hand(card)
                    raise ValueError(f"{card.name} requires a target minion")
                effect.set_slot(target.board.minions, card_idx - 1)
                effect.set_target(target_minion)
                enchanted = effect.apply()
                enchanted.add_enchantment_card(card.clone())
                print(f"Applied BuffEffect from spell: {card.name} to {enchanted.name}")
            else:
                card.play(target_minion)
        elif isinstance(card, Minion):
            self._put_minion_in_play(card)
        elif isinstance(card, Ritual):
            card.play(self)
        else:
            self._return_to_hand(card)
            raise TypeError(f"unknown card type for card {card.name}")

        self.cleanup_dead_minions()
        target.cleanup_dead_minions()

    # minions

    def _own_minion(self, idx: int, role: str = "minion") -> Minion:
        minions = self.board.minions
        if not 1 <= idx <= len(minions):
            raise IndexError(f"invalid {role} index {idx}")
        return minions[idx - 1]

    def attack(self, idx: int, target_idx: Optional[int] = None) -> None:
        """Order the minion at ``idx`` to attack the opponent or their minion at ``target_idx``."""
        attacker = self._own_minion(idx, "attacking minion")
        opponent = self.game.inactive_player

        if target_idx is None:
            if attacker is None or attacker.actions <= 0:
                raise ValueError("this minion cannot attack or does not exist")
            attacker.attack_player(opponent)
        else:
            defenders = opponent.board.minions
            if not 1 <= target_idx <= len(defenders):
                raise IndexError(f"invalid defending minion index {target_idx}")
            defender = defenders[target_idx - 1]
            if attacker is None or attacker.actions <= 0:
                raise ValueError("this minion cannot attack or does not exist")
            attacker.attack_minion(defender)
        attacker.use_actions(1)

        self.cleanup_dead_minions()
        opponent.cleanup_dead_minions()

    def use_ability(self, idx: int, target: Optional[Player] = None, card_idx: int = 0) -> None:
        """Use the ability of the minion at ``idx``, optionally aimed at a minion of ``target``."""
        minion = self._own_minion(idx)
        ability = minion.ability

        if target is None:
            if not isinstance(ability, ActivatedAbility):
                raise ValueError(f"minion {minion.name} does not have an activated ability")
            self._check_affordable(ability.cost, f"use ability of {minion.name}")
            self._charge(ability.cost)
            minion.use_ability(None, self.board)
            self.cleanup_dead_minions()
            self.game.inactive_player.cleanup_dead_minions()
            return

        if isinstance(ability, ActivatedAbility):
            self._check_affordable(ability.cost, f"use ability of {minion.name}")
            self._charge(ability.cost)
        minion.use_ability(_minion_at(target, card_idx), self.board)

        self.cleanup_dead_minions()
        target.cleanup_dead_minions()

    def cleanup_dead_minions(self) -> None:
        """Move every minion with no defence left from the board to the graveyard."""
        for position, minion in reversed(list(enumerate(self.board.minions, start=1))):
            if minion is not None and minion.defence <= 0:
                removed = self.board.remove_minion(position)
                self.graveyard.add_minion(removed)
                print(f"{removed.name} has been moved to the graveyard.")