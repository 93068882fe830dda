"""The game itself: two players taking turns, driven by text commands."""

from __future__ import annotations

import random
import sys
from typing import Iterable, List, Optional, TextIO

from .factory import CardFactory
from .player import Player
from .text_view import Observer, TextView
from .zones import Deck

DEFAULT_DECK = "default.deck"

HELP_TEXT = (
    "Commands:\n"
    " help -- Display this message.\n"
    " end -- End the current player’s turn.\n"
    " quit -- End the game.\n"
    " attack minion other-minion -- Orders minion to attack other-minion.\n"
    " attack minion -- Orders minion to attack the opponent.\n"
    " play card [target-player target-card] -- Play card, optionally targeting target-card owned by target-player.\n"
    " use minion [target-player target-card] -- Use minion’s special ability, optionally targeting target-card owned by target-player.\n"
    " inspect minion -- View a minion’s card and all enchantments on that minion.\n"
    " hand -- Describe all cards in your hand.\n"
    " board -- Describe all cards on the board.\n"
)

_COMMAND_ERRORS = (ValueError, IndexError, TypeError, KeyError)


class GameEngine:
    """Sets up two players from deck files and runs the command loop.

    Player names come from the first two lines of ``init_file``; the rest of
    that file is played as commands.  Without an init file the names are read
    from ``stdin``.
    """

    def __init__(
        self,
        testing_mode: bool = False,
        graphic_mode: bool = False,
        init_file: str = "",
        deck1_file: str = "",
        deck2_file: str = "",
        *,
        factory: Optional[CardFactory] = None,
        rng: Optional[random.Random] = None,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self.testing_mode = testing_mode
        self.graphic_mode = graphic_mode
        self.init_file = init_file
        self.players: List[Player] = []
        self.active_index = 0
        self.game_over = False
        self.observers: List[Observer] = []
        self._stdin = stdin if stdin is not None else sys.stdin
        self._pending_words: List[str] = []
        self._rng = rng

        factory = factory if factory is not None else CardFactory()
        deck1 = self._load_deck(deck1_file or DEFAULT_DECK, factory)
        deck2 = self._load_deck(deck2_file or DEFAULT_DECK, factory)

        self.text_view = TextView(self, attach=False)

        if not init_file:
            print("Enter Player 1's name: ", end="")
            self._add_player(self._read_word(), deck1)
            print("Enter Player 2's name: ", end="")
            self._add_player(self._read_word(), deck2)
        else:
            with open(init_file, encoding="utf-8") as handle:
                first = handle.readline()
                if not first:
                    raise ValueError("init file is empty")
                self._add_player(first.rstrip("\n"), deck1)
                second = handle.readline()
                if second:
                    self._add_player(second.rstrip("\n"), deck2)
                for line in handle:
                    self._process_reporting(line.rstrip("\n"))

        self.attach(self.text_view)
        if graphic_mode:
            print("Graphical display is not available; using the text display.", file=sys.stderr)

    @staticmethod
    def _load_deck(path: str, factory: CardFactory) -> Deck:
        deck = Deck()
        try:
            deck.load(path, factory)
        except OSError:
            print(f"Could not open deck file: {path}", file=sys.stderr)
        return deck

    def _add_player(self, name: str, deck: Deck) -> None:
        self.players.append(Player(name, deck, self, self._rng))

    def _read_word(self) -> str:
        while not self._pending_words:
            line = self._stdin.readline()
            if not line:
                return ""
            self._pending_words = line.split()
        return self._pending_words.pop(0)

    # players

    def get_player(self, idx: int) -> Player:
        """Return the player at 0-based ``idx``; IndexError if there is none."""
        if not 0 <= idx < len(self.players):
            raise IndexError(f"invalid player index: {idx}")
        return self.players[idx]

    @property
    def active_player(self) -> Player:
        return self.get_player(self.active_index)

    @property
    def inactive_player(self) -> Player:
        return self.get_player((self.active_index + 1) % len(self.players))

    # observers

    def attach(self, observer: Observer) -> None:
        self.observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self.observers:
            self.observers.remove(observer)

    def notify_observers(self) -> None:
        for observer in list(self.observers):
            observer.notify()

    # the game loop

    def run(self, lines: Optional[Iterable[str]] = None) -> None:
        """Start the first turn and play commands from ``lines`` (stdin by default)."""
        self.active_index = 0
        self.active_player.start_turn()
        print(f"It is now {self.active_player.name}'s turn")
        self.notify_observers()

        source = lines if lines is not None else self._stdin
        if not self.game_over:
            for raw in source:
                command = raw.rstrip("\r\n")
                if command:
                    self._process_reporting(command)
                if self.game_over:
                    break
        print("Game has ended.")

    def _process_reporting(self, line: str) -> None:
        try:
            self.process_command(line)
        except _COMMAND_ERRORS as exc:
            print(f"Error: {exc}", file=sys.stderr)

    def process_command(self, line: str) -> None:
        """Carry out one command; rule breaches raise, observers are told either way."""
        cmd, *args = line.split() or [""]
        try:
            self._dispatch(cmd, args)
        finally:
            self.notify_observers()

    def _dispatch(self, cmd: str, args: List[str]) -> None:
        match cmd:
            case "help":
                print(HELP_TEXT)
            case "end":
                self._end_turn()
            case "quit":
                self.game_over = True
            case "play":
                self._play(args)
            case "attack":
                self._attack(args)
            case "use":
                self._use(args)
            case "inspect":
                match args:
                    case [minion]:
                        print(self.text_view.render_minion(self.active_index, int(minion)), end="")
                    case _:
                        self._wrong_arity(cmd)
            case "hand":
                print(self.text_view.render_hand(self.active_index), end="")
            case "board":
                print(self.text_view.render_board(), end="")
            case "draw" if self.testing_mode:
                self.active_player.draw_card()
            case "discard" if self.testing_mode:
                match args:
                    case [idx]:
                        self._discard(int(idx))
                    case _:
                        self._wrong_arity(cmd)
            case _:
                print("Invalid command")

    @staticmethod
    def _wrong_arity(cmd: str) -> None:
        print(f"Invalid number of arguments for {cmd}.")

    def _play(self, args: List[str]) -> None:
        match args:
            case [card]:
                self.active_player.play_card(int(card))
            case [card, player, target]:
                self.active_player.play_card(
                    int(card), self.get_player(int(player) - 1), int(target)
                )
            case _:
                self._wrong_arity("play")

    def _attack(self, args: List[str]) -> None:
        match args:
            case [attacker]:
                self.active_player.attack(int(attacker))
            case [attacker, defender]:
                self.active_player.attack(int(attacker), int(defender))
            case _:
                self._wrong_arity("attack")

    def _use(self, args: List[str]) -> None:
        match args:
            case [minion]:
                self.active_player.use_ability(int(minion))
            case [minion, player, target]:
                self.active_player.use_ability(
                    int(minion), self.get_player(int(player) - 1), int(target)
                )
            case _:
                self._wrong_arity("use")

    def _discard(self, idx: int) -> None:
        try:
            self.active_player.hand.remove_card(idx - 1)
        except IndexError:
            print("Invalid card index.")
            return
        print("Card discarded.")

    def _end_turn(self) -> None:
        self.active_index = 0 if self.active_index == 1 else 1
        print(f"It is now {self.active_player.name}'s turn")
        self.active_player.start_turn()

    def player_defeated(self, loser: Optional[Player]) -> None:
        """End the game once; the active player is the winner."""
        if self.game_over:
            return
        self.game_over = True
        if loser is not None:
            print(f"{loser.name} looosssssseeeerrrrrr!! (disappointment)")
        print(f"{self.active_player.name} wins!")