# sorcery

A two-player, turn-based card game played in the terminal. Each player has
a deck of minions, spells and rituals. On your turn you play cards from your
hand, send minions to attack the opponent or their minions, and use minion
abilities. A player whose life falls to zero loses, and the player whose turn
it is wins.

Each player starts with 20 life, 3 magic and five cards drawn from their
deck. From the second turn on, each turn brings one more magic and one more
card. A hand holds at most five cards and a board at most five minions.

## Installing

```
pip install .
```

## Playing

```
sorcery
```

Without an init file the game asks for both players' names on standard
input, then reads commands from standard input, one per line. After every
command the board is redrawn. Options:

- `-deck1 FILE`, `-deck2 FILE`: deck files for each player (default
  `default.deck` in the current directory). A deck file lists one card name
  per line; blank lines are skipped and unknown names are reported and
  skipped. A deck file that cannot be opened is reported and leaves that
  player with an empty deck.
- `-init FILE`: the first two lines are the players' names; every line after
  that is run as a command before play starts. If the file cannot be opened
  or is empty, the command prints an error and exits with status 1.
- `-testing`: decks are not shuffled, cards and abilities cost no magic, and
  the `draw` and `discard` commands are enabled.
- `-graphics`: accepted, but a notice is printed and the board is drawn as
  text.

Unknown arguments are reported on standard error and skipped.

## Commands

Positions in the hand and on the board start at 1; players are numbered 1
and 2.

```
help           Show the command list.
end            End the current player's turn.
quit           End the game.
attack i       Minion i attacks the opponent.
attack i j     Minion i attacks the opponent's minion j.
play i [p t]   Play card i, optionally targeting minion t of player p.
use i [p t]    Use minion i's ability, optionally targeting minion t of player p.
inspect i      Show minion i and the enchantments on it.
hand           Show your hand.
board          Show the board.
draw           (testing) Draw a card.
discard i      (testing) Remove the card at hand position i-1 (so `discard 2`
               removes the first card).
```

A command that breaks the rules (not enough magic, a minion with no action
left, a position that does not exist) prints an `Error:` message on standard
error and changes nothing else. Anything else prints `Invalid command`.

Enchantment spells (Giant Strength, Enrage, Haste, Magic Fatigue, Silence)
need a target: play them as `play i p t`.

## Cards

Minions: Air Elemental, Earth Elemental, Bone Golem, Fire Elemental,
Potion Seller, Novice Pyromancer (deals 1 damage to a target minion),
Apprentice Summoner (summons one Air Elemental), Master Summoner (summons up
to three Air Elementals).

Enchantment spells: Giant Strength (+2/+2), Enrage (×2/×2), Haste (+1 action
each turn), Magic Fatigue (abilities cost 2 more), Silence (no ability).

Rituals: Dark Ritual (gain 1 magic at the start of each turn, 5 charges).

## What it does not do

- There is no graphical window; the game is shown only as text.
- The texts of Bone Golem, Fire Elemental and Potion Seller describe
  triggered abilities that are not carried out in play; these minions act as
  plain minions.

## Using the library

The game can also be driven from Python:

```python
from sorcery.engine import GameEngine

engine = GameEngine(testing_mode=True, init_file="game.init")
engine.run(["play 1", "attack 1", "end", "quit"])
```

`GameEngine.process_command` runs a single command and raises on a rule
breach; `run` reports such errors and carries on.
`sorcery.factory.CardFactory` creates cards with `clone_by_name` and
`clone_by_id`, `sorcery.text_view.TextView` renders the board, a hand or a
minion as text, and `sorcery.graphics` renders individual cards as lists of
text lines.