"""Text rendering of cards as fixed-size blocks of lines.

Every card is drawn from a template: a list of equally wide lines in which
replaceable fields are marked as ``~XXXX~`` runs of a flag letter between two
tildes.  A field may continue over several lines; text is poured into it
left-aligned or right-aligned, cut short when it does not fit and padded with
spaces when it is shorter than the field.
"""

from __future__ import annotations

from typing import List, Sequence

CardTemplate = List[str]

# Marks the boundaries of a replaceable field once a template is prepared.
_DELIMITER = "\v"

_CARD_INNER = 31
_BOARD_INNER = 165

_HEAVY = "━"
_LIGHT = "─"
_SIDE = "┃"


def _field(flag: str, width: int, *, opening: bool = True, closing: bool = True) -> str:
    return ("~" if opening else "") + flag * width + ("~" if closing else "")


def _blank() -> str:
    return _SIDE + " " * _CARD_INNER + _SIDE


def _heavy_top() -> str:
    return "┏" + _HEAVY * _CARD_INNER + "┓"


def _heavy_bottom() -> str:
    return "┗" + _HEAVY * _CARD_INNER + "┛"


def _header() -> tuple[str, ...]:
    """Name and cost, then the type line, shared by every playable card."""
    return (
        "┏" + _HEAVY * 25 + "┯" + _HEAVY * 5 + "┓",
        "┃ " + _field("N", 21) + " │ " + _field("C", 1) + " ┃",
        "┠" + _LIGHT * 25 + "┴" + _LIGHT * 5 + "┨",
        "┃ " + _field("T", 27) + " ┃",
    )


def _plain_description(lines: int) -> tuple[str, ...]:
    """A full-width description box of ``lines`` lines under a rule."""
    middle = ("┃ " + "E" * 29 + " ┃",) * (lines - 2)
    return (
        "┠" + _LIGHT * _CARD_INNER + "┨",
        "┃ " + _field("E", 28, closing=False) + " ┃",
        *middle,
        "┃ " + _field("E", 28, opening=False) + " ┃",
    )


def _costed_description() -> tuple[str, ...]:
    """A description box with an activation cost in its top-left corner."""
    return (
        "┠" + _LIGHT * 5 + "┬" + _LIGHT * 25 + "┨",
        "┃ " + _field("K", 1) + " │ " + _field("E", 22, closing=False) + " ┃",
        "┠" + _LIGHT * 5 + "┘ " + "E" * 23 + " ┃",
        "┃       " + _field("E", 22, opening=False) + " ┃",
    )


def _corner_boxes(left: str, right: str) -> tuple[str, ...]:
    """The two small boxes at the bottom corners of a card."""
    return (
        "┠" + _LIGHT * 5 + "┐" + " " * 19 + "┌" + _LIGHT * 5 + "┨",
        _SIDE + left + "│" + " " * 19 + "│" + right + _SIDE,
        "┗" + _HEAVY * 5 + "┷" + _HEAVY * 19 + "┷" + _HEAVY * 5 + "┛",
    )


_ATTACK_DEFENCE = _corner_boxes(" " + _field("A", 2), _field("D", 2) + " ")

CARD_TEMPLATE_MINION_NO_ABILITY: tuple[str, ...] = (
    *_header(),
    *_plain_description(3),
    *_ATTACK_DEFENCE,
)

CARD_TEMPLATE_MINION_WITH_ABILITY: tuple[str, ...] = (
    *_header(),
    *_costed_description(),
    *_ATTACK_DEFENCE,
)

CARD_TEMPLATE_BORDER: tuple[str, ...] = (_heavy_top(), *(_blank(),) * 9, _heavy_bottom())

CARD_TEMPLATE_EMPTY: tuple[str, ...] = (" " * (_CARD_INNER + 2),) * 11

CARD_TEMPLATE_RITUAL: tuple[str, ...] = (
    *_header(),
    *_costed_description(),
    _SIDE + " " * 25 + "┌" + _LIGHT * 5 + "┨",
    _SIDE + " " * 25 + "│" + _field("D", 2) + " " + _SIDE,
    "┗" + _HEAVY * 25 + "┷" + _HEAVY * 5 + "┛",
)

CARD_TEMPLATE_SPELL: tuple[str, ...] = (
    *_header(),
    *_plain_description(5),
    _heavy_bottom(),
)

CARD_TEMPLATE_ENCHANTMENT_WITH_ATTACK_DEFENCE = CARD_TEMPLATE_MINION_NO_ABILITY
CARD_TEMPLATE_ENCHANTMENT = CARD_TEMPLATE_SPELL

_LIFE_BOX = _field("H", 2) + " "
_MANA_BOX = " " + _field("M", 2)

PLAYER_1_TEMPLATE: tuple[str, ...] = (
    _heavy_top(),
    _blank(),
    _blank(),
    _SIDE + " " * 9 + _field("N", 11) + " " * 9 + _SIDE,
    *(_blank(),) * 4,
    *_corner_boxes(_LIFE_BOX, _MANA_BOX),
)

PLAYER_2_TEMPLATE: tuple[str, ...] = (
    "┏" + _HEAVY * 5 + "┯" + _HEAVY * 19 + "┯" + _HEAVY * 5 + "┓",
    _SIDE + _LIFE_BOX + "│" + " " * 19 + "│" + _MANA_BOX + _SIDE,
    "┠" + _LIGHT * 5 + "┘" + " " * 19 + "└" + _LIGHT * 5 + "┨",
    *(_blank(),) * 4,
    _SIDE + " " * 10 + _field("N", 11) + " " * 8 + _SIDE,
    _blank(),
    _blank(),
    _heavy_bottom(),
)

_BANNER = (
    "███████╗ ██████╗ ██████╗  ██████╗███████╗██████╗ ██╗   ██╗",
    "██╔════╝██╔═══██╗██╔══██╗██╔════╝██╔════╝██╔══██╗╚██╗ ██╔╝",
    "███████╗██║   ██║██████╔╝██║     █████╗  ██████╔╝ ╚████╔╝",
    "╚════██║██║   ██║██╔══██╗██║     ██╔══╝  ██╔══██╗  ╚██╔╝",
    "███████║╚██████╔╝██║  ██║╚██████╗███████╗██║  ██║   ██║",
    "╚══════╝ ╚═════╝ ╚═╝  ╚═╝ ╚═════╝╚══════╝╚═╝  ╚═╝   ╚═╝",
)
_BANNER_INDENT = 53


def _centre_graphic() -> tuple[str, ...]:
    rule = "╠" + "═" * _BOARD_INNER + "╣"
    blank = "║" + " " * _BOARD_INNER + "║"
    art = tuple(
        "║" + (" " * _BANNER_INDENT + line).ljust(_BOARD_INNER) + "║" for line in _BANNER
    )
    return (rule, blank, *art, blank, rule)


CENTRE_GRAPHIC: tuple[str, ...] = _centre_graphic()

EXTERNAL_BORDER_CHAR_UP_DOWN = "║"
EXTERNAL_BORDER_CHAR_LEFT_RIGHT = "═"
EXTERNAL_BORDER_CHAR_TOP_LEFT = "╔"
EXTERNAL_BORDER_CHAR_TOP_RIGHT = "╗"
EXTERNAL_BORDER_CHAR_BOTTOM_LEFT = "╚"
EXTERNAL_BORDER_CHAR_BOTTOM_RIGHT = "╝"


def _pour(grid: list[list[str]], flag: str, text: str) -> None:
    """Write ``text`` into the field marked by ``flag``, scanning forwards."""
    chars = iter(text)
    active = False
    for row in grid:
        for pos, ch in enumerate(row):
            following = row[pos + 1] if pos + 1 < len(row) else None
            closing = False
            if ch == _DELIMITER and following == flag:
                active = True
            elif ch == _DELIMITER:
                closing = True
            if active and ch in (flag, _DELIMITER):
                row[pos] = next(chars, " ")
            if closing:
                active = False


class _Filler:
    """A template being filled in, field by field."""

    def __init__(self, template: Sequence[str]) -> None:
        self._grid = [list(line.replace("~", _DELIMITER)) for line in template]

    def left(self, flag: str, text: str) -> "_Filler":
        _pour(self._grid, flag, text)
        return self

    def right(self, flag: str, text: str) -> "_Filler":
        mirrored = [row[::-1] for row in reversed(self._grid)]
        _pour(mirrored, flag, text[::-1])
        self._grid = [row[::-1] for row in reversed(mirrored)]
        return self

    def lines(self) -> CardTemplate:
        return ["".join(row) for row in self._grid]


def _display_minion_general(
    template: Sequence[str],
    name: str,
    cost: int,
    attack: int,
    defence: int,
    desc: str,
    ability_cost: int,
) -> CardTemplate:
    return (
        _Filler(template)
        .left("N", name)
        .right("C", str(cost))
        .right("T", "Minion")
        .left("A", str(attack))
        .right("D", str(defence))
        .left("E", desc)
        .left("K", str(ability_cost))
        .lines()
    )


def _display_enchantment_general(
    template: Sequence[str],
    name: str,
    cost: int,
    desc: str,
    attack: str,
    defence: str,
) -> CardTemplate:
    return (
        _Filler(template)
        .left("N", name)
        .right("C", str(cost))
        .right("T", "Enchantment")
        .left("E", desc)
        .left("A", attack)
        .right("D", defence)
        .lines()
    )


def display_minion_no_ability(name: str, cost: int, attack: int, defence: int) -> CardTemplate:
    """Render a minion that has no ability."""
    return _display_minion_general(
        CARD_TEMPLATE_MINION_NO_ABILITY, name, cost, attack, defence, "", 0
    )


def display_minion_triggered_ability(
    name: str, cost: int, attack: int, defence: int, trigger_desc: str
) -> CardTemplate:
    """Render a minion with a triggered ability described by ``trigger_desc``."""
    return _display_minion_general(
        CARD_TEMPLATE_MINION_NO_ABILITY, name, cost, attack, defence, trigger_desc, 0
    )


def display_minion_activated_ability(
    name: str, cost: int, attack: int, defence: int, ability_cost: int, ability_desc: str
) -> CardTemplate:
    """Render a minion with an activated ability and its activation cost."""
    return _display_minion_general(
        CARD_TEMPLATE_MINION_WITH_ABILITY,
        name,
        cost,
        attack,
        defence,
        ability_desc,
        ability_cost,
    )


def display_ritual(
    name: str, cost: int, ritual_cost: int, ritual_desc: str, ritual_charges: int
) -> CardTemplate:
    """Render a ritual with its activation cost and remaining charges."""
    return (
        _Filler(CARD_TEMPLATE_RITUAL)
        .left("N", name)
        .right("C", str(cost))
        .right("T", "Ritual")
        .left("K", str(ritual_cost))
        .left("E", ritual_desc)
        .right("D", str(ritual_charges))
        .lines()
    )


def display_spell(name: str, cost: int, desc: str) -> CardTemplate:
    """Render a spell."""
    return (
        _Filler(CARD_TEMPLATE_SPELL)
        .left("N", name)
        .right("C", str(cost))
        .right("T", "Spell")
        .left("E", desc)
        .lines()
    )


def display_enchantment(name: str, cost: int, desc: str) -> CardTemplate:
    """Render an enchantment without attack and defence modifiers."""
    return _display_enchantment_general(CARD_TEMPLATE_ENCHANTMENT, name, cost, desc, "", "")


def display_enchantment_attack_defence(
    name: str, cost: int, desc: str, attack: str, defence: str
) -> CardTemplate:
    """Render an enchantment that shows attack and defence modifiers."""
    return _display_enchantment_general(
        CARD_TEMPLATE_ENCHANTMENT_WITH_ATTACK_DEFENCE, name, cost, desc, attack, defence
    )


def display_player_card(player_num: int, name: str, life: int, mana: int) -> CardTemplate:
    """Render a player's card; player 1 uses the top layout, others the bottom."""
    template = PLAYER_1_TEMPLATE if player_num == 1 else PLAYER_2_TEMPLATE
    centred_name = name
    if len(centred_name) < 13:
        extend = 13 - len(centred_name)
        centred_name = " " * (int(extend / 2) - 1) + centred_name
    return (
        _Filler(template)
        .left("N", centred_name)
        .right("H", str(life))
        .left("M", str(mana))
        .lines()
    )