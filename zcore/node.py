"""Tree node shared by the JSON and CSV parsers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, NamedTuple, Optional, Union

__all__ = [
    "NodeType",
    "NameStyle",
    "AssignStyle",
    "DelimStyle",
    "Props",
    "Node",
]


class NodeType(IntEnum):
    """Kind of value a node holds."""

    UNINITIALISED = 0
    ARRAY = 1
    OBJECT = 2
    STRING = 3
    MULTISTRING = 4
    INTEGER = 5
    REAL = 6


class NameStyle(IntEnum):
    """How a name (or a CSV field) was quoted."""

    DOUBLE_QUOTE = 0
    SINGLE_QUOTE = 1
    NO_QUOTES = 2


class AssignStyle(IntEnum):
    """Character that separated a name from its value."""

    COLON = 0
    EQUALS = 1
    LINE = 2


class DelimStyle(IntEnum):
    """What followed a name/value pair."""

    COMMA = 0
    LINE = 1
    NEWLINE = 2


class Props(IntEnum):
    """Special meaning attached to a numeric node."""

    NONE = 0
    NAN = 1
    NAN_NEG = 2
    INFINITY = 3
    INFINITY_NEG = 4
    FALSE = 5
    TRUE = 6
    NULL = 7
    IS_HEX = 8


@dataclass
class Node:
    """A value in a parsed document, with the layout details it was read with."""

    type: NodeType = NodeType.UNINITIALISED
    name: Optional[str] = None
    string: Optional[str] = None
    integer: int = 0
    real: float = 0.0
    props: Props = Props.NONE
    nodes: List["Node"] = field(default_factory=list)
    name_style: NameStyle = NameStyle.DOUBLE_QUOTE
    assign_style: AssignStyle = AssignStyle.COLON
    delim_style: DelimStyle = DelimStyle.COMMA
    assign_line_width: int = 0
    delim_line_width: int = 0
    cfg_mode: bool = False

    def find(self, name: str) -> Optional["Node"]:
        """Return the first child called ``name``, or None."""
        return next((child for child in self.nodes if child.name == name), None)


class _Number(NamedTuple):
    type: NodeType
    value: Union[int, float]
    props: Props
    end: int


_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _scan_number(text: str, pos: int) -> _Number:
    """Read a numeric literal starting at ``pos``; raises ValueError if there is none."""
    size = len(text)

    def at(i: int) -> str:
        return text[i] if i < size else ""

    def is_digit(c: str) -> bool:
        return c != "" and c in _DIGITS

    p = pos
    if at(p) in ("+", "-"):
        p += 1

    if at(p) == "0" and at(p + 1) in ("x", "X"):
        q = p + 2
        while at(q) != "" and at(q) in _HEX_DIGITS:
            q += 1
        if q == p + 2:
            raise ValueError(f"malformed hexadecimal number at {pos}")
        value = int(text[p + 2:q], 16)
        if at(pos) == "-":
            value = -value
        return _Number(NodeType.INTEGER, value, Props.IS_HEX, q)

    digits = 0
    is_real = False
    while is_digit(at(p)):
        p += 1
        digits += 1
    if at(p) == ".":
        is_real = True
        p += 1
        while is_digit(at(p)):
            p += 1
            digits += 1
    if digits == 0:
        raise ValueError(f"malformed number at {pos}")

    if at(p) in ("e", "E"):
        q = p + 1
        if at(q) in ("+", "-"):
            q += 1
        if is_digit(at(q)):
            while is_digit(at(q)):
                q += 1
            p = q
            is_real = True

    literal = text[pos:p]
    if is_real:
        return _Number(NodeType.REAL, float(literal), Props.NONE, p)
    return _Number(NodeType.INTEGER, int(literal), Props.NONE, p)


_KEYWORD_TEXT = {
    Props.TRUE: "true",
    Props.FALSE: "false",
    Props.NULL: "null",
    Props.NAN: "NaN",
    Props.NAN_NEG: "-NaN",
    Props.INFINITY: "Infinity",
    Props.INFINITY_NEG: "-Infinity",
}


def _format_number(node: Node) -> str:
    """Text of a numeric node as it is written out."""
    keyword = _KEYWORD_TEXT.get(node.props)
    if keyword is not None:
        return keyword
    if node.type == NodeType.INTEGER:
        if node.props == Props.IS_HEX:
            sign = "-" if node.integer < 0 else ""
            return f"{sign}0x{abs(node.integer):x}"
        return str(node.integer)
    return repr(float(node.real))


def _escape_string(text: str, escaped_chars: str, escape_symbol: str) -> str:
    """Prefix every character of ``escaped_chars`` in ``text`` with ``escape_symbol``."""
    return "".join(escape_symbol + c if c in escaped_chars else c for c in text)