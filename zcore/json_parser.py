"""Reader and writer for JSON5-style documents, keeping their layout."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional

from .node import (
    AssignStyle,
    DelimStyle,
    NameStyle,
    Node,
    NodeType,
    Props,
    _escape_string,
    _format_number,
    _scan_number,
)

__all__ = ["JsonErrorCode", "JsonError", "parse", "write"]


class JsonErrorCode(IntEnum):
    """Reasons a document fails to parse."""

    NONE = 0
    INTERNAL = 1
    INVALID_NAME = 2
    INVALID_VALUE = 3
    INVALID_ASSIGNMENT = 4
    UNKNOWN_KEYWORD = 5
    ARRAY_LEFT_OPEN = 6
    OBJECT_END_PAIR_MISMATCHED = 7
    OUT_OF_MEMORY = 8


class JsonError(ValueError):
    """Raised when a document cannot be parsed."""

    def __init__(self, code: JsonErrorCode) -> None:
        super().__init__(code.name.lower().replace("_", " "))
        self.code = code


_SPACES = " \t\n\r\f\v"
_HEX_DIGITS = "0123456789abcdefABCDEF"

_KEYWORDS = (
    ("true", Props.TRUE, 1.0),
    ("false", Props.FALSE, 0.0),
    ("null", Props.NULL, 0.0),
    ("Infinity", Props.INFINITY, float("inf")),
    ("-Infinity", Props.INFINITY_NEG, float("-inf")),
    ("NaN", Props.NAN, float("nan")),
    ("-NaN", Props.NAN_NEG, -float("nan")),
)


def _is_space(c: str) -> bool:
    return c != "" and c in _SPACES


def _is_alpha(c: str) -> bool:
    return c != "" and ("a" <= c <= "z" or "A" <= c <= "Z")


def _is_digit(c: str) -> bool:
    return c != "" and "0" <= c <= "9"


def _is_alnum(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


def _is_hex(c: str) -> bool:
    return c != "" and c in _HEX_DIGITS


def _is_assign(c: str) -> bool:
    return c != "" and c in ":=|"


def _is_delim(c: str) -> bool:
    return c != "" and c in ",|\n"


def _is_control(c: str) -> bool:
    # the end of a name counts as a control character
    return c == "" or c in "\"\\/bfnrt"


def _skip_literal(text: str, start: int, quote: str) -> int:
    """Index of the first ``quote`` not preceded by a backslash, or the text length."""
    prev = ""
    for index in range(start, len(text)):
        c = text[index]
        if c == quote and prev != "\\":
            return index
        prev = c
    return len(text)


def _validate_name(name: str) -> bool:
    def at(i: int) -> str:
        return name[i] if i < len(name) else ""

    for index, c in enumerate(name):
        if (
            c == "\\"
            and not _is_control(at(index + 1))
            and not any(_is_hex(at(index + k)) for k in range(1, 5))
        ):
            return False
    return True


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.size = len(text)

    def at(self, index: int) -> str:
        return self.text[index] if 0 <= index < self.size else ""

    def trim(self, p: int, catch_newline: bool) -> int:
        text = self.text
        while True:
            c = self.at(p)
            if text.startswith("//", p):
                end = text.find("\n", p)
                p = self.size if end < 0 else end
            elif text.startswith("/*", p):
                star = text.find("*", p + 2)
                star = self.size if star < 0 else star
                if star < self.size and self.at(star + 1) == "/":
                    p = star + 2
            elif c == "\n" and catch_newline:
                return p
            elif not _is_space(c):
                return p
            if p >= self.size:
                return self.size
            p += 1

    def parse_object(self, obj: Node, p: int) -> int:
        p = self.trim(p, False)
        c = self.at(p)
        if c == "{":
            p += 1
        elif c == "[":
            obj.type = NodeType.ARRAY
            return self.parse_array(obj, p + 1)

        obj.nodes = []
        obj.type = NodeType.OBJECT

        while True:
            node = Node()
            p = self.trim(p, False)
            c = self.at(p)
            if c == "}":
                return p
            if c == "" or c in "}]":
                raise JsonError(JsonErrorCode.OBJECT_END_PAIR_MISMATCHED)

            p = self.parse_name(node, p)
            p = self.trim(min(p + 1, self.size), False)
            p = self.parse_value(node, p)
            obj.nodes.append(node)

            value_end = p
            p = self.trim(p, True)
            c = self.at(p)
            if _is_delim(c):
                if c == "\n":
                    node.delim_style = DelimStyle.NEWLINE
                elif c == "|":
                    node.delim_style = DelimStyle.LINE
                    node.delim_line_width = (p - value_end) & 0xFF
                else:
                    node.delim_style = DelimStyle.COMMA
                p += 1
            p = self.trim(p, False)
            if self.at(p) == "":
                return p

    def parse_array(self, obj: Node, p: int) -> int:
        obj.type = NodeType.ARRAY
        obj.nodes = []

        while self.at(p) != "":
            p = self.trim(p, False)
            if self.at(p) == "]":
                return p

            element = Node()
            p = self.parse_value(element, p)
            obj.nodes.append(element)

            p = self.trim(p, False)
            c = self.at(p)
            if c == ",":
                p += 1
                continue
            if c != "]":
                raise JsonError(JsonErrorCode.ARRAY_LEFT_OPEN)
            return p

        raise JsonError(JsonErrorCode.INTERNAL)

    def parse_value(self, obj: Node, p: int) -> int:
        c = self.at(p)
        if c == "":
            raise JsonError(JsonErrorCode.INVALID_VALUE)

        if c in "`\"'":
            obj.type = NodeType.MULTISTRING if c == "`" else NodeType.STRING
            start = p + 1
            end = _skip_literal(self.text, start, c)
            obj.string = self.text[start:end]
            return min(end + 1, self.size)

        if _is_alpha(c) or (c == "-" and not _is_digit(self.at(p + 1))):
            for keyword, props, value in _KEYWORDS:
                if self.text.startswith(keyword, p):
                    obj.type = NodeType.REAL
                    obj.props = props
                    obj.real = value
                    return p + len(keyword)
            raise JsonError(JsonErrorCode.UNKNOWN_KEYWORD)

        if _is_digit(c) or c in "+-.":
            try:
                number = _scan_number(self.text, p)
            except ValueError:
                raise JsonError(JsonErrorCode.INVALID_VALUE) from None
            obj.type = number.type
            obj.props = number.props
            if number.type == NodeType.INTEGER:
                obj.integer = int(number.value)
            else:
                obj.real = float(number.value)
            return number.end

        if c in "[{":
            return min(self.parse_object(obj, p) + 1, self.size)

        return p

    def parse_name(self, node: Node, p: int) -> int:
        c = self.at(p)
        if c in ("\"", "'") or _is_alpha(c) or c in ("_", "$"):
            unquoted = False
            if c in ("\"", "'"):
                node.name_style = NameStyle.DOUBLE_QUOTE if c == "\"" else NameStyle.SINGLE_QUOTE
                start = p + 1
                end = _skip_literal(self.text, start, c)
                node.name = self.text[start:end]
                end = min(end + 1, self.size)
            else:
                start = end = p
                while True:
                    ch = self.at(end)
                    if ch == "" or not (_is_alnum(ch) or ch == "_") or _is_space(ch) or _is_assign(ch):
                        break
                    end += 1
                node.name = self.text[start:end]
                unquoted = True

            p = self.trim(end, False)
            node.assign_line_width = (p - end) & 0xFF

            c = self.at(p)
            if c != "" and not _is_assign(c):
                raise JsonError(JsonErrorCode.INVALID_ASSIGNMENT)
            if c == "=":
                node.assign_style = AssignStyle.EQUALS
            elif c == "|":
                node.assign_style = AssignStyle.LINE
            else:
                node.assign_style = AssignStyle.COLON

            if unquoted and self.at(end) != "":
                node.name_style = NameStyle.NO_QUOTES

        if node.name is not None and not _validate_name(node.name):
            raise JsonError(JsonErrorCode.INVALID_NAME)
        return p


def parse(text: str) -> Node:
    """Parse a document into a tree; raises JsonError when it is malformed.

    A document that does not open with ``{`` or ``[`` is read as a flat
    list of name/value pairs and marked with ``cfg_mode``.
    """
    root = Node()
    parser = _Parser(text)
    start = parser.trim(0, True)
    first = parser.at(start)
    if first != "" and first not in "{[":
        root.cfg_mode = True
    parser.parse_object(root, start)
    return root


class _Writer:
    def __init__(self) -> None:
        self.parts: List[str] = []

    def emit(self, text: str) -> None:
        self.parts.append(text)

    def pad(self, width: int) -> None:
        if width > 0:
            self.parts.append(" " * width)

    def container(self, o: Node, indent: int) -> None:
        if o.type not in (NodeType.OBJECT, NodeType.ARRAY):
            raise ValueError("only objects and arrays can be written")
        opening, closing = ("{", "}") if o.type == NodeType.OBJECT else ("[", "]")

        self.pad(indent - 4)
        if not o.cfg_mode:
            self.emit(opening + "\n")
        else:
            indent -= 4

        count = len(o.nodes)
        for index, child in enumerate(o.nodes):
            self.value(child, o, indent, False, index == count - 1)

        self.pad(indent)
        if indent > 0:
            self.emit(closing)
        elif not o.cfg_mode:
            self.emit(closing + "\n")

    def value(self, o: Node, parent: Node, indent: int, is_inline: bool, is_last: bool) -> None:
        indent += 4

        if not is_inline:
            self.pad(indent)
            if parent.type != NodeType.ARRAY:
                name = o.name if o.name is not None else ""
                if o.name_style == NameStyle.DOUBLE_QUOTE:
                    self.emit(f"\"{name}\"")
                elif o.name_style == NameStyle.SINGLE_QUOTE:
                    self.emit(f"'{name}'")
                else:
                    self.emit(name)

                if o.assign_style == AssignStyle.COLON:
                    self.emit(": ")
                else:
                    self.pad(max(o.assign_line_width, 1))
                    self.emit("= " if o.assign_style == AssignStyle.EQUALS else "| ")

        if o.type == NodeType.STRING:
            self.emit("\"" + _escape_string(o.string or "", "\"", "\\") + "\"")
        elif o.type == NodeType.MULTISTRING:
            self.emit("`" + _escape_string(o.string or "", "`", "\\") + "`")
        elif o.type == NodeType.ARRAY:
            self.emit("[")
            count = len(o.nodes)
            for index, element in enumerate(o.nodes):
                nested = element.type in (NodeType.OBJECT, NodeType.ARRAY)
                self.value(element, o, 0 if nested else -4, True, True)
                if index < count - 1:
                    self.emit(", ")
            self.emit("]")
        elif o.type in (NodeType.REAL, NodeType.INTEGER):
            self.emit(_format_number(o))
        elif o.type == NodeType.OBJECT:
            self.container(o, indent)

        if not is_inline:
            if o.delim_style != DelimStyle.COMMA:
                if o.delim_style == DelimStyle.NEWLINE:
                    self.emit("\n")
                elif o.delim_style == DelimStyle.LINE:
                    self.pad(o.delim_line_width)
                    self.emit("|\n")
            elif not is_last:
                self.emit(",\n")
            else:
                self.emit("\n")


def write(node: Optional[Node], indent: int = 0) -> str:
    """Render an object or array node as text; None renders as an empty string."""
    if node is None:
        return ""
    writer = _Writer()
    writer.container(node, indent)
    return "".join(writer.parts)