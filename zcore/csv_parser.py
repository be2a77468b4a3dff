"""Reader and writer for delimiter-separated tables, stored column by column."""

from __future__ import annotations

import dataclasses
from enum import IntEnum
from typing import List, Tuple

from .node import NameStyle, Node, NodeType, _escape_string, _format_number, _scan_number

__all__ = ["CsvErrorCode", "CsvError", "parse", "write"]


class CsvErrorCode(IntEnum):
    """Reasons a table fails to parse."""

    NONE = 0
    INTERNAL = 1
    UNEXPECTED_END_OF_INPUT = 2
    MISMATCHED_ROWS = 3


class CsvError(ValueError):
    """Raised when a table cannot be parsed."""

    def __init__(self, code: CsvErrorCode) -> None:
        super().__init__(code.name.lower().replace("_", " "))
        self.code = code


_SPACES = " \t\n\r\f\v"
_NUMBER_CHARS = frozenset("0123456789abcdefABCDEF+-.eExX")


def _convert_number(item: Node, field: str) -> None:
    """Turn ``item`` into a numeric node when ``field`` is a whole number literal."""
    if not field or any(c not in _NUMBER_CHARS for c in field):
        return
    try:
        number = _scan_number(field, 0)
    except ValueError:
        return
    if number.end != len(field):
        return
    item.type = number.type
    item.props = number.props
    if number.type == NodeType.INTEGER:
        item.integer = int(number.value)
    else:
        item.real = float(number.value)


class _Reader:
    def __init__(self, text: str, delimiter: str) -> None:
        self.text = text
        self.size = len(text)
        self.delimiter = delimiter

    def at(self, index: int) -> str:
        return self.text[index] if 0 <= index < self.size else ""

    def trim(self, p: int, catch_newline: bool) -> int:
        while p < self.size:
            c = self.text[p]
            if c not in _SPACES or (catch_newline and c == "\n"):
                break
            p += 1
        return p

    def quoted(self, p: int) -> Tuple[Node, int, str]:
        start = p + 1
        e = start
        while True:
            q = self.text.find('"', e)
            if q < 0:
                raise CsvError(CsvErrorCode.UNEXPECTED_END_OF_INPUT)
            if self.at(q + 1) == '"':
                e = q + 2
                if e >= self.size:
                    raise CsvError(CsvErrorCode.UNEXPECTED_END_OF_INPUT)
                continue
            break
        value = self.text[start:q].replace('""', '"')
        item = Node(type=NodeType.STRING, string=value, name_style=NameStyle.DOUBLE_QUOTE)
        p = self.trim(q + 1, True)
        return item, p, self.at(p)

    def regular(self, p: int) -> Tuple[Node, int, str]:
        start = p
        e = p + 1
        while e < self.size and self.text[e] not in (self.delimiter, "\n"):
            e += 1
        if e < self.size:
            p = self.trim(e, True)
            field = self.text[start:e].rstrip(_SPACES)
            d = self.at(p)
        else:
            field = self.text[start:e]
            p = e
            d = ""
        item = Node(type=NodeType.STRING, string=field, name_style=NameStyle.NO_QUOTES)
        _convert_number(item, field)
        return item, p, d


def parse(text: str, has_header: bool = False, delimiter: str = ",") -> Node:
    """Parse ``text`` into a root node holding one child node per column.

    With ``has_header`` the first row names the columns and the root is an
    object; otherwise the root is an array of unnamed columns. Fields made
    only of a number literal become numeric nodes.
    """
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")

    root = Node(type=NodeType.OBJECT if has_header else NodeType.ARRAY)
    reader = _Reader(text, delimiter)
    p = 0
    colc = 0
    total_colc = 0

    while True:
        p = reader.trim(p, False)
        if p >= reader.size:
            break

        c = text[p]
        if c == '"':
            item, p, d = reader.quoted(p)
        elif c == delimiter:
            item = Node(type=NodeType.STRING, string="", name_style=NameStyle.NO_QUOTES)
            d = c
        else:
            item, p, d = reader.regular(p)

        if colc >= len(root.nodes):
            root.nodes.append(Node(type=NodeType.ARRAY))
        root.nodes[colc].nodes.append(item)

        if d == delimiter:
            colc += 1
            p += 1
        elif d in ("\n", ""):
            if total_colc < colc:
                total_colc = colc
            elif total_colc != colc:
                raise CsvError(CsvErrorCode.MISMATCHED_ROWS)
            colc = 0
            if d:
                p += 1

        if p >= reader.size:
            break

    if not root.nodes:
        raise CsvError(CsvErrorCode.UNEXPECTED_END_OF_INPUT)

    if has_header:
        for column in root.nodes:
            column.name = column.nodes.pop(0).string

    return root


def _record(node: Node) -> str:
    if node.type == NodeType.STRING:
        text = node.string or ""
        if node.name_style == NameStyle.DOUBLE_QUOTE:
            return '"' + _escape_string(text, '"', '"') + '"'
        if node.name_style == NameStyle.NO_QUOTES:
            return text
        return ""
    if node.type in (NodeType.REAL, NodeType.INTEGER):
        return _format_number(node)
    return ""


def _header(column: Node) -> str:
    return _record(dataclasses.replace(column, string=column.name, type=NodeType.STRING))


def write(node: Node, delimiter: str = ",") -> str:
    """Render a parsed table back to text; an empty table renders as ''."""
    columns = node.nodes
    if not columns:
        return ""
    rows = len(columns[0].nodes)
    if rows == 0:
        return ""

    lines: List[str] = []
    if columns[0].name is not None:
        lines.append(delimiter.join(_header(column) for column in columns) + "\n")

    for r in range(rows):
        fields = []
        for column in columns:
            if r >= len(column.nodes):
                raise ValueError("columns have different numbers of rows")
            fields.append(_record(column.nodes[r]))
        lines.append(delimiter.join(fields) + "\n")
    return "".join(lines)