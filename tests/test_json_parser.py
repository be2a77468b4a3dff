import math

import pytest

from zcore.json_parser import JsonError, JsonErrorCode, parse, write
from zcore.node import AssignStyle, NameStyle, Node, NodeType, Props


@pytest.mark.parametrize(
    "text",
    [
        '{\n    "a": 1,\n    "b": [1, 2]\n}\n',
        '{\n    "o": {\n        "x": "y"\n    }\n}\n',
        "a = 1\nb = 2\n",
        "[\n    1,\n    2\n]\n",
    ],
)
def test_canonical_round_trip(text):
    assert write(parse(text)) == text


def test_scalar_values():
    root = parse('{"s": "text", "n": 42, "f": 2.5, "t": true, "z": null}')
    assert root.type == NodeType.OBJECT
    assert root.find("s").string == "text"
    assert root.find("n").type == NodeType.INTEGER
    assert root.find("n").integer == 42
    assert root.find("f").type == NodeType.REAL
    assert root.find("f").real == 2.5
    assert root.find("t").props == Props.TRUE
    assert root.find("z").props == Props.NULL


def test_hex_number():
    node = parse('{"h": 0x1F}').find("h")
    assert node.integer == 0x1F
    assert node.props == Props.IS_HEX
    assert parse(write(parse('{"h": 0x1F}'))).find("h").integer == 0x1F


def test_special_reals():
    root = parse('{"i": -Infinity, "n": NaN, "p": Infinity}')
    assert math.isinf(root.find("i").real) and root.find("i").real < 0
    assert root.find("i").props == Props.INFINITY_NEG
    assert math.isnan(root.find("n").real)
    assert root.find("p").props == Props.INFINITY


def test_line_comment_is_skipped():
    assert parse('// note\n{"a": 1}').find("a").integer == 1


def test_single_quoted_name_and_value():
    node = parse("{'k': 'v'}").find("k")
    assert node.name_style == NameStyle.SINGLE_QUOTE
    assert node.string == "v"


def test_unquoted_name():
    node = parse("{key: 5}").find("key")
    assert node.name_style == NameStyle.NO_QUOTES
    assert node.integer == 5


def test_multistring():
    node = parse('{"m": `line`}').find("m")
    assert node.type == NodeType.MULTISTRING
    assert node.string == "line"


def test_cfg_mode_detection():
    root = parse("a = 1\n")
    assert root.cfg_mode is True
    assert root.find("a").assign_style == AssignStyle.EQUALS
    assert parse('{"a": 1}').cfg_mode is False


def test_trailing_comma_in_array():
    values = parse('{"a": [1, 2,]}').find("a").nodes
    assert [v.integer for v in values] == [1, 2]


def test_nested_structure_survives_rewrite():
    source = '{a=1, "b": [true, null], c: {d: "e"}}'
    again = parse(write(parse(source)))
    assert [n.name for n in again.nodes] == ["a", "b", "c"]
    assert again.find("a").integer == 1
    assert [n.props for n in again.find("b").nodes] == [Props.TRUE, Props.NULL]
    assert again.find("c").find("d").string == "e"


def test_built_tree_round_trip():
    tree = Node(type=NodeType.OBJECT, nodes=[Node(type=NodeType.STRING, name="k", string="v")])
    assert parse(write(tree)).find("k").string == "v"


def test_quotes_are_escaped_when_written():
    tree = Node(type=NodeType.OBJECT, nodes=[Node(type=NodeType.STRING, name="k", string='say "hi"')])
    assert 'say \\"hi\\"' in write(tree)


def test_write_none_is_empty():
    assert write(None) == ""


def test_write_rejects_scalar():
    with pytest.raises(ValueError):
        write(Node(type=NodeType.STRING, string="x"))


@pytest.mark.parametrize(
    "text, code",
    [
        ('{"a": 1]}', JsonErrorCode.OBJECT_END_PAIR_MISMATCHED),
        ('{"a": [1, 2}', JsonErrorCode.ARRAY_LEFT_OPEN),
        ('{"a": bogus}', JsonErrorCode.UNKNOWN_KEYWORD),
        ('{"a" 1}', JsonErrorCode.INVALID_ASSIGNMENT),
        ('{"a\\q": 1}', JsonErrorCode.INVALID_NAME),
        ("[1,", JsonErrorCode.INTERNAL),
        ("", JsonErrorCode.OBJECT_END_PAIR_MISMATCHED),
    ],
)
def test_errors(text, code):
    with pytest.raises(JsonError) as info:
        parse(text)
    assert info.value.code == code