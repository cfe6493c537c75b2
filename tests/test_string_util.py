from dataclasses import dataclass

import pytest

from templdata.string_util import (
    center_string,
    concat,
    indent,
    indent_n,
    interface_to_string,
    join_lines,
    pretty_print_struct,
    split2,
    split_lines,
    sprint,
    to_interfaces,
    to_strings,
    unindent,
    wrap_string,
)


@pytest.mark.parametrize(
    "source, expected",
    [
        (
            "\n\t\t\tHello\n\n\t\t\tWorld\n\t\t\tend!\n\t\t\t",
            "\nHello\n\nWorld\nend!\n",
        ),
        (
            "\n" + " " * 16 + "Hello\n\n" + " " * 16 + "World\n" + " " * 16 + "end!\n" + " " * 16,
            "\nHello\n\nWorld\nend!\n",
        ),
        ("Hello World!", "Hello World!"),
        ("  Hello World!", "  Hello World!"),
        (
            "\n\t\t\tHello\n\n\t        World\n\t\t\tend!\n\t\t\t",
            "\n\t\t\tHello\n\n\t        World\n\t\t\tend!\n\t\t\t",
        ),
        ("\nHello\n   World\n", "\nHello\n   World\n"),
    ],
)
def test_unindent(source, expected):
    assert unindent(source) == expected


SAMPLE = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua."
)


@pytest.mark.parametrize(
    "width, expected",
    [
        (1, "Lorem\nipsum\ndolor\nsit\namet,\nconsectetur\nadipiscing\nelit,\nsed\ndo\neiusmod\ntempor\nincididunt\nut\nlabore\net\ndolore\nmagna\naliqua."),
        (5, "Lorem\nipsum\ndolor\nsit\namet,\nconsectetur\nadipiscing\nelit,\nsed do\neiusmod\ntempor\nincididunt\nut\nlabore\net\ndolore\nmagna\naliqua."),
        (10, "Lorem ipsum\ndolor sit\namet,\nconsectetur\nadipiscing\nelit, sed\ndo eiusmod\ntempor\nincididunt\nut labore\net dolore\nmagna\naliqua."),
        (20, "Lorem ipsum dolor sit\namet, consectetur\nadipiscing elit, sed\ndo eiusmod tempor\nincididunt ut labore\net dolore magna\naliqua."),
        (30, "Lorem ipsum dolor sit amet,\nconsectetur adipiscing elit,\nsed do eiusmod tempor\nincididunt ut labore et dolore\nmagna aliqua."),
        (40, "Lorem ipsum dolor sit amet, consectetur\nadipiscing elit, sed do eiusmod tempor\nincididunt ut labore et dolore magna\naliqua."),
        (50, "Lorem ipsum dolor sit amet, consectetur adipiscing\nelit, sed do eiusmod tempor incididunt ut labore et\ndolore magna aliqua."),
        (75, "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod\ntempor incididunt ut labore et dolore magna aliqua."),
        (100, "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt ut labore\net dolore magna aliqua."),
        (125, SAMPLE),
    ],
)
def test_wrap_string(width, expected):
    assert wrap_string(SAMPLE, width) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "<nil>"),
        (True, "true"),
        (False, "false"),
        (123, "123"),
        (1.23, "1.23"),
        (10.0, "10"),
        (1e6, "1e+06"),
        ("Foo bar", "Foo bar"),
        ([1, "two"], "[1 two]"),
        ({"sub1": 1, "sub2": "two"}, "map[sub1:1 sub2:two]"),
        (
            {"int": 10, "string_pointer": "World", "bool_pointer": False},
            "map[bool_pointer:false int:10 string_pointer:World]",
        ),
        (
            {
                "elements": [
                    {"Name": "value1", "Value": 1},
                    {"Name": "value2", "Value": 2},
                    {"Name": "value3", "Value": 3},
                ]
            },
            "map[elements:[map[Name:value1 Value:1] map[Name:value2 Value:2] map[Name:value3 Value:3]]]",
        ),
    ],
)
def test_sprint(value, expected):
    assert sprint(value) == expected


def test_center_string():
    assert center_string("ab", 6) == "  ab  "
    assert center_string("ab", 5) == " ab  "
    assert center_string("abcdef", 3) == "abcdef"
    assert len(center_string("xyz", 11)) == 11


def test_interface_to_string():
    assert interface_to_string("text") == "text"
    assert interface_to_string(3.0) == "3"


def test_concat():
    assert concat(1, "a", True) == "1atrue"


def test_to_strings():
    assert to_strings([1, None, "x"]) == ["1", "x"]
    assert to_strings(None) == []
    assert to_strings("abc") == ["abc"]
    assert to_strings(42) == ["42"]


def test_to_interfaces():
    assert to_interfaces("a", "b") == ["a", "b"]


def test_split_lines():
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("single") == ["single"]


def test_join_lines():
    assert join_lines(1, "b", None) == "1\nb\n<nil>"


def test_split2():
    assert split2("a=b=c", "=") == ("a", "b=c")
    assert split2("abc", "=") == ("abc", "")


def test_indent():
    assert indent("a\nb", "> ") == "> a\n> b"
    assert indent_n("a\nb", 2) == "  a\n  b"


def test_indent_unindent_round_trip():
    text = "first\n  second\nthird"
    assert unindent(indent(text, "    ")) == text


@dataclass
class Inner:
    x: int


@dataclass
class Sample:
    name: str
    count: int
    note: str
    inner: Inner | None = None


def test_pretty_print_struct():
    assert pretty_print_struct(Sample("Foo", 0, "line1\nline2")) == "name = Foo\nnote = line1 ...\n"


def test_pretty_print_struct_nested():
    result = pretty_print_struct(Sample("", 0, "", Inner(1)))
    assert result == "inner = \n    Inner(x=1)\n"