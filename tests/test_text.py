import pytest

from templdata.text import String


def test_to_title():
    assert String("Hello world").to_title() == "HELLO WORLD"


@pytest.mark.parametrize(
    "s, pos, accept, want, want_pos",
    [
        ("", 0, (), "", -1),
        ("A single character", 0, (), "A", 0),
        ("This a test", 0, (), "This", 0),
        ("This is a secode test", 3, (), "This", 0),
        ("Over", 20, (), "", -1),
        ("Find the second word", 5, (), "the", 5),
        ("Find the $third word", 10, (), "$third", 9),
        ("Find the ($a.value) word", 10, (".",), "$a.value", 10),
        ("Find the ($a.value[0]) word", 10, (".",), "$a.value", 10),
        ("Find the ($a.value[10]) word", 10, (".", "[]"), "$a.value[10]", 10),
        ("Match a space", 5, (), "", 5),
    ],
)
def test_get_word_at_position(s, pos, accept, want, want_pos):
    got, got_pos = String(s).get_word_at_position(pos, *accept)
    assert got == want
    assert got_pos == want_pos
    assert String(s).select_word(pos, *accept) == got


@pytest.mark.parametrize(
    "s, pos, left, right, want, want_pos",
    [
        ("", 0, "", "", "", -1),
        ("", 5, "", "", "", -1),
        ("Before ()", -1, "(", ")", "", -1),
        ("After ()", 100, "(", ")", "", -1),
        ("Function()", 9, "(", ")", "()", 8),
        ("A context (within parenthesis) should be returned", 15, "(", ")", "(within parenthesis)", 10),
        ("A context [[within double bracket]] should be returned", 15, "[[", "]]", "[[within double bracket]]", 10),
        ("A context [[from double bracket]] should be returned", 24, "[[", "", "[[from double b", 10),
        ("A context [[to double bracket]] should be returned", 22, "", "]]", "bracket]]", 22),
        ("A context (with (double level parenthesis))", 22, "(", ")", "(double level parenthesis)", 16),
        ("A context (with no bracket)", 19, "[", "]", "", -1),
        ("A context (with no enclosing context)", 15, "", "", " ", 15),
        ("A context (outside of context)", 1, "(", ")", "", -1),
        ("(context) after", 12, "(", ")", "", -1),
        ("Test (with (parenthesis inside) of the context)", 7, "(", ")", "(with (parenthesis inside) of the context)", 5),
        ("Test (with (parenthesis inside) unclosed", 7, "(", ")", "", -1),
        (
            "Test (with (parenthesis inside) (closed) many time)))",
            7, "(", ")", "(with (parenthesis inside) (closed) many time)", 5,
        ),
        ("Test (with ((((((a lot of non closed)", 7, "(", ")", "", -1),
        (
            "Test (with (several) (parenthesis (inside)) of the context) (excluded)",
            7, "(", ")", "(with (several) (parenthesis (inside)) of the context)", 5,
        ),
        ("Test | with same | left and | right", 7, "|", "|", "| with same |", 5),
        (
            "A context [[from [[double]] bracket]] [[with a little extra]]",
            12, "[[", "]]", "[[from [[double]] bracket]]", 10,
        ),
        ("A context [[from [[double]] bracket [[unclosed]]", 12, "[[", "]]", "", -1),
        (
            "A context [[from [[double]] bracket [[extra]] closed]] many times]]]]",
            12, "[[", "]]", "[[from [[double]] bracket [[extra]] closed]]", 10,
        ),
    ],
)
def test_get_context_at_position(s, pos, left, right, want, want_pos):
    got, got_pos = String(s).get_context_at_position(pos, left, right)
    assert got == want
    assert got_pos == want_pos
    assert String(s).select_context(pos, left, right) == got


@pytest.mark.parametrize(
    "source, want, want_array",
    [
        ("", "", []),
        ('"This is a string"', '"\u26600"', ['"This is a string"']),
        ('A test with a "single string"', 'A test with a "\u26600"', ['"single string"']),
        ("A test with `backtick string`", 'A test with "\u26600"', ["`backtick string`"]),
        ('Non closed "string', 'Non closed "string', []),
        (r'Non closed "with" escape "\"', 'Non closed "\u26600" escape "\\"', ['"with"']),
        (
            'This contains two "string1" and "string2"',
            'This contains two "\u26600" and "\u26601"',
            ['"string1"', '"string2"'],
        ),
        (
            'A mix of `backtick` and "regular" string',
            'A mix of "\u26600" and "\u26601" string',
            ["`backtick`", '"regular"'],
        ),
        (
            "A confused one of `backtick with \"` and \"regular with \\\" quoted and ` inside\" string",
            "A confused one of \"\u26600\" and \"\u26601\" string",
            ["`backtick with \"`", "\"regular with \\\" quoted and ` inside\""],
        ),
        (
            r'A string with "false \\\\\\" inside"',
            'A string with "\u26600" inside"',
            [r'"false \\\\\\"'],
        ),
        (
            r'A string with "true \\\\\\\" inside"',
            'A string with "\u26600"',
            [r'"true \\\\\\\" inside"'],
        ),
    ],
)
def test_protect_and_restore(source, want, want_array):
    got, array = String(source).protect()
    assert got == want
    assert list(array) == want_array
    assert got.restore_protected(array) == source


@pytest.mark.parametrize(
    "value, want",
    [
        ("", False),
        ("1", True),
        ("0", False),
        ("F", False),
        ("False", False),
        ("FALSE", False),
        ("No", False),
        ("N", False),
        ("T", True),
        ("true", True),
        ("on", True),
        ("OFF", False),
        ("Whatever", True),
        ("YES", True),
    ],
)
def test_parse_bool(value, want):
    assert String(value).parse_bool() is want


@pytest.mark.parametrize(
    "s, substr, want",
    [
        ("", "", []),
        ("aaa", "", []),
        ("", "aa", []),
        ("abaabaaa", "a", [0, 2, 3, 5, 6, 7]),
        ("abaabaaabaaaa", "aa", [2, 5, 9, 11]),
    ],
)
def test_index_all(s, substr, want):
    assert String(s).index_all(substr) == want


@pytest.mark.parametrize(
    "s, space, want",
    [
        ("", 0, "1 "),
        ("\n", 0, "1 \n2 "),
        ("Line 1\nLine 2\nLine 3\n", 0, "1 Line 1\n2 Line 2\n3 Line 3\n4 "),
        ("Line 1\nLine 2\nLine 3\n", 4, "   1 Line 1\n   2 Line 2\n   3 Line 3\n   4 "),
    ],
)
def test_add_line_number(s, space, want):
    assert String(s).add_line_number(space) == want


@pytest.mark.parametrize(
    "sep, n, want",
    [
        (",", -1, ["a", "b", "c"]),
        (",", 0, []),
        (",", 2, ["a", "b,c"]),
        ("", -1, ["a", ",", "b", ",", "c"]),
        ("", 2, ["a", ",b,c"]),
    ],
)
def test_split_n(sep, n, want):
    assert list(String("a,b,c").split_n(sep, n)) == want


def test_split_after_keeps_separator():
    assert list(String("a,b,c").split_after(",")) == ["a,", "b,", "c"]
    assert list(String("a,b,c").split_after_n(",", 2)) == ["a,", "b,c"]


def test_fields_id():
    assert list(String("$a.value[10] + b_c").fields_id()) == ["a", "value", "10", "b_c"]


def test_quote_and_escape():
    s = String('Hello "World"\n\t')
    assert s.quote() == '"Hello \\"World\\"\\n\\t"'
    assert s.escape() == 'Hello \\"World\\"\\n\\t'


def test_center_and_wrap():
    assert String("ab").center(6) == "  ab  "
    assert String("abc").center(2) == "abc"
    assert String("Lorem ipsum dolor sit amet,").wrap(11) == "Lorem ipsum\ndolor sit\namet,"


def test_replace_n():
    assert String("aaaa").replace_n("a", "b", 2) == "bbaa"
    assert String("aaaa").replace_n("a", "b", -1) == "bbbb"


def test_trim_functions():
    assert String("xxhixx").trim("x") == "hi"
    assert String("xxhixx").trim_left("x") == "hixx"
    assert String("xxhixx").trim_right("x") == "xxhi"
    assert String("123abc456").trim_func(str.isdigit) == "abc"
    assert String("123abc456").trim_left_func(str.isdigit) == "abc456"
    assert String("123abc456").trim_right_func(str.isdigit) == "123abc"
    assert String("prefix-body").trim_prefix("prefix-") == "body"
    assert String("body.txt").trim_suffix(".txt") == "body"


def test_indexes():
    s = String("hello world")
    assert s.index_any("ow") == 4
    assert s.last_index_any("ow") == 7
    assert s.index_any("z") == -1
    assert s.index_func(str.isspace) == 5
    assert s.last_index_func(lambda ch: ch == "o") == 7


def test_compare_and_fold():
    assert String("a").compare("b") == -1
    assert String("b").compare("a") == 1
    assert String("a").compare("a") == 0
    assert String("Go").equal_fold("GO") is True


def test_join_values_and_map():
    assert String(", ").join_values(1, "two", 3.5) == "1, two, 3.5"
    assert String("abc").map_runes(lambda ch: None if ch == "b" else ch.upper()) == "AC"


def test_repeat_negative_raises():
    assert String("ab").repeat(3) == "ababab"
    with pytest.raises(ValueError):
        String("ab").repeat(-1)


def test_indent_roundtrip():
    s = String("a\nb")
    indented = s.indent_n(2)
    assert indented == "  a\n  b"
    assert indented.unindent() == "a\nb"
    assert s.indent("> ") == "> a\n> b"


def test_title():
    assert String("hello big world").title() == "Hello Big World"