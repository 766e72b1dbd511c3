import pytest

from telehook.pattern import compile_pattern, is_exact_match, match


def test_exact_match_is_verbatim():
    assert is_exact_match("/start", "/start")
    assert not is_exact_match("/start ", "/start")
    assert not is_exact_match("/Start", "/start")


@pytest.mark.parametrize(
    "command, text, expected",
    [
        ("/greet %s", "/greet world", ["world"]),
        ("/n %d", "/n 42", ["42"]),
        ("/grade %c", "/grade A", ["A"]),
        ("/say %p", "/say hello there", ["hello there"]),
        ("/say %p", "/say ", [""]),
        ("/add %d %d", "/add 2 40", ["2", "40"]),
        ("/move %s to %s", "/move a.txt to b/", ["a.txt", "b/"]),
    ],
)
def test_match_extracts_params_as_strings(command, text, expected):
    assert match(text, command) == expected


@pytest.mark.parametrize(
    "command, text",
    [
        ("/greet %s", "/greet  "),
        ("/greet %s", "/greet one two"),
        ("/n %d", "/n abc"),
        ("/n %d", "/n -1"),
        ("/grade %c", "/grade AB"),
        ("/greet %s", ""),
        ("/n %d", "x/n 42"),
        ("/n %d", "/n 42 "),
        ("/n %d", "/n 42\n"),
    ],
)
def test_match_rejects(command, text):
    assert match(text, command) is None


def test_literal_regex_characters_are_escaped():
    assert match("/price 3", "/price? %d") is None
    assert match("/price? 3", "/price? %d") == ["3"]
    assert match("a+b=1", "a+b=%d") == ["1"]
    assert match("aab=1", "a+b=%d") is None
    assert match("(x) y", "(x) %s") == ["y"]


def test_compile_pattern_is_memoized():
    assert compile_pattern("/greet %s") is compile_pattern("/greet %s")


def test_digit_placeholder_is_ascii_only():
    assert match("/n ٤٢", "/n %d") is None
    assert match("/n ４２", "/n %d") is None
    assert match("/n 42", "/n %d") == ["42"]


def test_token_placeholders_accept_non_ascii_text():
    assert match("/greet мир", "/greet %s") == ["мир"]
    assert match("/grade ю", "/grade %c") == ["ю"]
