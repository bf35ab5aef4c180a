import pytest

from ccopy.extractor import CONTINUATION_PROMPT, PRIMARY_PROMPT, extract_commands, is_command_line

TRANSCRIPT = [
    "> a",
    ">  b",
    "> c ",
    "+ d",
    "+ +e",
    "+ f> ",
    ">g",
    " > h",
    "+i",
    " + j",
    "k",
    "l> ",
    "m + ",
    "[1] n",
    "Warning: o",
    '> "Error: p"',
]


def test_extract_commands_keeps_prompt_lines_and_strips_prompt() -> None:
    assert extract_commands(TRANSCRIPT) == ["a", " b", "c ", "d", "+e", "f> ", '"Error: p"']


def test_empty_input_returns_empty_list() -> None:
    assert extract_commands([]) == []


def test_continuation_lines_are_kept_in_order() -> None:
    assert extract_commands(["> x <- 1", "+ y <- 2"]) == ["x <- 1", "y <- 2"]


def test_text_without_prompt_is_dropped() -> None:
    assert extract_commands(["no prompt here"]) == []


def test_bare_prompt_yields_empty_command() -> None:
    assert extract_commands(["> ", "+ "]) == ["", ""]


def test_accepts_any_iterable() -> None:
    assert extract_commands(line for line in ["> 1", "[1] 1"]) == ["1"]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("> x", True),
        ("+ x", True),
        (">x", False),
        (" > x", False),
        ("\t+ x", False),
        (">", False),
        ("", False),
        ("x > y", False),
        (">\u00a0x", False),
    ],
)
def test_is_command_line_requires_exact_prefix_at_column_zero(line: str, expected: bool) -> None:
    assert is_command_line(line) is expected


def test_output_is_never_longer_than_input() -> None:
    for end in range(len(TRANSCRIPT) + 1):
        lines = TRANSCRIPT[:end]
        assert len(extract_commands(lines)) <= len(lines)


def test_every_command_maps_back_to_an_input_line_in_order() -> None:
    commands = extract_commands(TRANSCRIPT)
    position = 0
    for command in commands:
        candidates = {PRIMARY_PROMPT + command, CONTINUATION_PROMPT + command}
        while TRANSCRIPT[position] not in candidates:
            position += 1
        position += 1
    assert position <= len(TRANSCRIPT)


def test_second_pass_over_plain_commands_is_empty() -> None:
    commands = extract_commands(["> a <- 10", "> b <- 5", "> sum(a,", "+ b)", "[1] 15"])
    assert extract_commands(commands) == []


def test_marker_like_text_after_prompt_is_not_stripped_twice() -> None:
    assert extract_commands(["> > x", "+ + y"]) == ["> x", "+ y"]
