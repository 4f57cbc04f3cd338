import pytest

from aockit.y2021.day10 import (
    Chunk,
    autocomplete_score,
    brackets_match,
    matching_bracket,
    middle_autocomplete_score,
    parse_chunk,
    syntax_error_score,
)


def test_parse_chunk():
    length, _ = parse_chunk("[]")
    assert length == 2


def test_parse_incomplete_chunk():
    length, _ = parse_chunk("[")
    assert length == 1


def test_parse_chunk_structure():
    length, chunk = parse_chunk("([])")
    assert length == 4
    assert chunk == Chunk("(", ")", [Chunk("[", "]")])


def test_parse_chunk_not_opening():
    assert parse_chunk(")") == (0, None)
    assert parse_chunk("") == (0, None)


def test_parse_chunk_reads_only_first_chunk():
    length, chunk = parse_chunk("[]()")
    assert length == 2
    assert chunk.closing == "]"


@pytest.mark.parametrize("opening, closing", [("(", ")"), ("[", "]"), ("{", "}"), ("<", ">")])
def test_matching_bracket_both_ways(opening, closing):
    assert matching_bracket(opening) == closing
    assert matching_bracket(closing) == opening
    assert brackets_match(opening, closing)


def test_matching_bracket_unknown():
    assert matching_bracket("x") == " "
    assert not brackets_match("(", "]")


@pytest.mark.parametrize(
    "line, points",
    [
        ("(]", 57),
        ("{()()()>", 25137),
        ("(((()))}", 1197),
        ("<([]){()}[{}])", 3),
        ("{([(<{}[<>[]}>{[]{[(<()>", 1197),
        ("[({(<(())[]>[[{[]{<()<>>", 0),
    ],
)
def test_verify(line, points):
    _, chunk = parse_chunk(line)
    assert chunk.verify() == points


def test_complete():
    _, chunk = parse_chunk("[({(<(())[]>[[{[]{<()<>>")
    assert chunk.complete() == "}}]])})]"


def test_autocomplete_score():
    assert autocomplete_score("}}]])})]") == 288957
    assert autocomplete_score("])}>") == 294
    assert autocomplete_score("") == 0


def test_syntax_error_score_sums_lines():
    assert syntax_error_score(["(]", "{()()()>", "[]"]) == 57 + 25137


def test_syntax_error_score_rejects_bad_line():
    with pytest.raises(ValueError):
        syntax_error_score([")("])


def test_middle_autocomplete_score_skips_corrupted():
    assert middle_autocomplete_score(["(", "[", "{", "(]"]) == 2


def test_middle_autocomplete_score_without_incomplete_lines():
    with pytest.raises(ValueError):
        middle_autocomplete_score(["(]"])