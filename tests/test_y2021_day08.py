import pytest

from aockit.y2021.day08 import (
    EIGHT,
    FIVE,
    FOUR,
    NINE,
    ONE,
    SEVEN,
    SIX,
    THREE,
    TWO,
    ZERO,
    DecoderError,
    SegmentDecoder,
    count_easy_digits,
    minus,
    parse_entries,
    slice_to_number,
    sum_outputs,
    to_digit,
)

SINGLE = "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf\n"

EXAMPLE = """\
be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe
edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc
fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg
fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb
aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea
fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb
dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe
bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef
egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb
gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce
"""

ALL_DIGITS = [ZERO, ONE, TWO, THREE, FOUR, FIVE, SIX, SEVEN, EIGHT, NINE]


@pytest.mark.parametrize("value, pattern", list(enumerate(ALL_DIGITS)))
def test_to_digit_of_canonical_patterns(value, pattern):
    assert to_digit(pattern) == value


def test_to_digit_of_unknown_pattern_is_ten():
    assert to_digit("abcdeg") == 10


def test_minus_removes_segments():
    result = minus(EIGHT, ONE)
    assert set(result) == set(EIGHT) - set(ONE)
    assert len(result) == len(EIGHT) - len(ONE)


def test_minus_removes_only_first_occurrence():
    assert minus("aab", "a") == "ab"


def test_slice_to_number_single_digit_and_ten():
    assert slice_to_number([7]) == 7
    assert slice_to_number([1, 0]) == 10
    assert slice_to_number([]) == 0


def test_encode_decode_round_trip():
    decoder = SegmentDecoder(dict(zip("abcdefg", "gfedcba")))
    for pattern in ALL_DIGITS:
        assert decoder.decode(decoder.encode(pattern)) == pattern


def test_parse_entries_sorts_signals_by_length_and_segments():
    (entry,) = parse_entries(SINGLE)
    signals, outputs = entry
    lengths = [len(signal) for signal in signals]
    assert lengths == sorted(lengths)
    assert all(signal == "".join(sorted(signal)) for signal in signals)
    assert all(output == "".join(sorted(output)) for output in outputs)
    assert len(signals) == len(ALL_DIGITS)


def test_parse_entries_rejects_missing_separator():
    with pytest.raises(ValueError):
        parse_entries("ab cd ef")


def test_trained_decoder_recovers_every_digit():
    (entry,) = parse_entries(SINGLE)
    decoder = SegmentDecoder()
    for signal in entry.first:
        decoder.train(signal)
    assert {to_digit(decoder.decode(signal)) for signal in entry.first} == set(range(10))


def test_sum_outputs_single_entry():
    assert sum_outputs(parse_entries(SINGLE)) == 5353


def test_count_easy_digits_example():
    assert count_easy_digits(parse_entries(EXAMPLE)) == 26


def test_train_eight_without_wiring_fails():
    with pytest.raises(DecoderError):
        SegmentDecoder().train(EIGHT)