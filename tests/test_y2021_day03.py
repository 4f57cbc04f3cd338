import pytest

from aockit.y2021.day03 import (
    co2_scrubber_rating,
    life_support_rating,
    oxygen_generator_rating,
    parse_report,
    power_consumption,
    to_number,
)

EXAMPLE = (
    "00100\n11110\n10110\n10111\n10101\n01111\n"
    "00111\n11100\n10000\n11001\n00010\n01010\n"
)


def test_to_number_extremes():
    assert to_number((0,) * 12) == 0
    assert to_number((1,) * 12) == 2**12 - 1


def test_to_number_leading_zeros_ignored():
    assert to_number((0, 0, 1, 1)) == to_number((1, 1))


def test_parse_report():
    assert parse_report("10110\n01001\n") == [(1, 0, 1, 1, 0), (0, 1, 0, 0, 1)]


def test_parse_report_uneven():
    with pytest.raises(ValueError):
        parse_report("101\n10\n")


def test_power_consumption_example():
    assert power_consumption(parse_report(EXAMPLE)) == 198


def test_oxygen_rating_example():
    assert oxygen_generator_rating(parse_report(EXAMPLE)) == 23


def test_co2_rating_example():
    assert co2_scrubber_rating(parse_report(EXAMPLE)) == 10


def test_life_support_is_product():
    rows = parse_report(EXAMPLE)
    assert life_support_rating(rows) == oxygen_generator_rating(rows) * co2_scrubber_rating(rows)


def test_ratings_are_rows_of_the_report():
    rows = parse_report(EXAMPLE)
    values = {to_number(row) for row in rows}
    assert oxygen_generator_rating(rows) in values
    assert co2_scrubber_rating(rows) in values


def test_single_row_power_uses_row_and_complement():
    rows = parse_report("110\n")
    assert power_consumption(rows) == to_number((1, 1, 0)) * to_number((0, 0, 1))


def test_power_consumption_empty():
    with pytest.raises(ValueError):
        power_consumption([])