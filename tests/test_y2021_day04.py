import pytest

from aockit.y2021.day04 import parse_card, parse_game, play

EXAMPLE = """7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1

22 13 17 11  0
 8  2 23  4 24
21  9 14 16  7
 6 10  3 18  5
 1 12 20 15 19

 3 15  0  2 22
 9 18 13 17  5
19  8  7 25 23
20 11 10 24  4
14 21 16 12  6

14 21 17 24  4
10 16 15  9 19
18  8 23 26 20
22 11 13  6  5
 2  0 12  3  7
"""


def test_example_first_winner():
    winners = play(EXAMPLE)
    assert winners[0] == (2, 4512)


def test_example_last_winner():
    winners = play(EXAMPLE)
    assert winners[-1].second == 1924


def test_every_card_wins_once():
    _, cards = parse_game(EXAMPLE)
    winners = play(EXAMPLE)
    assert sorted(w.first for w in winners) == list(range(len(cards)))


def test_parse_game_reads_numbers_and_cards():
    numbers, cards = parse_game(EXAMPLE)
    assert numbers[:3] == ["7", "4", "9"]
    assert cards[0].rows[1] == ["8", "2", "23", "4", "24"]


def test_row_bingo_scores_unmarked_sum():
    card = parse_card("1 2\n3 4")
    assert card.mark("1") is False
    assert card.mark("2") is True
    assert card.completed
    assert card.score == 2 * (3 + 4)


def test_column_bingo():
    card = parse_card("1 2\n3 4")
    card.mark("2")
    assert card.mark("4") is True
    assert card.has_bingo()
    assert card.score == 4 * (1 + 3)


def test_numbers_compare_as_text():
    card = parse_card("1 2\n3 4")
    card.mark("01")
    assert card.marked == set()


def test_ragged_card_rejected():
    with pytest.raises(ValueError):
        parse_card("1 2\n3")


def test_empty_card_rejected():
    with pytest.raises(ValueError):
        parse_card("\n\n")