import pytest

from aocsolve.day01 import parse, part1, part2

SAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3"""


def test_part1_sample():
    assert part1(SAMPLE) == "11"


def test_part2_sample():
    assert part2(SAMPLE) == "31"


def test_parse_sample_columns():
    left, right = parse(SAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_parse_trailing_newline():
    assert parse("3 4\n") == ([3], [4])


def test_parse_tab_separator():
    assert parse("10\t20\n30 \t40") == ([10, 30], [20, 40])


def test_parse_stops_at_first_bad_line():
    assert parse("1 2\nfoo\n3 4") == ([1], [2])


def test_parse_stops_at_blank_line():
    assert parse("1 2\n\n3 4") == ([1], [2])


@pytest.mark.parametrize("text", ["", "abc", " 1 2", "12", "4294967296 1"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse(text)


def test_part1_rejects_empty():
    with pytest.raises(ValueError):
        part1("")


def test_part2_rejects_empty():
    with pytest.raises(ValueError):
        part2("")


def test_part2_missing_numbers_score_zero():
    assert part2("5 6\n7 8") == "0"