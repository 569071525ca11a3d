import pytest

from aocsolve.cli import main, solve

LISTS = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"
REPORTS = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9"
MEMORY1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
MEMORY2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
GRID = (
    "MMMSXXMASM\nMSAMXMSMSA\nAMXSXMAAMM\nMSAMASMSMX\nXMASAMXAMM\n"
    "XXAMMXXAMA\nSMSMSASXSS\nSAXAMASAAA\nMAMMMXMMMM\nMXMXAXMASX"
)


@pytest.mark.parametrize(
    "day, part, text, expected",
    [
        (1, 1, LISTS, "11"),
        (1, 2, LISTS, "31"),
        (2, 1, REPORTS, "2"),
        (2, 2, REPORTS, "4"),
        (3, 1, MEMORY1, "161"),
        (3, 2, MEMORY2, "48"),
        (4, 1, GRID, "18"),
        (4, 2, GRID, "9"),
    ],
)
def test_solve_examples(day, part, text, expected):
    assert solve(day, part, text) == expected


def test_solve_unknown_day():
    with pytest.raises(ValueError, match="no solution"):
        solve(25, 1, "")


def test_solve_unknown_part():
    with pytest.raises(ValueError, match="part must be"):
        solve(1, 3, LISTS)


def test_main_with_explicit_input(tmp_path, capsys):
    path = tmp_path / "lists.txt"
    path.write_text(LISTS)
    assert main(["1", "2", "--input", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "31"


def test_main_default_input_path(tmp_path, monkeypatch, capsys):
    (tmp_path / "day-02").mkdir()
    (tmp_path / "day-02" / "input1.txt").write_text(REPORTS)
    monkeypatch.chdir(tmp_path)
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2"


def test_main_reports_parse_failure(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("not numbers")
    assert main(["1", "1", "--input", str(path)]) == 1
    assert "process part 1" in capsys.readouterr().err


def test_main_rejects_unknown_day(capsys):
    with pytest.raises(SystemExit) as info:
        main(["9", "1"])
    assert info.value.code == 2