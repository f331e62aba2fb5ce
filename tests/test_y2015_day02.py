import pytest

from adventpuzzles.y2015_day02 import (
    Present,
    parse_present,
    ribbon,
    solve,
    total_ribbon,
    total_wrapping_paper,
    wrapping_paper,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("1x2x3", Present(length=1, width=2, height=3)),
        ("1x1x10", Present(length=1, width=1, height=10)),
    ],
)
def test_parse_present(line, expected):
    assert parse_present(line) == expected


@pytest.mark.parametrize("line", ["1x2", "", "ax2x3"])
def test_parse_present_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_present(line)


@pytest.mark.parametrize(
    ("present", "expected"),
    [(Present(2, 3, 4), 58), (Present(1, 1, 10), 43)],
)
def test_wrapping_paper(present, expected):
    assert wrapping_paper(present) == expected


@pytest.mark.parametrize(
    ("present", "expected"),
    [(Present(2, 3, 4), 34), (Present(1, 1, 10), 14)],
)
def test_ribbon(present, expected):
    assert ribbon(present) == expected


def test_totals():
    lines = ["2x3x4", "1x1x10"]
    assert total_wrapping_paper(lines) == 58 + 43
    assert total_ribbon(lines) == 34 + 14


def test_solve_ignores_trailing_newline():
    assert solve("2x3x4\n1x1x10\n") == (101, 48)