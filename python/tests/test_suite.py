"""Suite reading — pairing boards with solution tokens."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.models.board import Position
from backend.models.suite import SuiteFormatError, load_suite, parse_suite

TWO_TESTS = """2
1 2 3
4 5 6
7 x 8

x 1 2
3 4 5
6 7 8
"""


def test_parse_pairs_boards_with_solutions() -> None:
    cases = parse_suite(TWO_TESTS, "r\nunsolvable\n")

    assert [c.number for c in cases] == [1, 2]
    assert cases[0].board.blank_pos == Position(1, 2)
    assert cases[0].solution == "r"
    assert not cases[0].claims_unsolvable
    assert cases[1].board.blank_pos == Position(0, 0)
    assert cases[1].claims_unsolvable


def test_tokens_may_share_lines() -> None:
    cases = parse_suite("1 1 2 3 4 5 6 7 x 8", "  r  ")
    assert cases[0].board.get(1, 2) == "x"
    assert cases[0].solution == "r"


def test_missing_solution_is_empty(caplog: pytest.LogCaptureFixture) -> None:
    cases = parse_suite(TWO_TESTS, "r")
    assert cases[1].solution == ""
    assert "missing solutions" in caplog.text


def test_extra_tokens_are_ignored() -> None:
    cases = parse_suite(TWO_TESTS + "1 2 3", "r u d")
    assert len(cases) == 2


def test_zero_tests() -> None:
    assert parse_suite("0", "") == []


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "empty"),
        ("two 1 2 3", "integer"),
        ("-1", "negative"),
    ],
)
def test_unreadable_count(text: str, message: str) -> None:
    with pytest.raises(SuiteFormatError, match=message):
        parse_suite(text, "")


def test_bad_board_fails_only_its_own_case(caplog: pytest.LogCaptureFixture) -> None:
    text = "3  1 2 3 4 5 6 7 x 8  1 1 3 4 5 6 7 8 x  x 1 2 3 4 5 6 7 8"
    cases = parse_suite(text, "r u unsolvable")

    assert [c.number for c in cases] == [1, 2, 3]
    assert cases[0].board is not None and cases[0].error is None
    assert cases[1].board is None
    assert "digits 1-8" in cases[1].error
    assert cases[1].solution == "u"
    assert cases[2].board is not None
    assert "Test #2" in caplog.text


def test_truncated_board_is_a_case_error() -> None:
    cases = parse_suite("2 1 2 3 4 5 6 7 x 8 1 2", "r r")

    assert cases[0].board is not None
    assert cases[1].board is None
    assert "found 2" in cases[1].error


def test_load_reads_both_files(tmp_path: Path) -> None:
    tests = tmp_path / "tests.in"
    solutions = tmp_path / "solutions.out"
    tests.write_text(TWO_TESTS)
    solutions.write_text("r\nunsolvable\n")

    cases = load_suite(tests, solutions)
    assert [c.solution for c in cases] == ["r", "unsolvable"]


def test_load_missing_file_raises_os_error(tmp_path: Path) -> None:
    tests = tmp_path / "tests.in"
    tests.write_text(TWO_TESTS)

    with pytest.raises(OSError):
        load_suite(tests, tmp_path / "nope.out")


def test_load_rejects_non_utf8_text(tmp_path: Path) -> None:
    tests = tmp_path / "tests.in"
    solutions = tmp_path / "solutions.out"
    tests.write_bytes(b"1\n1 2 3 4 5 6 7 \xff 8\n")
    solutions.write_text("r\n")

    with pytest.raises(SuiteFormatError, match="Not UTF-8"):
        load_suite(tests, solutions)


def test_load_rejects_non_utf8_solutions(tmp_path: Path) -> None:
    tests = tmp_path / "tests.in"
    solutions = tmp_path / "solutions.out"
    tests.write_text(TWO_TESTS)
    solutions.write_bytes(b"\xfe\xfer\n")

    with pytest.raises(SuiteFormatError, match="solutions.out"):
        load_suite(tests, solutions)
