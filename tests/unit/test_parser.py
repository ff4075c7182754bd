from __future__ import annotations

import pytest

from fizzbuzz_workflow.pipeline.parser import INT32_MAX, INT32_MIN, parse_number


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("15", 15),
        ("0", 0),
        ("-7", -7),
        ("+42", 42),
        ("007", 7),
        (" 12 ", 12),
        ("\t3\n", 3),
        ("2147483647", INT32_MAX),
        ("-2147483648", INT32_MIN),
    ],
)
def test_parse_number_accepts_integers(text: str, expected: int) -> None:
    assert parse_number(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "abc",
        "12abc",
        "1 2",
        "1_000",
        "3.0",
        "1e3",
        "0x10",
        "--1",
        "+",
        "١٢",  # Arabic-Indic digits
        "2147483648",
        "-2147483649",
        "99999999999999999999",
    ],
)
def test_parse_number_rejects_non_integers(text: str) -> None:
    assert parse_number(text) is None
