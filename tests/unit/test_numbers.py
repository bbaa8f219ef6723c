from __future__ import annotations

import pytest

from src.helpers.numbers import format_int_to_thousands, format_num_to_thousands, zero_pad


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1234567", "1,234,567"),
        (1234567, "1,234,567"),
        ("123", "123"),
        ("1000", "1,000"),
        (1234.56, "1,234"),
        ("-1234567", "-1,234,567"),
        (1e16, "10,000,000,000,000,000"),
        (2e17, "200,000,000,000,000,000"),
        (1e-7, "0"),
        (-1.5e16, "-15,000,000,000,000,000"),
        (0, "0"),
        (None, "0"),
        ("", "0"),
    ],
)
def test_format_int_to_thousands(value: object, expected: str) -> None:
    assert format_int_to_thousands(value) == expected  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1234.5", "1,234.5"),
        ("1234", "1,234.00"),
        (1234, "1,234.00"),
        ("9876543.21", "9,876,543.21"),
        ("12.345", "12.345"),
        (2e17, "200,000,000,000,000,000.00"),
        (1e16, "10,000,000,000,000,000.00"),
        (1e-7, "0.0000001"),
        (1234.5, "1,234.5"),
        (None, "0.00"),
        (0, "0.00"),
    ],
)
def test_format_num_to_thousands(value: object, expected: str) -> None:
    assert format_num_to_thousands(value) == expected  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "00"), (7, "07"), ("9", "09"), (10, "10"), (31, "31"), ("12", "12")],
)
def test_zero_pad(value: object, expected: str) -> None:
    assert zero_pad(value) == expected  # type: ignore[arg-type]
