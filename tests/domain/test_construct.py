"""Tests for building hms values from components."""

import math

import pytest

from hms.domain.construct import check_args, from_seconds, hms
from hms.domain.errors import HmsTypeError, HmsValidationError
from hms.domain.value import Hms


class TestHms:
    def test_positional_order(self) -> None:
        assert hms(56, 34, 12) == Hms([12 * 3600 + 34 * 60 + 56])

    def test_no_arguments_is_empty(self) -> None:
        result = hms()
        assert isinstance(result, Hms)
        assert len(result) == 0

    def test_days(self) -> None:
        assert hms(days=1) == Hms([86400])

    def test_no_bounds_checking(self) -> None:
        assert hms(hours=25) == Hms([90000])
        assert hms(minutes=90) == Hms([5400])
        assert hms(seconds=-1) == Hms([-1])

    def test_gaps_between_units_allowed(self) -> None:
        assert hms(seconds=1, hours=1) == Hms([3601])

    def test_vectorized(self) -> None:
        assert hms(hours=[1, 2, 3]) == Hms([3600, 7200, 10800])

    def test_linearity(self) -> None:
        s, m, h, d = [1, 2], [3, 4], [5, 6], [0, 1]
        combined = hms(seconds=s, minutes=m, hours=h, days=d)
        expected = hms(
            seconds=[
                s[i] + 60 * m[i] + 3600 * h[i] + 86400 * d[i] for i in range(2)
            ]
        )
        assert combined == expected

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(HmsValidationError, match="same length"):
            hms(seconds=[1, 2], minutes=[1])

    def test_scalar_counts_as_length_one(self) -> None:
        with pytest.raises(HmsValidationError):
            hms(seconds=[1, 2], hours=1)

    def test_missing_entries(self) -> None:
        result = hms(seconds=[1, None], minutes=[1, 1])
        assert result.is_missing() == (False, True)
        assert result.seconds[0] == 61.0

    def test_negative_zero_preserved(self) -> None:
        assert math.copysign(1.0, hms(seconds=-0.0).seconds[0]) == -1.0

    def test_string_rejected(self) -> None:
        with pytest.raises(HmsTypeError, match="seconds"):
            hms(seconds="12")  # type: ignore[arg-type]

    def test_bool_entries_rejected(self) -> None:
        with pytest.raises(HmsTypeError):
            hms(seconds=[True])  # type: ignore[list-item]

    def test_empty_sequences(self) -> None:
        assert hms(seconds=[], minutes=[]) == Hms()


class TestCheckArgs:
    def test_equal_lengths_pass(self) -> None:
        check_args({"seconds": [1.0], "hours": [2.0]})

    def test_no_args_pass(self) -> None:
        check_args({})

    def test_mismatch_names_lengths(self) -> None:
        with pytest.raises(HmsValidationError, match="seconds=2, minutes=1"):
            check_args({"seconds": [1.0, 2.0], "minutes": [1.0]})


class TestFromSeconds:
    def test_scalar(self) -> None:
        assert from_seconds(3661) == Hms([3661])

    def test_sequence(self) -> None:
        assert from_seconds([1, 2.5]) == Hms([1, 2.5])

    def test_none_is_missing(self) -> None:
        assert from_seconds(None).is_missing() == (True,)

    def test_nan_is_missing(self) -> None:
        assert from_seconds(math.nan).is_missing() == (True,)
