"""Unit tests for unit conversion and rounding."""

import math

import pytest

from who_bmi.domain.bmi.units import (
    cm_to_meters,
    feet_inches_to_meters,
    lbs_to_kg,
    round_half_up,
)
from who_bmi.domain.shared.errors import InvalidCentimetersError, InvalidPoundsError


class TestRoundHalfUp:
    """Test round_half_up()."""

    def test_midpoint_rounds_up(self) -> None:
        """Exact .xx5 midpoint rounds up, unlike the built-in round."""
        assert round(22.125, 2) == 22.12
        assert round_half_up(22.125) == 22.13

    def test_below_midpoint(self) -> None:
        """Values below the midpoint round down."""
        assert round_half_up(22.857142857) == 22.86
        assert round_half_up(16.3265306) == 16.33
        assert round_half_up(41.5224913) == 41.52

    def test_ndigits(self) -> None:
        """Precision is configurable."""
        assert round_half_up(22.857142857, 1) == 22.9
        assert round_half_up(2.5, 0) == 3.0

    def test_non_finite_unchanged(self) -> None:
        """Infinity passes through; NaN stays NaN."""
        assert round_half_up(math.inf) == math.inf
        assert math.isnan(round_half_up(math.nan))


class TestCmToMeters:
    """Test cm_to_meters()."""

    @pytest.mark.parametrize("cm,meters", [(175, 1.75), (180, 1.8), (160, 1.6)])
    def test_convert(self, cm: float, meters: float) -> None:
        """Divides by 100 exactly."""
        assert cm_to_meters(cm) == meters

    def test_invalid(self, invalid_positive_number: object) -> None:
        """Rejects anything but a finite positive number."""
        with pytest.raises(
            InvalidCentimetersError, match="Height in centimeters must be a positive number"
        ):
            cm_to_meters(invalid_positive_number)  # type: ignore[arg-type]

    def test_invalid_localized(self) -> None:
        """Message follows the requested locale."""
        with pytest.raises(InvalidCentimetersError) as exc_info:
            cm_to_meters(-175, "id")

        assert str(exc_info.value) == "Tinggi badan dalam sentimeter harus berupa angka positif"


class TestLbsToKg:
    """Test lbs_to_kg()."""

    def test_convert(self) -> None:
        """Converts and rounds to 2 decimals."""
        assert lbs_to_kg(154.32) == pytest.approx(70.0)
        assert lbs_to_kg(220.46) == pytest.approx(100.0)
        assert lbs_to_kg(150) == 68.04

    def test_invalid(self, invalid_positive_number: object) -> None:
        """Rejects anything but a finite positive number."""
        with pytest.raises(InvalidPoundsError, match="Weight in pounds must be a positive number"):
            lbs_to_kg(invalid_positive_number)  # type: ignore[arg-type]

    def test_invalid_localized(self) -> None:
        """Message follows the requested locale."""
        with pytest.raises(InvalidPoundsError) as exc_info:
            lbs_to_kg(0, "id")

        assert str(exc_info.value) == "Berat badan dalam pound harus berupa angka positif"


class TestFeetInchesToMeters:
    """Test feet_inches_to_meters()."""

    def test_feet_and_inches(self) -> None:
        """5'9" is 69 inches."""
        assert feet_inches_to_meters(5, 9) == pytest.approx(1.7526)

    def test_feet_only(self) -> None:
        """Inches default to zero."""
        assert feet_inches_to_meters(6) == pytest.approx(1.8288)

    def test_no_validation(self) -> None:
        """Zero and negative totals pass through unchecked."""
        assert feet_inches_to_meters(0, 0) == 0
        assert feet_inches_to_meters(-1) < 0
