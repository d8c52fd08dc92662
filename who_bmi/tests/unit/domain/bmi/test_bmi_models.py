"""
Unit tests for BMI domain models.
"""

import math

import pytest

from who_bmi.domain.bmi.models import (
    WHO_BMI_THRESHOLDS,
    BMICategory,
    BMIResult,
    BMIThresholds,
)
from who_bmi.domain.shared.value_objects import Locale


class TestBMICategory:
    """Test BMICategory enum."""

    def test_values_in_ascending_order(self) -> None:
        """Members are declared from lowest to highest BMI."""
        assert [c.value for c in BMICategory] == [
            "underweight",
            "normal_weight",
            "overweight",
            "obese_class_i",
            "obese_class_ii",
            "obese_class_iii",
        ]

    def test_compares_to_string(self) -> None:
        """Members equal their string value."""
        assert BMICategory.NORMAL_WEIGHT == "normal_weight"
        assert BMICategory("obese_class_ii") is BMICategory.OBESE_CLASS_II


class TestWHOThresholds:
    """Test the WHO threshold table."""

    def test_values(self) -> None:
        """Should hold the WHO cutoffs."""
        assert WHO_BMI_THRESHOLDS.underweight == 18.5
        assert WHO_BMI_THRESHOLDS.normal_weight == 25.0
        assert WHO_BMI_THRESHOLDS.overweight == 30.0
        assert WHO_BMI_THRESHOLDS.obese_class_i == 35.0
        assert WHO_BMI_THRESHOLDS.obese_class_ii == 40.0
        assert WHO_BMI_THRESHOLDS.obese_class_iii == math.inf

    def test_upper_bounds_order(self) -> None:
        """Pairs follow category order and increase strictly."""
        pairs = WHO_BMI_THRESHOLDS.upper_bounds()

        assert [category for category, _ in pairs] == list(BMICategory)
        bounds = [bound for _, bound in pairs]
        assert bounds == sorted(bounds)
        assert len(set(bounds)) == len(bounds)

    def test_immutable(self) -> None:
        """Should be immutable."""
        with pytest.raises(Exception):
            WHO_BMI_THRESHOLDS.underweight = 20.0  # noqa: SLF001

    def test_reject_non_increasing(self) -> None:
        """Should reject bounds that do not increase strictly."""
        with pytest.raises(ValueError, match="strictly increasing"):
            BMIThresholds(overweight=25.0)

    def test_custom_table_allowed_when_increasing(self) -> None:
        """Other increasing tables validate."""
        table = BMIThresholds(overweight=27.5)
        assert table.overweight == 27.5


class TestBMIResult:
    """Test BMIResult model."""

    def make_result(self) -> BMIResult:
        return BMIResult(
            bmi=22.86,
            category=BMICategory.NORMAL_WEIGHT,
            category_name="Normal Weight",
            range="BMI 18.5 - 24.9",
            recommendations=("Continue healthy lifestyle habits",),
            locale=Locale.EN,
        )

    def test_immutable(self) -> None:
        """Should be immutable."""
        result = self.make_result()
        with pytest.raises(Exception):
            result.bmi = 30.0  # noqa: SLF001

    def test_to_dict(self) -> None:
        """Should serialize to plain values."""
        data = self.make_result().to_dict()

        assert data == {
            "bmi": 22.86,
            "category": "normal_weight",
            "category_name": "Normal Weight",
            "range": "BMI 18.5 - 24.9",
            "recommendations": ["Continue healthy lifestyle habits"],
            "locale": "en",
        }

    def test_reject_empty_recommendations(self) -> None:
        """Should require at least one recommendation."""
        with pytest.raises(ValueError):
            BMIResult(
                bmi=22.86,
                category=BMICategory.NORMAL_WEIGHT,
                category_name="Normal Weight",
                range="BMI 18.5 - 24.9",
                recommendations=(),
                locale=Locale.EN,
            )
