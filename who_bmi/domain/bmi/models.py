"""
BMI domain models.

WHO categories, the threshold table and the calculation result.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from who_bmi.domain.shared.value_objects import Locale


class BMICategory(str, Enum):
    """
    WHO adult BMI classification.

    Members are declared in ascending BMI order.
    """

    UNDERWEIGHT = "underweight"
    NORMAL_WEIGHT = "normal_weight"
    OVERWEIGHT = "overweight"
    OBESE_CLASS_I = "obese_class_i"
    OBESE_CLASS_II = "obese_class_ii"
    OBESE_CLASS_III = "obese_class_iii"


class BMIThresholds(BaseModel):
    """
    Exclusive upper bound of each WHO category.

    A BMI belongs to the first category whose bound is strictly
    greater than it, so a value sitting exactly on a bound belongs
    to the next category up.

    Example:
        >>> WHO_BMI_THRESHOLDS.normal_weight
        25.0
        >>> WHO_BMI_THRESHOLDS.obese_class_iii
        inf
    """

    model_config = ConfigDict(frozen=True)

    underweight: float = Field(18.5, description="Upper bound of underweight")
    normal_weight: float = Field(25.0, description="Upper bound of normal weight")
    overweight: float = Field(30.0, description="Upper bound of overweight")
    obese_class_i: float = Field(35.0, description="Upper bound of obese class I")
    obese_class_ii: float = Field(40.0, description="Upper bound of obese class II")
    obese_class_iii: float = Field(math.inf, description="Unbounded")

    @model_validator(mode="after")
    def strictly_increasing(self) -> BMIThresholds:
        """Bounds must increase strictly in category order."""
        bounds = [bound for _, bound in self.upper_bounds()]
        for lower, upper in zip(bounds, bounds[1:]):
            if not lower < upper:
                raise ValueError(f"Thresholds must be strictly increasing: {bounds}")
        return self

    def upper_bounds(self) -> list[tuple[BMICategory, float]]:
        """Return ``(category, upper bound)`` pairs in ascending order."""
        return [(category, getattr(self, category.value)) for category in BMICategory]


WHO_BMI_THRESHOLDS = BMIThresholds()


class BMIResult(BaseModel):
    """
    Outcome of a BMI calculation.

    Attributes:
        bmi: Body mass index rounded to 2 decimals
        category: WHO category
        category_name: Category name in the requested locale
        range: Display range of the category, e.g. "BMI 18.5 - 24.9"
        recommendations: Health recommendations in the requested locale
        locale: Locale that supplied the text

    Example:
        >>> result = calculate_bmi_simple(70, 1.75)
        >>> result.bmi, result.category_name
        (22.86, 'Normal Weight')
    """

    model_config = ConfigDict(frozen=True)

    bmi: float = Field(..., ge=0, description="Body mass index")
    category: BMICategory
    category_name: str = Field(..., min_length=1)
    range: str = Field(..., min_length=1)
    recommendations: tuple[str, ...] = Field(..., min_length=1)
    locale: Locale

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.model_dump(mode="json")
