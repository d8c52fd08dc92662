"""
BMI calculation.

BMI = weight (kg) / height (m)², rounded half-up to 2 decimals,
classified against the WHO thresholds and described in the
requested locale.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Union

from who_bmi.config import get_logger
from who_bmi.domain.bmi.classifier import classify
from who_bmi.domain.bmi.inputs import BMIInput
from who_bmi.domain.bmi.models import BMIResult
from who_bmi.domain.bmi.units import (
    cm_to_meters,
    feet_inches_to_meters,
    lbs_to_kg,
    round_half_up,
)
from who_bmi.domain.localization.catalog import get_locale
from who_bmi.domain.shared.value_objects import Locale

logger = get_logger(__name__)

LocaleArg = Optional[Union[Locale, str]]


def calculate_bmi(bmi_input: Union[BMIInput, Mapping[str, Any]]) -> BMIResult:
    """Calculate BMI and WHO category.

    Args:
        bmi_input: ``BMIInput``, or a mapping with ``weight``, ``height``
            and optional ``locale`` keys

    Returns:
        BMIResult with value, category and localized text

    Raises:
        BMIValidationError: If weight or height is rejected
        UnsupportedLocaleError: If locale is unknown

    Example:
        >>> result = calculate_bmi(BMIInput(weight=70, height=1.75))
        >>> result.bmi
        22.86
        >>> result.category
        <BMICategory.NORMAL_WEIGHT: 'normal_weight'>
        >>> calculate_bmi({"weight": 70, "height": 1.75, "locale": "id"}).category_name
        'Normal'
    """
    if not isinstance(bmi_input, BMIInput):
        bmi_input = BMIInput(**bmi_input)

    bundle = get_locale(bmi_input.locale)
    # A tiny height can square to 0.0; the BMI is then infinite
    height_squared = bmi_input.height * bmi_input.height
    raw = bmi_input.weight / height_squared if height_squared else math.inf
    bmi = round_half_up(raw)
    category = classify(bmi)
    text = bundle.category(category)

    logger.debug(
        "Calculated BMI",
        bmi=bmi,
        category=category.value,
        locale=bundle.code.value,
    )

    return BMIResult(
        bmi=bmi,
        category=category,
        category_name=text.name,
        range=text.range,
        recommendations=text.recommendations,
        locale=bundle.code,
    )


def calculate_bmi_simple(weight: float, height: float, locale: LocaleArg = None) -> BMIResult:
    """Calculate BMI from weight (kg) and height (m)."""
    return calculate_bmi(BMIInput(weight=weight, height=height, locale=locale))


def calculate_bmi_imperial(
    weight_lbs: float,
    height_feet: float,
    height_inches: float = 0,
    locale: LocaleArg = None,
) -> BMIResult:
    """Calculate BMI from pounds and feet/inches.

    Pounds are converted (and validated) first, then the combined
    height goes through the usual metric checks.

    Example:
        >>> calculate_bmi_imperial(154, 5, 9).bmi
        22.74
    """
    weight = lbs_to_kg(weight_lbs, locale)
    height = feet_inches_to_meters(height_feet, height_inches)
    return calculate_bmi_simple(weight, height, locale)


def calculate_bmi_from_cm(weight: float, height_cm: float, locale: LocaleArg = None) -> BMIResult:
    """Calculate BMI from weight (kg) and height (cm)."""
    return calculate_bmi_simple(weight, cm_to_meters(height_cm, locale), locale)
