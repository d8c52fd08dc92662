"""Sanity checks on raw weight and height before calculation."""

from __future__ import annotations

import math
from numbers import Real
from typing import Optional, Union

from who_bmi.config import get_logger
from who_bmi.domain.localization.catalog import resolve_locale
from who_bmi.domain.localization.models import LocaleBundle
from who_bmi.domain.shared.errors import (
    BMIValidationError,
    InvalidHeightError,
    InvalidWeightError,
    UnrealisticHeightError,
    UnrealisticWeightError,
)
from who_bmi.domain.shared.value_objects import Locale

logger = get_logger(__name__)

MAX_HEIGHT_M = 3.0
MAX_WEIGHT_KG = 1000.0


def is_positive_number(value: object) -> bool:
    """True for finite real numbers greater than zero. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


def reject(
    error_cls: type[BMIValidationError],
    bundle: LocaleBundle,
    **context: object,
) -> BMIValidationError:
    """Build a localized error and log the rejection."""
    logger.debug("Rejected BMI input", key=error_cls.key, locale=bundle.code.value, **context)
    return error_cls.for_locale(bundle)


def validate(
    weight: object,
    height: object,
    locale: Optional[Union[Locale, str]] = None,
) -> None:
    """Validate weight (kg) and height (m).

    Checks run in order and stop at the first failure:
    weight positive, height positive, height at most 3 m,
    weight at most 1000 kg.

    Args:
        weight: Weight in kilograms
        height: Height in meters
        locale: Locale for error messages (default English)

    Raises:
        InvalidWeightError: Weight not a finite positive number
        InvalidHeightError: Height not a finite positive number
        UnrealisticHeightError: Height above 3 m
        UnrealisticWeightError: Weight above 1000 kg
        UnsupportedLocaleError: Unknown locale
    """
    bundle = resolve_locale(locale)

    if not is_positive_number(weight):
        raise reject(InvalidWeightError, bundle, weight=weight)

    if not is_positive_number(height):
        raise reject(InvalidHeightError, bundle, height=height)

    # Values above 3 usually mean centimeters were passed
    if height > MAX_HEIGHT_M:  # type: ignore[operator]
        raise reject(UnrealisticHeightError, bundle, height=height)

    if weight > MAX_WEIGHT_KG:  # type: ignore[operator]
        raise reject(UnrealisticWeightError, bundle, weight=weight)
