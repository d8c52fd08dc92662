"""
Unit conversions to metric.

Imperial and centimeter inputs are normalized to kilograms and
meters before calculation.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from who_bmi.domain.bmi.validator import is_positive_number, reject
from who_bmi.domain.localization.catalog import resolve_locale
from who_bmi.domain.shared.errors import InvalidCentimetersError, InvalidPoundsError
from who_bmi.domain.shared.value_objects import Locale

KG_PER_LB = 0.453592
METERS_PER_INCH = 0.0254
INCHES_PER_FOOT = 12
CM_PER_METER = 100


def round_half_up(value: float, ndigits: int = 2) -> float:
    """Round ``value`` to ``ndigits`` decimals, ties away from zero for positives.

    Unlike the built-in ``round`` (ties to even), a value whose scaled
    form sits exactly on .5 rounds up.

    Example:
        >>> round(22.125, 2), round_half_up(22.125)
        (22.12, 22.13)
    """
    if not math.isfinite(value):
        return value
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def cm_to_meters(cm: float, locale: Optional[Union[Locale, str]] = None) -> float:
    """Convert centimeters to meters.

    Raises:
        InvalidCentimetersError: ``cm`` is not a finite positive number

    Example:
        >>> cm_to_meters(175)
        1.75
    """
    bundle = resolve_locale(locale)
    if not is_positive_number(cm):
        raise reject(InvalidCentimetersError, bundle, cm=cm)
    return cm / CM_PER_METER


def lbs_to_kg(lbs: float, locale: Optional[Union[Locale, str]] = None) -> float:
    """Convert pounds to kilograms, rounded to 2 decimals.

    Raises:
        InvalidPoundsError: ``lbs`` is not a finite positive number

    Example:
        >>> lbs_to_kg(154.32)
        70.0
    """
    bundle = resolve_locale(locale)
    if not is_positive_number(lbs):
        raise reject(InvalidPoundsError, bundle, lbs=lbs)
    return round_half_up(lbs * KG_PER_LB)


def feet_inches_to_meters(feet: float, inches: float = 0) -> float:
    """Convert feet plus inches to meters.

    No validation here; the height check in the calculator rejects
    non-positive or implausible totals.

    Example:
        >>> round(feet_inches_to_meters(5, 9), 4)
        1.7526
    """
    total_inches = feet * INCHES_PER_FOOT + inches
    return total_inches * METERS_PER_INCH
