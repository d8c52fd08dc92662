"""
WHO BMI calculator.

Computes Body Mass Index from metric or imperial measurements,
classifies it into a WHO category and returns localized names,
ranges and health recommendations (English and Indonesian).

Structure:
- domain/shared/: value objects and exceptions
- domain/localization/: locale bundles and lookup
- domain/bmi/: thresholds, validation, classification, conversion, calculation
- config.py: logging configuration
- tests/: unit test suite
"""

import logging

from who_bmi.config import configure_logging
from who_bmi.domain.bmi.calculator import (
    calculate_bmi,
    calculate_bmi_from_cm,
    calculate_bmi_imperial,
    calculate_bmi_simple,
)
from who_bmi.domain.bmi.classifier import classify
from who_bmi.domain.bmi.inputs import BMIInput
from who_bmi.domain.bmi.models import (
    WHO_BMI_THRESHOLDS,
    BMICategory,
    BMIResult,
    BMIThresholds,
)
from who_bmi.domain.bmi.units import (
    cm_to_meters,
    feet_inches_to_meters,
    lbs_to_kg,
    round_half_up,
)
from who_bmi.domain.bmi.validator import validate
from who_bmi.domain.localization.catalog import (
    get_locale,
    get_supported_locales,
    is_locale_supported,
)
from who_bmi.domain.localization.models import LocaleBundle
from who_bmi.domain.shared.errors import (
    BMIValidationError,
    DomainError,
    InvalidCentimetersError,
    InvalidHeightError,
    InvalidPoundsError,
    InvalidWeightError,
    LocalizationError,
    UnrealisticHeightError,
    UnrealisticWeightError,
    UnsupportedLocaleError,
)
from who_bmi.domain.shared.value_objects import DEFAULT_LOCALE, Locale

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "calculate_bmi",
    "calculate_bmi_simple",
    "calculate_bmi_imperial",
    "calculate_bmi_from_cm",
    "cm_to_meters",
    "lbs_to_kg",
    "feet_inches_to_meters",
    "round_half_up",
    "classify",
    "validate",
    "get_locale",
    "get_supported_locales",
    "is_locale_supported",
    "WHO_BMI_THRESHOLDS",
    "BMICategory",
    "BMIThresholds",
    "BMIInput",
    "BMIResult",
    "Locale",
    "DEFAULT_LOCALE",
    "LocaleBundle",
    "DomainError",
    "BMIValidationError",
    "InvalidWeightError",
    "InvalidHeightError",
    "UnrealisticHeightError",
    "UnrealisticWeightError",
    "InvalidCentimetersError",
    "InvalidPoundsError",
    "LocalizationError",
    "UnsupportedLocaleError",
    "configure_logging",
    "__version__",
]
