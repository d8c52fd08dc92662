"""
Domain exceptions.

Typed exceptions for explicit error handling.
Validation errors carry the localized message resolved when they are raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from who_bmi.domain.localization.models import LocaleBundle
    from who_bmi.domain.shared.value_objects import Locale


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class BMIValidationError(DomainError, ValueError):
    """
    Input validation failed.

    Each subclass names the key of its message template in the
    locale bundle's ``errors`` section.

    Attributes:
        key: Error template key (e.g. ``weight_positive``)
        locale: Locale the message was resolved in
        message: Localized, human-readable message

    Example:
        >>> bundle = get_locale("id")
        >>> raise InvalidWeightError.for_locale(bundle)
    """

    key: ClassVar[str] = ""

    def __init__(self, message: str, locale: Locale | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.locale = locale

    @classmethod
    def for_locale(cls, bundle: LocaleBundle) -> BMIValidationError:
        """Build the error with its message taken from ``bundle``."""
        return cls(bundle.errors.message_for(cls.key), locale=bundle.code)


class InvalidWeightError(BMIValidationError):
    """
    Weight is not a finite positive number.

    Example:
        >>> raise InvalidWeightError("Weight must be a positive number in kilograms")
    """

    key = "weight_positive"


class InvalidHeightError(BMIValidationError):
    """Height is not a finite positive number."""

    key = "height_positive"


class UnrealisticHeightError(BMIValidationError):
    """
    Height above 3 m.

    Almost always means the caller passed centimeters.
    """

    key = "height_unrealistic"


class UnrealisticWeightError(BMIValidationError):
    """Weight above 1000 kg."""

    key = "weight_unrealistic"


class InvalidCentimetersError(BMIValidationError):
    """Centimeter value passed to a converter is not a finite positive number."""

    key = "cm_positive"


class InvalidPoundsError(BMIValidationError):
    """Pound value passed to a converter is not a finite positive number."""

    key = "lbs_positive"


# ═══════════════════════════════════════════════════════════
# LOCALIZATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class LocalizationError(DomainError):
    """Base exception for locale lookups."""

    pass


class UnsupportedLocaleError(LocalizationError, ValueError):
    """
    Locale code is not one of the shipped bundles.

    Example:
        >>> raise UnsupportedLocaleError("fr", ["en", "id"])
        # Unsupported locale: fr. Supported locales: en, id
    """

    def __init__(self, code: object, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported locale: {code}. Supported locales: {', '.join(supported)}"
        )
        self.code = code
        self.supported = supported
