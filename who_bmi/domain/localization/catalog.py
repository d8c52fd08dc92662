"""
Locale catalog.

Static lookup from locale code to its bundle. Built once at import
and never modified.
"""

from __future__ import annotations

from typing import Optional, Union

from who_bmi.config import get_logger
from who_bmi.domain.localization.locales import EN, ID
from who_bmi.domain.localization.models import LocaleBundle
from who_bmi.domain.shared.errors import UnsupportedLocaleError
from who_bmi.domain.shared.value_objects import DEFAULT_LOCALE, Locale

logger = get_logger(__name__)

LOCALES: dict[Locale, LocaleBundle] = {
    Locale.EN: EN,
    Locale.ID: ID,
}

_SUPPORTED_CODES: tuple[str, ...] = tuple(locale.value for locale in Locale)


def get_locale(code: Union[Locale, str]) -> LocaleBundle:
    """Get the bundle for ``code``.

    Args:
        code: Locale code ("en" or "id")

    Returns:
        Locale bundle

    Raises:
        UnsupportedLocaleError: If ``code`` is not a supported locale

    Example:
        >>> get_locale("id").categories[BMICategory.NORMAL_WEIGHT].name
        'Normal'
    """
    if not is_locale_supported(code):
        logger.warning("Unsupported locale requested", code=code)
        raise UnsupportedLocaleError(code, list(_SUPPORTED_CODES))
    return LOCALES[Locale(code)]


def get_supported_locales() -> list[Locale]:
    """Return supported locales, English first."""
    return list(LOCALES)


def is_locale_supported(code: object) -> bool:
    """Check if ``code`` names a shipped locale. Never raises."""
    return isinstance(code, str) and code in _SUPPORTED_CODES


def resolve_locale(code: Optional[Union[Locale, str]] = None) -> LocaleBundle:
    """Get the bundle for ``code``, or the English bundle when ``code`` is None."""
    if code is None:
        return LOCALES[DEFAULT_LOCALE]
    return get_locale(code)
