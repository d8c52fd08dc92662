"""
Shared value objects.

Immutable domain primitives used across the BMI and localization contexts.
"""

from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """
    Display language for categories, recommendations and errors.

    Declaration order is the order reported by ``get_supported_locales``.

    Example:
        >>> Locale("id") is Locale.ID
        True
        >>> Locale.EN == "en"
        True
    """

    EN = "en"
    ID = "id"

    def __str__(self) -> str:
        """String representation."""
        return self.value


DEFAULT_LOCALE = Locale.EN
