"""BMIInput value object - validated metric measurements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from who_bmi.domain.bmi.validator import validate
from who_bmi.domain.localization.catalog import resolve_locale
from who_bmi.domain.shared.value_objects import Locale


@dataclass(frozen=True)
class BMIInput:
    """Measurements for one BMI calculation.

    Immutable value object. Construction resolves the locale and runs
    the validator, so every instance holds plausible metric values.

    Attributes:
        weight: Weight in kilograms (0-1000 kg, exclusive of 0)
        height: Height in meters (0-3 m, exclusive of 0)
        locale: Display locale; None means English. Strings are
            resolved to ``Locale``.
    """

    weight: float
    height: float
    locale: Optional[Union[Locale, str]] = None

    def __post_init__(self) -> None:
        """Resolve locale and validate measurements.

        Raises:
            UnsupportedLocaleError: If locale is unknown
            BMIValidationError: If weight or height is rejected
        """
        bundle = resolve_locale(self.locale)
        object.__setattr__(self, "locale", bundle.code)
        validate(self.weight, self.height, bundle.code)
