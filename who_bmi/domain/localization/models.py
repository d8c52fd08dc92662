"""
Localization domain models.

A locale bundle holds every user-facing string for one language:
category names, ranges and recommendations, error messages, unit labels.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from who_bmi.domain.bmi.models import BMICategory
from who_bmi.domain.shared.value_objects import Locale

NonEmptyStr = Annotated[str, Field(min_length=1)]


class CategoryText(BaseModel):
    """
    Localized text for one WHO category.

    Example:
        >>> text = CategoryText(
        ...     name="Normal Weight",
        ...     range="BMI 18.5 - 24.9",
        ...     recommendations=("Continue healthy lifestyle habits",),
        ... )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Category display name")
    range: str = Field(..., min_length=1, description="Display range")
    recommendations: tuple[str, ...] = Field(
        ..., min_length=1, description="Ordered health recommendations"
    )

    @field_validator("recommendations")
    @classmethod
    def no_blank_recommendations(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty or whitespace-only recommendations."""
        if any(not item.strip() for item in v):
            raise ValueError("Recommendations cannot be empty or whitespace")
        return v


class ErrorMessages(BaseModel):
    """Localized validation messages, one per error key."""

    model_config = ConfigDict(frozen=True)

    weight_positive: NonEmptyStr
    height_positive: NonEmptyStr
    height_unrealistic: NonEmptyStr
    weight_unrealistic: NonEmptyStr
    cm_positive: NonEmptyStr
    lbs_positive: NonEmptyStr

    def message_for(self, key: str) -> str:
        """
        Get message template by error key.

        Raises:
            KeyError: If ``key`` is not a known error key
        """
        if key not in type(self).model_fields:
            raise KeyError(key)
        return getattr(self, key)


class UnitLabels(BaseModel):
    """Localized unit labels."""

    model_config = ConfigDict(frozen=True)

    kg: NonEmptyStr
    m: NonEmptyStr
    cm: NonEmptyStr
    lbs: NonEmptyStr
    feet: NonEmptyStr
    inches: NonEmptyStr


class LocaleBundle(BaseModel):
    """
    All user-facing strings for one language.

    Every bundle must define all six WHO categories; the models above
    enforce the error and unit keys.

    Attributes:
        code: Locale this bundle belongs to
        categories: Text per WHO category
        errors: Validation messages
        units: Unit labels
    """

    model_config = ConfigDict(frozen=True)

    code: Locale
    categories: dict[BMICategory, CategoryText]
    errors: ErrorMessages
    units: UnitLabels

    @model_validator(mode="after")
    def all_categories_present(self) -> LocaleBundle:
        """Require text for every WHO category."""
        missing = [c.value for c in BMICategory if c not in self.categories]
        if missing:
            raise ValueError(
                f"Locale '{self.code.value}' is missing categories: {', '.join(missing)}"
            )
        return self

    def category(self, category: BMICategory) -> CategoryText:
        """Get localized text for ``category``."""
        return self.categories[BMICategory(category)]
