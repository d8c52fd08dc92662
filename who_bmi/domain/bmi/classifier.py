"""WHO category lookup for a BMI value."""

from who_bmi.domain.bmi.models import WHO_BMI_THRESHOLDS, BMICategory, BMIThresholds


def classify(bmi: float, thresholds: BMIThresholds = WHO_BMI_THRESHOLDS) -> BMICategory:
    """Return the WHO category for ``bmi``.

    Scans the ascending upper bounds and returns the first category whose
    bound is strictly greater than ``bmi``. A value exactly on a bound
    therefore belongs to the category above it.

    Example:
        >>> classify(18.49)
        <BMICategory.UNDERWEIGHT: 'underweight'>
        >>> classify(18.5)
        <BMICategory.NORMAL_WEIGHT: 'normal_weight'>
    """
    for category, upper_bound in thresholds.upper_bounds():
        if bmi < upper_bound:
            return category
    # Only reachable for NaN
    return BMICategory.OBESE_CLASS_III
