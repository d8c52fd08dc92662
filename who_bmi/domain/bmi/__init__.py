"""BMI calculation, WHO classification and unit conversion."""
