"""Domain layer: shared kernel, BMI and localization contexts."""
