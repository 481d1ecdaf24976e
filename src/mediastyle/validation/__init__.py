from mediastyle.validation.validator import (
    ValidationError,
    severity_counts,
    validate,
    validate_or_raise,
)

__all__ = ["ValidationError", "severity_counts", "validate", "validate_or_raise"]
