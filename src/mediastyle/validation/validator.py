"""Document validator: runs every rule over a document's raw layers."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from mediastyle.errors import MediaStyleError
from mediastyle.model.diagnostic import Diagnostic, Severity
from mediastyle.validation.rules import ALL_RULES, RuleFunc

logger = logging.getLogger("mediastyle.validation")


class ValidationError(MediaStyleError):
    """Raised when a document has ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def validate(
    layers: list[Any], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run the built-in rules, then *extra_rules*, against raw *layers*."""
    rules: list[RuleFunc] = [*ALL_RULES, *(extra_rules or [])]
    return [diag for rule in rules for diag in rule(layers)]


def severity_counts(diagnostics: list[Diagnostic]) -> dict[Severity, int]:
    """Count diagnostics per severity; every severity is present."""
    counts = Counter(d.severity for d in diagnostics)
    return {severity: counts.get(severity, 0) for severity in Severity}


def validate_or_raise(
    layers: list[Any], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Validate and raise :class:`ValidationError` on any ERROR diagnostic.

    Warnings and info are logged and returned.
    """
    diagnostics = validate(layers, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    for diag in diagnostics:
        logger.info("%s", diag)
    return diagnostics
