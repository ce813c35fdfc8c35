"""Field evaluator.

Applies a field's rule to its raw value. Checks run in a fixed order and
the first failing check decides the outcome:

1. required
2. empty optional fields are always valid
3. minLength / maxLength
4. min / max (value parsed as an integer)
5. pattern (must match the whole value)
"""

import logging
import re
from dataclasses import dataclass

from formcheck.validation.registry import RuleRegistry
from formcheck.validation.types import FieldRule, ValidationOutcome

logger = logging.getLogger(__name__)

# Leading integer: surrounding whitespace, optional sign, ASCII digits. Any
# trailing text is ignored ("13 years" -> 13).
LEADING_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def is_blank(value: str | None) -> bool:
    """Check if a raw value is considered empty."""
    return value is None or value.strip() == ""


def parse_leading_int(value: str) -> int | None:
    """Parse the integer at the start of ``value``, or None if there is none."""
    match = LEADING_INT_PATTERN.match(value)
    if match is None:
        return None
    return int(match.group(1))


def evaluate_rule(rule: FieldRule, raw_value: str | None) -> ValidationOutcome:
    """Evaluate one raw value against one rule."""
    if rule.required and is_blank(raw_value):
        return ValidationOutcome.invalid(f"{rule.field} is required")

    # Optional and empty: nothing else applies
    if raw_value is None or is_blank(raw_value):
        return ValidationOutcome.valid()

    if not _check_length(rule, raw_value):
        return ValidationOutcome.invalid(rule.failure_message)

    if rule.has_numeric_bounds and not _check_numeric_bounds(rule, raw_value):
        return ValidationOutcome.invalid(rule.failure_message)

    if rule.pattern is not None and rule.pattern.fullmatch(raw_value) is None:
        return ValidationOutcome.invalid(rule.failure_message)

    return ValidationOutcome.valid()


def _check_length(rule: FieldRule, value: str) -> bool:
    length = len(value)
    if rule.min_length is not None and length < rule.min_length:
        return False
    if rule.max_length is not None and length > rule.max_length:
        return False
    return True


def _check_numeric_bounds(rule: FieldRule, value: str) -> bool:
    number = parse_leading_int(value)
    if number is None:
        return False
    if rule.min is not None and number < rule.min:
        return False
    if rule.max is not None and number > rule.max:
        return False
    return True


@dataclass(frozen=True)
class FieldEvaluator:
    """Evaluates fields against the rules held in a registry."""

    registry: RuleRegistry

    def evaluate(self, field_id: str, raw_value: str | None) -> ValidationOutcome:
        """Evaluate the raw value of one field.

        Fields with no registered rule are always valid.
        """
        rule = self.registry.lookup(field_id)
        if rule is None:
            logger.debug("No rule registered for field '%s'; treating as valid", field_id)
            return ValidationOutcome.valid()
        return evaluate_rule(rule, raw_value)
