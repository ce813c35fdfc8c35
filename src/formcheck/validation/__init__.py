"""formcheck validation engine.

The engine is pure computation over field identifiers and raw string
values:
- RuleRegistry: read-only mapping of field -> FieldRule
- FieldEvaluator: checks one value against its field's rule
- evaluate_confirmation: checks a confirmation field against its primary
- FormValidator: evaluates every field of a record and decides accept/reject

Usage:
    from formcheck.metadata.loader import load_builtin_form, build_validator

    validator = build_validator(load_builtin_form("registration"))
    outcome = validator.evaluate("email", "a@b.co")
    result = validator.submit({"fullName": "John Doe", ...})
"""

from formcheck.validation.aggregator import FormValidator, submit
from formcheck.validation.cross_field import evaluate_confirmation
from formcheck.validation.evaluator import (
    FieldEvaluator,
    evaluate_rule,
    is_blank,
    parse_leading_int,
)
from formcheck.validation.registry import RuleRegistry
from formcheck.validation.types import (
    ConfirmationRule,
    DuplicateFieldError,
    FieldRule,
    FormDefinitionError,
    FormRecord,
    SubmissionResult,
    ValidationOutcome,
)

__all__ = [
    # Types
    "ConfirmationRule",
    "DuplicateFieldError",
    "FieldRule",
    "FormDefinitionError",
    "FormRecord",
    "SubmissionResult",
    "ValidationOutcome",
    # Registry
    "RuleRegistry",
    # Evaluators
    "FieldEvaluator",
    "evaluate_confirmation",
    "evaluate_rule",
    "is_blank",
    "parse_leading_int",
    # Aggregator
    "FormValidator",
    "submit",
]
