"""Cross-field evaluation for confirmation fields.

A confirmation field never goes through the rule registry: its validity
depends only on the value of the field it confirms.
"""

from formcheck.validation.types import ConfirmationRule, ValidationOutcome

DEFAULT_CONFIRMATION = ConfirmationRule(field="confirmPassword", confirms="password")


def evaluate_confirmation(
    primary_value: str | None,
    confirmation_value: str | None,
    rule: ConfirmationRule = DEFAULT_CONFIRMATION,
) -> ValidationOutcome:
    """Check that ``confirmation_value`` repeats ``primary_value`` exactly.

    Args:
        primary_value: Current value of the confirmed field
        confirmation_value: Current value of the confirmation field
        rule: Supplies the two failure messages

    Returns:
        Invalid with ``rule.required_message`` when the confirmation is empty,
        invalid with ``rule.mismatch_message`` when the values differ,
        valid otherwise.
    """
    if not confirmation_value:
        return ValidationOutcome.invalid(rule.required_message)
    if confirmation_value != primary_value:
        return ValidationOutcome.invalid(rule.mismatch_message)
    return ValidationOutcome.valid()
