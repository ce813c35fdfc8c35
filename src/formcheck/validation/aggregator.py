"""Form aggregator.

Combines the field evaluator and the confirmation evaluator into a single
FormValidator that can check one field at a time (on input) or a whole
record at once (on submit).
"""

import logging
from collections.abc import Iterable

from formcheck.validation.cross_field import evaluate_confirmation
from formcheck.validation.evaluator import FieldEvaluator
from formcheck.validation.registry import RuleRegistry
from formcheck.validation.types import (
    ConfirmationRule,
    DuplicateFieldError,
    FormDefinitionError,
    FormRecord,
    SubmissionResult,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)


class FormValidator:
    """Validates single fields and whole records for one form.

    Confirmation fields are routed to the cross-field evaluator; every
    other field goes through the rule registry.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        confirmations: Iterable[ConfirmationRule] = (),
    ):
        self.registry = registry
        self.evaluator = FieldEvaluator(registry)
        self.confirmations: dict[str, ConfirmationRule] = {}

        for rule in confirmations:
            if rule.field in self.confirmations:
                raise DuplicateFieldError(
                    f"Confirmation field '{rule.field}' is declared more than once"
                )
            if registry.is_registered(rule.field):
                raise FormDefinitionError(
                    f"Field '{rule.field}' cannot be both a rule field and a confirmation"
                )
            self.confirmations[rule.field] = rule

    def fields(self) -> list[str]:
        """All evaluated fields, each confirmation placed after the field it confirms."""
        ordered: list[str] = []
        placed: set[str] = set()
        for field_id in self.registry.fields():
            ordered.append(field_id)
            for rule in self.confirmations.values():
                if rule.confirms == field_id:
                    ordered.append(rule.field)
                    placed.add(rule.field)
        ordered.extend(name for name in self.confirmations if name not in placed)
        return ordered

    def evaluate(
        self,
        field_id: str,
        raw_value: str | None,
        record: FormRecord | None = None,
    ) -> ValidationOutcome:
        """Evaluate one field.

        Args:
            field_id: Field identifier
            raw_value: The raw value exactly as entered
            record: Current values of the other fields; needed to resolve
                the primary value of a confirmation field

        Returns:
            The outcome for this field
        """
        confirmation = self.confirmations.get(field_id)
        if confirmation is not None:
            primary = (record or {}).get(confirmation.confirms)
            return evaluate_confirmation(primary, raw_value, confirmation)
        return self.evaluator.evaluate(field_id, raw_value)

    def submit(self, record: FormRecord) -> SubmissionResult:
        """Validate every field of a submitted record.

        All fields are evaluated, so a rejected record reports every failing
        field at once. Fields missing from the record are evaluated as empty;
        values for unregistered fields are ignored.
        """
        snapshot = dict(record)
        outcomes: dict[str, ValidationOutcome] = {}

        for field_id in self.fields():
            outcomes[field_id] = self.evaluate(field_id, snapshot.get(field_id), snapshot)

        result = SubmissionResult(
            accepted=all(outcome.is_valid for outcome in outcomes.values()),
            outcomes=outcomes,
        )

        logger.debug("Evaluated %d field(s); accepted=%s", len(outcomes), result.accepted)
        if not result.accepted:
            logger.info(
                "Submission rejected: %d invalid field(s): %s",
                len(result.errors()),
                ", ".join(result.errors()),
            )
        return result


def submit(
    registry: RuleRegistry,
    record: FormRecord,
    confirmations: Iterable[ConfirmationRule] = (),
) -> SubmissionResult:
    """Validate a whole record against a registry and confirmation rules."""
    return FormValidator(registry, confirmations).submit(record)
