"""Form controller: turns input, blur and submit events into engine calls.

The controller owns the current field values and the latest feedback for
each field. The engine itself never sees events; it only receives field
identifiers and raw values.
"""

import logging
from dataclasses import dataclass, field

from formcheck.ui.feedback import FieldFeedback, present
from formcheck.validation.aggregator import FormValidator
from formcheck.validation.types import SubmissionResult

logger = logging.getLogger(__name__)


@dataclass
class SubmitView:
    """What the page shows after a submit event."""

    result: SubmissionResult
    form_visible: bool
    success_visible: bool


@dataclass
class FormController:
    validator: FormValidator
    values: dict[str, str] = field(default_factory=dict)
    feedback: dict[str, FieldFeedback] = field(default_factory=dict)

    def on_input(self, field_id: str, value: str) -> FieldFeedback:
        """Store the new raw value and show its outcome."""
        self.values[field_id] = value
        outcome = self.validator.evaluate(field_id, value, self.values)
        self.feedback[field_id] = present(field_id, outcome)
        return self.feedback[field_id]

    def on_blur(self, field_id: str) -> FieldFeedback | None:
        """Re-evaluate a field when it loses focus, unless it is empty."""
        value = self.values.get(field_id, "")
        if not value:
            return self.feedback.get(field_id)
        return self.on_input(field_id, value)

    def on_submit(self) -> SubmitView:
        """Validate the whole form and refresh feedback for every field."""
        result = self.validator.submit(self.values)
        for field_id, outcome in result.outcomes.items():
            self.feedback[field_id] = present(field_id, outcome)

        if result.accepted:
            logger.info("Form accepted")
        return SubmitView(
            result=result,
            form_visible=not result.accepted,
            success_visible=result.accepted,
        )
