"""Render validation outcomes into field display state."""

from dataclasses import dataclass
from enum import Enum

from formcheck.validation.types import ValidationOutcome


class FieldStatus(Enum):
    """CSS class applied to the input control."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FieldFeedback:
    """How one field should be displayed after an evaluation.

    Attributes:
        field: Field identifier
        status: Class for the input control
        error_text: Text of the "<field>Error" element
        error_visible: Whether the "<field>Error" element is shown
        success_visible: Whether the "<field>Success" element is shown
    """

    field: str
    status: FieldStatus
    error_text: str = ""
    error_visible: bool = False
    success_visible: bool = False

    @property
    def error_element_id(self) -> str:
        return f"{self.field}Error"

    @property
    def success_element_id(self) -> str:
        return f"{self.field}Success"


def present(field_id: str, outcome: ValidationOutcome) -> FieldFeedback:
    """Map an outcome to the display state of its field."""
    if outcome.is_valid:
        return FieldFeedback(
            field=field_id,
            status=FieldStatus.SUCCESS,
            success_visible=True,
        )
    return FieldFeedback(
        field=field_id,
        status=FieldStatus.ERROR,
        error_text=outcome.message,
        error_visible=True,
    )
