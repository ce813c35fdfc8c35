"""Core types for the formcheck validation engine.

This module defines the records shared by every layer of the engine:
- FieldRule: declarative constraints for one field
- ConfirmationRule: a field that must repeat another field's value
- ValidationOutcome: the verdict for one evaluation
- SubmissionResult: the verdict for a whole submitted record
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# A snapshot of raw user input, keyed by field identifier.
FormRecord = Mapping[str, str | None]


class FormDefinitionError(ValueError):
    """A form definition (rule table) is malformed."""


class DuplicateFieldError(FormDefinitionError):
    """The same field identifier was declared more than once."""


@dataclass(frozen=True)
class FieldRule:
    """Constraints for a single field.

    Attributes:
        field: Field identifier this rule applies to
        message: Message returned for any failure other than "required"
        required: Field must hold a non-blank value
        min_length: Minimum string length
        max_length: Maximum string length
        min: Minimum integer value (value is parsed before comparing)
        max: Maximum integer value
        pattern: Compiled regex the whole value must match
    """

    field: str
    message: str = ""
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    min: int | None = None
    max: int | None = None
    pattern: re.Pattern[str] | None = None

    @property
    def failure_message(self) -> str:
        return self.message or f"{self.field} is invalid"

    @property
    def has_numeric_bounds(self) -> bool:
        return self.min is not None or self.max is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
            "required": self.required,
            "minLength": self.min_length,
            "maxLength": self.max_length,
            "min": self.min,
            "max": self.max,
            "pattern": self.pattern.pattern if self.pattern else None,
        }


@dataclass(frozen=True)
class ConfirmationRule:
    """A field whose value must repeat the value of another field.

    Attributes:
        field: The confirmation field identifier (e.g. "confirmPassword")
        confirms: The primary field identifier (e.g. "password")
        required_message: Returned when the confirmation is empty
        mismatch_message: Returned when the two values differ
    """

    field: str
    confirms: str
    required_message: str = "Please confirm your password"
    mismatch_message: str = "Passwords do not match"

    def __post_init__(self) -> None:
        for key, message in (
            ("requiredMessage", self.required_message),
            ("mismatchMessage", self.mismatch_message),
        ):
            if not isinstance(message, str) or not message:
                raise FormDefinitionError(
                    f"Confirmation '{self.field}': {key} must be a non-empty string, "
                    f"got {message!r}"
                )


@dataclass(frozen=True)
class ValidationOutcome:
    """Verdict for one field evaluation.

    ``message`` is non-empty exactly when ``is_valid`` is False.
    """

    is_valid: bool
    message: str = ""

    def __post_init__(self) -> None:
        if self.is_valid and self.message:
            raise ValueError("A valid outcome cannot carry a message")
        if not self.is_valid and not self.message:
            raise ValueError("An invalid outcome must carry a message")

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationOutcome":
        return cls(is_valid=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        return {"isValid": self.is_valid, "message": self.message}


@dataclass
class SubmissionResult:
    """Result of submitting a whole record.

    Attributes:
        accepted: True only if every evaluated field is valid
        outcomes: Outcome for every evaluated field, in evaluation order
    """

    accepted: bool
    outcomes: dict[str, ValidationOutcome] = field(default_factory=dict)

    def errors(self) -> dict[str, str]:
        """Messages for the failing fields, keyed by field identifier."""
        return {
            name: outcome.message
            for name, outcome in self.outcomes.items()
            if not outcome.is_valid
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "accepted": self.accepted,
            "outcomes": {
                name: outcome.to_dict() for name, outcome in self.outcomes.items()
            },
        }
