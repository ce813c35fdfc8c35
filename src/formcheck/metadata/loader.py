"""Load form definitions (rule tables) from YAML files."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from formcheck.validation.aggregator import FormValidator
from formcheck.validation.registry import RuleRegistry
from formcheck.validation.types import (
    ConfirmationRule,
    DuplicateFieldError,
    FieldRule,
    FormDefinitionError,
)

logger = logging.getLogger(__name__)

BUILTIN_FORMS_PATH = Path(__file__).parent / "forms"


class UnknownFormError(KeyError):
    """No form definition exists under the requested name."""


@dataclass
class FormDefinition:
    name: str
    display_name: str
    rules: list[FieldRule] = field(default_factory=list)
    confirmations: list[ConfirmationRule] = field(default_factory=list)
    source: Path | None = None

    def registry(self) -> RuleRegistry:
        return RuleRegistry.from_rules(self.rules)


class FormLoader:
    """Loads form definitions from ``*.yaml`` files in a directory."""

    def __init__(self, forms_path: Path):
        self.forms_path = forms_path
        self.forms: dict[str, FormDefinition] = {}

    def load_all(self) -> None:
        """Load every form definition in the directory."""
        if not self.forms_path.is_dir():
            logger.warning("Forms directory not found: %s", self.forms_path)
            return

        for yaml_file in sorted(self.forms_path.glob("*.yaml")):
            form = self.load_file(yaml_file)
            if form.name in self.forms:
                raise FormDefinitionError(
                    f"Form '{form.name}' is defined in both "
                    f"{self.forms[form.name].source} and {yaml_file}"
                )
            self.forms[form.name] = form
            logger.debug("Loaded form '%s' from %s", form.name, yaml_file)

    def load_file(self, yaml_file: Path) -> FormDefinition:
        """Load a single form definition file."""
        with open(yaml_file) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict) or "form" not in data:
            raise FormDefinitionError(f"{yaml_file} is not a form definition")
        form = self._resolve_form(data)
        form.source = yaml_file
        return form

    def _resolve_form(self, data: dict) -> FormDefinition:
        """Convert a parsed YAML document to a FormDefinition."""
        name = data["form"]
        rules = [self._resolve_field(f) for f in data.get("fields") or []]
        confirmations = [
            self._resolve_confirmation(c) for c in data.get("confirmations") or []
        ]

        form = FormDefinition(
            name=name,
            display_name=data.get("displayName", name),
            rules=rules,
            confirmations=confirmations,
        )

        # Fail at load time rather than on first submission
        build_validator(form)
        return form

    def _resolve_field(self, data: dict) -> FieldRule:
        """Convert a field dict to a FieldRule."""
        if "name" not in data:
            raise FormDefinitionError(f"Field definition has no name: {data!r}")
        name = data["name"]
        validation = data.get("validation") or {}

        return FieldRule(
            field=name,
            message=validation.get("message", f"{name} is invalid"),
            required=validation.get("required", False),
            min_length=self._get_int(validation, "minLength", name),
            max_length=self._get_int(validation, "maxLength", name),
            min=self._get_int(validation, "min", name),
            max=self._get_int(validation, "max", name),
            pattern=self._compile_pattern(validation.get("pattern"), name),
        )

    def _resolve_confirmation(self, data: dict) -> ConfirmationRule:
        """Convert a confirmation dict to a ConfirmationRule."""
        try:
            name, confirms = data["name"], data["confirms"]
        except KeyError as exc:
            raise FormDefinitionError(
                f"Confirmation definition is missing {exc}: {data!r}"
            ) from exc

        # ConfirmationRule rejects empty or non-string messages
        defaults = ConfirmationRule(field=name, confirms=confirms)
        return ConfirmationRule(
            field=name,
            confirms=confirms,
            required_message=data.get("requiredMessage", defaults.required_message),
            mismatch_message=data.get("mismatchMessage", defaults.mismatch_message),
        )

    def _get_int(self, data: dict[str, Any], key: str, field_name: str) -> int | None:
        value = data.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise FormDefinitionError(
                f"Field '{field_name}': {key} must be an integer, got {value!r}"
            )
        return value

    def _compile_pattern(self, pattern: str | None, field_name: str) -> re.Pattern[str] | None:
        if pattern is None:
            return None
        try:
            return re.compile(pattern)
        except re.error as exc:
            raise FormDefinitionError(
                f"Field '{field_name}' has an invalid pattern {pattern!r}: {exc}"
            ) from exc

    def get_form(self, name: str) -> FormDefinition:
        """Get a loaded form by name."""
        if name not in self.forms:
            raise UnknownFormError(
                f"Form '{name}' is not defined. "
                "Available forms: " + ", ".join(self.list_forms())
            )
        return self.forms[name]

    def list_forms(self) -> list[str]:
        return sorted(self.forms)


def build_validator(form: FormDefinition) -> FormValidator:
    """Build a FormValidator from a form definition.

    Raises:
        DuplicateFieldError: If a field or confirmation is declared twice
        FormDefinitionError: If a confirmation field also has a rule
    """
    try:
        return FormValidator(form.registry(), form.confirmations)
    except DuplicateFieldError as exc:
        raise DuplicateFieldError(f"Form '{form.name}': {exc}") from exc


def load_builtin_form(name: str) -> FormDefinition:
    """Load a form definition shipped with formcheck."""
    loader = FormLoader(BUILTIN_FORMS_PATH)
    loader.load_all()
    return loader.get_form(name)
