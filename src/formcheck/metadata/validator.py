"""
metadata/validator.py — JSON Schema validation for formcheck form definitions.

Validates form definition YAML files against ``form.schema.json`` before
they are loaded, so typos such as ``minlength`` or ``requierd`` are reported
instead of silently ignored.

Usage:
    from formcheck.metadata.validator import validate_forms_dir, validate_form_file

    issues = validate_forms_dir(Path("forms"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------

_SCHEMAS_DIR = Path(__file__).parent / "schemas"

FORM_SCHEMA = "form.schema.json"


@dataclass
class ValidationIssue:
    """A single validation finding for a form definition file."""

    file: Path
    message: str
    path: str = ""          # JSON pointer path within the document, e.g. "fields[0]/validation"
    severity: str = "error" # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_schema(name: str) -> dict[str, Any]:
    schema_path = _SCHEMAS_DIR / name
    with schema_path.open() as fh:
        return json.load(fh)


def _load_registry() -> Registry:
    """Build a jsonschema Registry containing all formcheck schemas."""
    resources = []
    for name in ("_defs.schema.json", FORM_SCHEMA):
        schema = _load_schema(name)
        resources.append(
            (schema["$id"], Resource(contents=schema, specification=DRAFT202012))
        )
    return Registry().with_resources(resources)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _semantic_issues(yaml_path: Path, doc: dict[str, Any]) -> list[ValidationIssue]:
    """Checks JSON Schema cannot express: duplicates, regexes, confirm targets."""
    issues: list[ValidationIssue] = []
    seen: set[str] = set()

    for i, field_data in enumerate(doc.get("fields") or []):
        name = field_data.get("name")
        if name in seen:
            issues.append(ValidationIssue(
                file=yaml_path,
                message=f"Field '{name}' is declared more than once",
                path=f"fields[{i}]",
            ))
        seen.add(name)

        pattern = (field_data.get("validation") or {}).get("pattern")
        if pattern is not None:
            try:
                re.compile(pattern)
            except re.error as exc:
                issues.append(ValidationIssue(
                    file=yaml_path,
                    message=f"Invalid pattern {pattern!r}: {exc}",
                    path=f"fields[{i}]/validation/pattern",
                ))

        validation = field_data.get("validation") or {}
        if validation and "message" not in validation and not (
            set(validation) <= {"required"}
        ):
            issues.append(ValidationIssue(
                file=yaml_path,
                message=f"Field '{name}' has constraints but no message",
                path=f"fields[{i}]/validation",
                severity="warning",
            ))

    for i, confirmation in enumerate(doc.get("confirmations") or []):
        name = confirmation.get("name")
        if name in seen:
            issues.append(ValidationIssue(
                file=yaml_path,
                message=f"Confirmation field '{name}' is already declared",
                path=f"confirmations[{i}]",
            ))
        seen.add(name)
        if confirmation.get("confirms") not in {f.get("name") for f in doc.get("fields") or []}:
            issues.append(ValidationIssue(
                file=yaml_path,
                message=f"'{name}' confirms unknown field '{confirmation.get('confirms')}'",
                path=f"confirmations[{i}]/confirms",
                severity="warning",
            ))

    return issues


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_form_file(
    yaml_path: Path,
    *,
    registry: Registry | None = None,
) -> list[ValidationIssue]:
    """
    Validate a single form definition file.

    Args:
        yaml_path: Path to the YAML file to validate.
        registry:  Pre-built schema registry.  Built automatically if omitted.

    Returns:
        A list of :class:`ValidationIssue` objects (empty on success).
    """
    # 1. Parse YAML
    try:
        with yaml_path.open() as fh:
            doc = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        return [ValidationIssue(file=yaml_path, message=f"YAML parse error: {exc}")]

    if doc is None:
        return [
            ValidationIssue(file=yaml_path, message="File is empty or contains only whitespace")
        ]

    # 2. Load schema + registry
    if registry is None:
        registry = _load_registry()

    schema = _load_schema(FORM_SCHEMA)
    validator = Draft202012Validator(schema, registry=registry)

    # 3. Collect schema errors
    issues = [
        ValidationIssue(file=yaml_path, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(doc), key=lambda e: list(e.path))
    ]

    # 4. Semantic checks only make sense on a structurally valid document
    if not issues:
        issues.extend(_semantic_issues(yaml_path, doc))

    return issues


def validate_forms_dir(
    forms_dir: Path,
    *,
    strict: bool = False,
) -> list[ValidationIssue]:
    """
    Validate all ``*.yaml`` form definitions under *forms_dir*.

    Args:
        forms_dir: Directory holding form definition files.
        strict:    If ``True``, warnings are escalated to errors.

    Returns:
        A flat list of :class:`ValidationIssue` objects across all files.
        Empty list means all files are valid.
    """
    if not forms_dir.is_dir():
        return [
            ValidationIssue(
                file=forms_dir,
                message=f"Forms directory does not exist: {forms_dir}",
            )
        ]

    # Build registry once, shared across all file validations
    try:
        registry = _load_registry()
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        return [
            ValidationIssue(
                file=_SCHEMAS_DIR,
                message=f"Failed to load JSON Schema files: {exc}",
            )
        ]

    all_issues: list[ValidationIssue] = []

    for yaml_file in sorted(forms_dir.glob("*.yaml")):
        file_issues = validate_form_file(yaml_file, registry=registry)
        if strict:
            for issue in file_issues:
                if issue.severity == "warning":
                    issue.severity = "error"
        all_issues.extend(file_issues)

    logger.debug("Validated %s: %d issue(s)", forms_dir, len(all_issues))
    return all_issues
