"""
Tests for formcheck.metadata.validator

Covers:
  - validate_form_file()            — single-file validation (valid + invalid)
  - validate_forms_dir()            — directory walk (built-in forms pass)
  - validate_forms_dir(strict=True) — warnings escalate to errors
"""
from __future__ import annotations

from pathlib import Path

import yaml

from formcheck.metadata.loader import BUILTIN_FORMS_PATH
from formcheck.metadata.validator import (
    ValidationIssue,
    validate_form_file,
    validate_forms_dir,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write_yaml(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data))
    return path


def _write_raw(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def _minimal_form(**overrides) -> dict:
    data = {
        "form": "contact",
        "fields": [
            {
                "name": "email",
                "validation": {
                    "required": True,
                    "pattern": "[^@]+@[^@]+",
                    "message": "Invalid email",
                },
            }
        ],
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# validate_form_file
# ---------------------------------------------------------------------------


class TestValidateFormFile:
    def test_valid_form_has_no_issues(self, tmp_path):
        path = _write_yaml(tmp_path / "contact.yaml", _minimal_form())
        assert validate_form_file(path) == []

    def test_builtin_registration_is_valid(self):
        assert validate_form_file(BUILTIN_FORMS_PATH / "registration.yaml") == []

    def test_unknown_validation_key(self, tmp_path):
        data = _minimal_form()
        data["fields"][0]["validation"]["minlength"] = 2
        path = _write_yaml(tmp_path / "contact.yaml", data)

        issues = validate_form_file(path)

        assert len(issues) == 1
        assert issues[0].path == "fields[0]/validation"
        assert "minlength" in issues[0].message

    def test_unknown_top_level_key(self, tmp_path):
        path = _write_yaml(tmp_path / "contact.yaml", _minimal_form(entity="Contact"))
        issues = validate_form_file(path)
        assert any("entity" in i.message for i in issues)

    def test_missing_form_name(self, tmp_path):
        data = _minimal_form()
        del data["form"]
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert any("'form' is a required property" in i.message for i in issues)

    def test_wrong_bound_type(self, tmp_path):
        data = _minimal_form()
        data["fields"][0]["validation"]["min"] = "ten"
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert [i.path for i in issues] == ["fields[0]/validation/min"]

    def test_bad_identifier(self, tmp_path):
        data = _minimal_form()
        data["fields"][0]["name"] = "e-mail"
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert [i.path for i in issues] == ["fields[0]/name"]

    def test_duplicate_field(self, tmp_path):
        data = _minimal_form()
        data["fields"].append({"name": "email"})
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert len(issues) == 1
        assert "declared more than once" in issues[0].message
        assert issues[0].path == "fields[1]"

    def test_invalid_regex(self, tmp_path):
        data = _minimal_form()
        data["fields"][0]["validation"]["pattern"] = "[a-z"
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert len(issues) == 1
        assert issues[0].path == "fields[0]/validation/pattern"

    def test_missing_message_is_a_warning(self, tmp_path):
        data = _minimal_form()
        del data["fields"][0]["validation"]["message"]
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert [i.severity for i in issues] == ["warning"]

    def test_required_only_needs_no_message(self, tmp_path):
        data = _minimal_form()
        data["fields"][0]["validation"] = {"required": True}
        assert validate_form_file(_write_yaml(tmp_path / "contact.yaml", data)) == []

    def test_confirmation_of_unknown_field_is_a_warning(self, tmp_path):
        data = _minimal_form(confirmations=[{"name": "confirmPassword", "confirms": "password"}])
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert len(issues) == 1
        assert issues[0].severity == "warning"
        assert "unknown field 'password'" in issues[0].message

    def test_confirmation_reusing_field_name(self, tmp_path):
        data = _minimal_form(confirmations=[{"name": "email", "confirms": "email"}])
        issues = validate_form_file(_write_yaml(tmp_path / "contact.yaml", data))
        assert any(i.severity == "error" and "already declared" in i.message for i in issues)

    def test_empty_file(self, tmp_path):
        issues = validate_form_file(_write_raw(tmp_path / "empty.yaml", "   \n"))
        assert len(issues) == 1
        assert "empty" in issues[0].message

    def test_yaml_parse_error(self, tmp_path):
        issues = validate_form_file(_write_raw(tmp_path / "broken.yaml", "form: [unclosed\n"))
        assert len(issues) == 1
        assert "YAML parse error" in issues[0].message


# ---------------------------------------------------------------------------
# validate_forms_dir
# ---------------------------------------------------------------------------


class TestValidateFormsDir:
    def test_builtin_forms_pass(self):
        assert validate_forms_dir(BUILTIN_FORMS_PATH) == []

    def test_missing_directory(self, tmp_path):
        issues = validate_forms_dir(tmp_path / "missing")
        assert len(issues) == 1
        assert "does not exist" in issues[0].message

    def test_collects_issues_across_files(self, tmp_path):
        _write_yaml(tmp_path / "a.yaml", _minimal_form(form="a", extra=True))
        _write_yaml(tmp_path / "b.yaml", _minimal_form(form="b", extra=True))
        _write_yaml(tmp_path / "c.yaml", _minimal_form(form="c"))

        issues = validate_forms_dir(tmp_path)

        assert {i.file.name for i in issues} == {"a.yaml", "b.yaml"}

    def test_strict_escalates_warnings(self, tmp_path):
        data = _minimal_form()
        del data["fields"][0]["validation"]["message"]
        _write_yaml(tmp_path / "contact.yaml", data)

        assert [i.severity for i in validate_forms_dir(tmp_path)] == ["warning"]
        assert [i.severity for i in validate_forms_dir(tmp_path, strict=True)] == ["error"]


class TestValidationIssue:
    def test_str_with_path(self):
        issue = ValidationIssue(file=Path("forms/a.yaml"), message="bad", path="fields[0]")
        assert str(issue) == "[ERROR] forms/a.yaml at fields[0]: bad"

    def test_str_without_path(self):
        issue = ValidationIssue(file=Path("a.yaml"), message="bad", severity="warning")
        assert str(issue) == "[WARNING] a.yaml: bad"
