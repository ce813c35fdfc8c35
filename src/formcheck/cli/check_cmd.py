"""Validation CLI commands — check one value, submit a record."""

import json
from pathlib import Path

import click
import yaml

from formcheck.cli.options import form_options, resolve_form
from formcheck.metadata.loader import build_validator
from formcheck.validation.types import ValidationOutcome


def _echo_outcome(field_id: str, outcome: ValidationOutcome) -> None:
    if outcome.is_valid:
        click.echo(click.style(f"  ✓ {field_id}", fg="green"))
    else:
        click.echo(click.style(f"  ✗ {field_id}: {outcome.message}", fg="red"))


def _load_record(path: Path) -> dict[str, str | None]:
    """Read a YAML/JSON mapping of field -> value.

    BaseLoader resolves no tags, so every scalar stays the string as
    written (``014`` is not octal, ``yes`` is not a bool). Nested values
    are rejected.
    """
    try:
        with path.open() as fh:
            data = yaml.load(fh, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Cannot parse {path}: {e}")

    if data is None or data == "":
        return {}
    if not isinstance(data, dict):
        raise click.ClickException(f"{path} must contain a mapping of field -> value")

    record: dict[str, str | None] = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise click.ClickException(f"Field '{key}' must be a single value")
        record[key] = value
    return record


@click.command()
@click.argument("field_id")
@click.argument("value")
@click.option(
    "--primary",
    default=None,
    help="Value of the confirmed field, when FIELD_ID is a confirmation field.",
)
@form_options
@click.pass_obj
def check(config, field_id: str, value: str, primary: str | None, form_name, form_file):
    """Validate VALUE for a single field."""
    form = resolve_form(config, form_name, form_file)
    validator = build_validator(form)

    if field_id not in validator.fields():
        click.echo(
            click.style(
                f"Warning: '{field_id}' has no rule in form '{form.name}'; "
                "it is always valid.",
                fg="yellow",
            ),
            err=True,
        )

    record: dict[str, str | None] = {field_id: value}
    confirmation = validator.confirmations.get(field_id)
    if confirmation is not None:
        record[confirmation.confirms] = primary

    outcome = validator.evaluate(field_id, value, record)
    _echo_outcome(field_id, outcome)
    if not outcome.is_valid:
        raise SystemExit(1)


@click.command()
@click.argument(
    "record_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
@form_options
@click.pass_obj
def submit(config, record_path: Path, as_json: bool, form_name, form_file):
    """Validate every field of the record in RECORD_PATH."""
    form = resolve_form(config, form_name, form_file)
    validator = build_validator(form)
    result = validator.submit(_load_record(record_path))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(f"Form '{form.name}':")
        for field_id, outcome in result.outcomes.items():
            _echo_outcome(field_id, outcome)

        if result.accepted:
            click.echo(click.style("\nSubmission accepted.", fg="green", bold=True))
        else:
            click.echo(
                click.style(
                    f"\nSubmission rejected: {len(result.errors())} invalid field(s).",
                    fg="red",
                    bold=True,
                )
            )

    if not result.accepted:
        raise SystemExit(1)
