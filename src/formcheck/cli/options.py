"""Shared CLI options for choosing a form definition."""

from pathlib import Path

import click
import yaml

from formcheck.config import FormcheckConfig
from formcheck.metadata.loader import FormDefinition, FormLoader, UnknownFormError
from formcheck.validation.types import FormDefinitionError


def form_options(fn):
    """Add ``--form`` and ``--file`` to a command."""
    fn = click.option(
        "--file",
        "form_file",
        default=None,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Load the form definition from this YAML file.",
    )(fn)
    fn = click.option(
        "--form",
        "form_name",
        default=None,
        help="Name of the form to use (default: FORMCHECK_DEFAULT_FORM).",
    )(fn)
    return fn


def resolve_form(
    config: FormcheckConfig,
    form_name: str | None,
    form_file: Path | None,
) -> FormDefinition:
    """Load the requested form, exiting with status 1 on failure."""
    try:
        if form_file is not None:
            return FormLoader(form_file.parent).load_file(form_file)
        forms = config.load_forms()
        name = form_name or config.default_form
        if name not in forms:
            raise UnknownFormError(
                f"Form '{name}' is not defined. Available forms: "
                + ", ".join(sorted(forms))
            )
        return forms[name]
    except (FormDefinitionError, UnknownFormError, yaml.YAMLError) as e:
        message = e.args[0] if e.args else str(e)
        click.echo(click.style(f"Error: {message}", fg="red"), err=True)
        raise SystemExit(1)
