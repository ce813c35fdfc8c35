"""Form definition CLI commands — validate and show."""

from pathlib import Path

import click

from formcheck.cli.options import form_options, resolve_form
from formcheck.metadata.loader import BUILTIN_FORMS_PATH, FormLoader
from formcheck.metadata.validator import validate_form_file, validate_forms_dir
from formcheck.validation.types import FormDefinitionError


@click.group()
def forms():
    """Form definition commands."""
    pass


@forms.command()
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors.",
)
@click.option(
    "--path",
    "target_path",
    default=None,
    type=click.Path(exists=True, path_type=Path),
    help="Validate a single YAML file or directory instead of the configured forms.",
)
@click.pass_obj
def validate(config, strict: bool, target_path: Path | None):
    """Validate form definition YAML files against the JSON Schema."""
    if target_path is not None and target_path.is_file():
        forms_dir = target_path.parent
        schema_issues = validate_form_file(target_path)
        if strict:
            for issue in schema_issues:
                issue.severity = "error"
    else:
        forms_dir = target_path or config.forms_path or BUILTIN_FORMS_PATH
        schema_issues = validate_forms_dir(forms_dir, strict=strict)

    # ── Schema validation ───────────────────────────────────────────────────
    errors = [i for i in schema_issues if i.severity == "error"]
    warnings = [i for i in schema_issues if i.severity == "warning"]

    for issue in schema_issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} schema error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if warnings:
        click.echo(
            click.style(f"{len(warnings)} warning(s) found.", fg="yellow")
        )

    # ── Semantic (loader) validation ─────────────────────────────────────────
    loader = FormLoader(forms_dir)
    try:
        if target_path is not None and target_path.is_file():
            form = loader.load_file(target_path)
            loader.forms[form.name] = form
        else:
            loader.load_all()
    except FormDefinitionError as e:
        click.echo(click.style(f"\nSemantic validation failed: {e}", fg="red"), err=True)
        raise SystemExit(1)

    click.echo(f"\nLoaded {len(loader.forms)} form(s):")
    for name in loader.list_forms():
        form = loader.get_form(name)
        click.echo(
            f"  ✓ {name} ({len(form.rules)} fields, "
            f"{len(form.confirmations)} confirmation(s))"
        )

    click.echo(click.style("\nAll form definitions are valid.", fg="green", bold=True))


@forms.command()
@form_options
@click.pass_obj
def show(config, form_name, form_file):
    """List the rules of a form."""
    form = resolve_form(config, form_name, form_file)
    click.echo(f"{form.display_name} ({form.name})")

    for rule in form.rules:
        constraints = []
        if rule.required:
            constraints.append("required")
        if rule.min_length is not None:
            constraints.append(f"minLength={rule.min_length}")
        if rule.max_length is not None:
            constraints.append(f"maxLength={rule.max_length}")
        if rule.min is not None:
            constraints.append(f"min={rule.min}")
        if rule.max is not None:
            constraints.append(f"max={rule.max}")
        if rule.pattern is not None:
            constraints.append(f"pattern={rule.pattern.pattern}")
        click.echo(f"  {rule.field}: {', '.join(constraints) or 'optional'}")

    for confirmation in form.confirmations:
        click.echo(f"  {confirmation.field}: confirms {confirmation.confirms}")
