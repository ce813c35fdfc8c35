"""formcheck CLI entry point."""

import click

from formcheck.config import FormcheckConfig


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """formcheck — declarative form validation CLI."""
    config = FormcheckConfig.from_env()
    config.configure_logging()
    ctx.obj = config


# Register subcommands
from formcheck.cli.check_cmd import check, submit  # noqa: E402
from formcheck.cli.forms_cmd import forms  # noqa: E402
from formcheck.cli.theme_cmd import theme  # noqa: E402

cli.add_command(check)
cli.add_command(submit)
cli.add_command(forms)
cli.add_command(theme)
