"""Theme CLI command — show or toggle the persisted page theme."""

import click

from formcheck.ui.theme import ThemeStore


@click.command()
@click.option("--toggle", is_flag=True, default=False, help="Switch between light and dark.")
@click.pass_obj
def theme(config, toggle: bool):
    """Show the saved page theme."""
    store = ThemeStore(config.state_path)
    state = store.toggle() if toggle else store.load()
    click.echo(f"Theme: {state.theme.value} (button: {state.button_label})")
