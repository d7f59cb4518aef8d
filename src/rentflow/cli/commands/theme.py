"""Theme preference commands."""

import click
from rentflow.domain.preferences import PreferencesService


def _label(dark_mode: bool) -> str:
    return "dark" if dark_mode else "light"


@click.group()
def theme_group():
    """Show or switch the display theme."""
    pass


@theme_group.command("show")
@click.pass_context
def show_theme(ctx):
    """Show the current theme."""
    service = PreferencesService(ctx.obj["db"])
    click.echo(f"Theme: {_label(service.dark_mode)}")


@theme_group.command("toggle")
@click.pass_context
def toggle_theme(ctx):
    """Switch between light and dark theme."""
    service = PreferencesService(ctx.obj["db"])
    dark_mode = service.toggle_theme()
    click.echo(f"Theme set to {_label(dark_mode)}")


def register_commands(cli):
    """Register theme commands with main CLI."""
    cli.add_command(theme_group, name="theme")
