"""
Rebuilding the invoking command line for the outline header.
"""

from pathlib import Path

import click

COMMAND_NAME = "openapi_schema_reader"


def _display_value(value) -> str:
    """Existing files are shown by name so headers do not leak local directories."""
    text = str(value)
    if isinstance(value, (str, Path)) and Path(text).exists():
        return Path(text).name
    return text


def _option_tokens(option: click.Option, value) -> list[str]:
    if value == option.default:
        return []
    flag = option.opts[0] if option.opts else f"--{option.name}"
    if option.is_flag:
        return [flag]
    return [flag, _display_value(value)]


def reconstruct_command_line(click_command: click.Command | None = None) -> str:
    """
    Rebuild the command line of the current Click invocation.

    Positional arguments come first, in declaration order, followed by the
    options that differ from their defaults. Unset values are left out.

    Args:
        click_command: Command whose parameters are listed (defaults to the
            command of the current context)

    Returns:
        The command line, or just the command name outside of an invocation
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return COMMAND_NAME

    params = [p for p in (click_command or ctx.command).params if ctx.params.get(p.name)]
    positional = [_display_value(ctx.params[p.name]) for p in params if isinstance(p, click.Argument)]
    flags = [token for p in params if isinstance(p, click.Option) for token in _option_tokens(p, ctx.params[p.name])]
    return " ".join([COMMAND_NAME, *positional, *flags])
