"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

COMMAND_NAME = "litics_codegen"

# Options that change how the tool runs but not what it writes
OUTPUT_NEUTRAL_PARAMS = frozenset({"verbose", "error_if_exists"})


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Paths are reduced to their last component and options that do not
    change the generated files are left out, so the result does not
    depend on the machine or the way the generator is run.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    # Try to get current Click context for parameter values
    ctx = click.get_current_context(silent=True)
    if ctx is None or ctx.command is not click_command or not ctx.params:
        return COMMAND_NAME

    cli_args = ctx.params
    arguments = []  # For positional arguments
    options = []  # For optional arguments

    for param in click_command.params:
        if param.name not in cli_args or param.name in OUTPUT_NEUTRAL_PARAMS:
            continue

        value = cli_args[param.name]
        if value is None or value == () or value == "":
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(param, value))

        elif isinstance(param, click.Option):
            # Skip if it's the default value
            if value == param.default:
                continue

            # Get the primary option name (first in opts list)
            if param.is_flag:
                flag = param.opts[0] if value else (param.secondary_opts[0] if param.secondary_opts else None)
                if flag:
                    options.append(flag)
            else:
                flag = param.opts[0] if param.opts else f"--{param.name}"
                options.extend([flag, _format_value(param, value)])

    # Combine: command + arguments + options
    return " ".join([COMMAND_NAME, *arguments, *options])


def _format_value(param: click.Parameter, value) -> str:
    """Convert file paths to just their names for cleaner display."""
    if isinstance(param.type, click.Path):
        return Path(str(value)).name
    return str(value)
