"""CodeMedic CLI entry point.

Usage:
    codemedic                           Show help and list available commands
    codemedic <command> [args]          Run a command
    codemedic [-f FMT] [--verbose] <command> [args]
                                        Global options may precede the command
    codemedic <command> --help          Show command-specific help
    codemedic plugins                   List loaded plugins
    codemedic version                   Show CodeMedic and plugin versions
    codemedic --version                 Show version (short)
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Sequence

from codemedic_bom import create_plugin as create_bom_plugin
from codemedic_cli import __version__
from codemedic_cli.config import load_config
from codemedic_cli.renderers import FORMATS, UnknownFormatError, create_renderer
from codemedic_core.arguments import find_argument_value
from codemedic_core.dispatcher import CommandDispatcher
from codemedic_core.errors import CodeMedicError, UnknownCommandError
from codemedic_core.plugin import AnalysisPlugin, CommandArgument, CommandRegistration
from codemedic_core.registry import CommandRegistry, initialize_plugins
from codemedic_health import create_plugin as create_health_plugin

logger = logging.getLogger(__name__)

EXIT_USAGE = 2

FORMAT_ARGUMENT = CommandArgument(
    description="Output format",
    short_name="f",
    long_name="format",
    default_value="console",
    value_name="format",
)
VERBOSE_ARGUMENT = CommandArgument(
    description="Enable debug logging",
    long_name="verbose",
    has_value=False,
)


def builtin_plugins() -> list[AnalysisPlugin]:
    """Plugins shipped with CodeMedic, in help-listing order."""
    return [create_health_plugin(), create_bom_plugin()]


def _flag(argument: CommandArgument) -> str:
    names = []
    if argument.short_name:
        names.append(f"-{argument.short_name}")
    if argument.long_name:
        names.append(f"--{argument.long_name}")
    flag = ", ".join(names)
    if argument.has_value:
        flag += f" <{argument.value_name or 'value'}>"
    return flag


def format_argument_help(argument: CommandArgument) -> str:
    """One help line for a declared argument."""
    text = argument.description
    if argument.is_required:
        text += " (required)"
    elif argument.default_value:
        text += f" (default: {argument.default_value})"
    return f"  {_flag(argument):<28} {text}"


def show_help(registry: CommandRegistry) -> None:
    """Print help with available commands."""
    print(f"CodeMedic v{__version__} - repository health toolkit\n")
    print("Usage: codemedic <command> [options]\n")
    print("Available commands:")
    for name, command, _plugin in registry.get_all_commands():
        print(f"  {name:<20} {command.description}")
    print()
    print("Built-in commands:")
    print(f"  {'plugins':<20} List loaded plugins")
    print(f"  {'version':<20} Show CodeMedic and plugin versions")
    print()
    print("Global options:")
    print(format_argument_help(FORMAT_ARGUMENT) + f" [{', '.join(FORMATS)}]")
    print(format_argument_help(VERBOSE_ARGUMENT))
    print("  --version, -V                Show version (short)")
    print("  --help, -h                   Show this help")
    print()
    print("Use 'codemedic <command> --help' for command-specific options.")


def show_command_help(command: CommandRegistration) -> None:
    """Print arguments and examples for one command."""
    print(f"Usage: codemedic {command.name} [options]\n")
    print(command.description)
    if command.arguments:
        print("\nOptions:")
        for argument in command.arguments:
            print(format_argument_help(argument))
    if command.examples:
        print("\nExamples:")
        for example in command.examples:
            print(f"  {example}")


def _show_plugins(registry: CommandRegistry) -> None:
    for plugin_id in registry.list_plugins():
        metadata = registry.get_plugin(plugin_id).metadata
        print(f"{metadata.id:<20} {metadata.name}")
        print(f"  {metadata.description}")
        print(f"  Author: {metadata.author}")
        if metadata.tags:
            print(f"  Tags:   {', '.join(sorted(metadata.tags))}")


def _show_version(registry: CommandRegistry) -> None:
    print(f"CodeMedic v{__version__}")
    for plugin_id in registry.list_plugins():
        plugin = registry.get_plugin(plugin_id)
        version = getattr(plugin, "version", "unknown")
        print(f"  {plugin_id:<20} v{version}")


def split_global_options(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate global options that precede the command name.

    ``--verbose`` and ``-f/--format <value>`` may appear before the command.
    Returns the leading global options and the remaining tokens, whose first
    element (if any) is the command name.
    """
    format_flags = (f"-{FORMAT_ARGUMENT.short_name}", f"--{FORMAT_ARGUMENT.long_name}")
    verbose_flag = f"--{VERBOSE_ARGUMENT.long_name}"
    leading: list[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == verbose_flag:
            leading.append(token)
            index += 1
        elif token in format_flags and index + 1 < len(argv):
            leading.extend(argv[index:index + 2])
            index += 2
        else:
            break
    return leading, list(argv[index:])


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


async def run(argv: Sequence[str], plugins: list[AnalysisPlugin] | None = None) -> int:
    """Run the CLI and return the exit code.

    Args:
        argv: Arguments after the program name.
        plugins: Plugins to host. Defaults to builtin_plugins().
    """
    argv = list(argv)
    config = load_config()
    verbose = f"--{VERBOSE_ARGUMENT.long_name}" in argv
    _configure_logging(config["log_level"], verbose)

    candidates = plugins if plugins is not None else builtin_plugins()
    disabled = set(config["disabled_plugins"])
    for plugin in candidates:
        if plugin.metadata.id in disabled:
            logger.info("Plugin '%s' disabled by configuration", plugin.metadata.id)
    enabled = [p for p in candidates if p.metadata.id not in disabled]

    registry = CommandRegistry()
    try:
        for plugin in await initialize_plugins(enabled):
            registry.register(plugin)
    except CodeMedicError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    global_args, remaining = split_global_options(argv)
    if not remaining or remaining[0] in ("-h", "--help"):
        show_help(registry)
        return 0

    command_name = remaining[0]
    command_args = remaining[1:]

    if command_name in ("-V", "--version"):
        print(f"codemedic {__version__}")
        return 0
    if command_name == "version":
        _show_version(registry)
        return 0
    if command_name == "plugins":
        _show_plugins(registry)
        return 0

    command = registry.get_command(command_name)
    if command is not None and ("-h" in command_args or "--help" in command_args):
        show_command_help(command)
        return 0

    fmt = (
        find_argument_value(global_args, FORMAT_ARGUMENT)
        or find_argument_value(command_args, FORMAT_ARGUMENT)
        or config["format"]
    )
    try:
        renderer = create_renderer(fmt)
    except UnknownFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    dispatcher = CommandDispatcher(registry)
    try:
        return await dispatcher.dispatch(command_name, command_args, renderer)
    except UnknownCommandError as e:
        print(e)
        print()
        show_help(registry)
        return 1


def main() -> None:
    """Main entry point."""
    sys.exit(asyncio.run(run(sys.argv[1:])))


if __name__ == "__main__":
    main()
