"""Resolve option values from a raw command-line token vector.

Handlers receive the argument vector untouched, so options can appear in any
order alongside flags owned by the host (``--format``) or other commands.
Matching is by prefix: any token that starts with ``-p`` counts as the short
path flag, including longer tokens such as ``-port``. Callers that need exact
flags must check for themselves.
"""

from __future__ import annotations

import os
from typing import Sequence

from codemedic_core.plugin import CommandArgument

TARGET_PATH_ARGUMENT = CommandArgument(
    description="Path to the repository to analyze",
    short_name="p",
    long_name="path",
    is_required=False,
    has_value=True,
    default_value="current directory",
    value_name="path",
)


def find_option_value(
    args: Sequence[str],
    short_name: str | None = None,
    long_name: str | None = None,
) -> str | None:
    """Return the token following the first matching flag.

    Args:
        args: Raw CLI tokens.
        short_name: Short alias without the dash (matches tokens starting with "-<short>").
        long_name: Long alias without the dashes (matches tokens starting with "--<long>").

    Returns:
        The value after the first matching flag, or None when no flag matches
        or the matching flag is the last token.
    """
    prefixes = []
    if short_name:
        prefixes.append(f"-{short_name}")
    if long_name:
        prefixes.append(f"--{long_name}")
    if not prefixes:
        return None

    for i, token in enumerate(args):
        if token.startswith(tuple(prefixes)) and i + 1 < len(args):
            return args[i + 1]
    return None


def find_argument_value(args: Sequence[str], argument: CommandArgument) -> str | None:
    """Resolve a declared CommandArgument. Switches never carry a value."""
    if not argument.has_value:
        return None
    return find_option_value(args, argument.short_name, argument.long_name)


def resolve_target_path(args: Sequence[str]) -> str:
    """Return the repository path given by -p/--path, or the current directory.

    The path is not validated.
    """
    path = find_argument_value(args, TARGET_PATH_ARGUMENT)
    return path if path is not None else os.getcwd()
