"""Invoke a registered command handler and map its outcome to an exit code."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from codemedic_core.errors import UnknownCommandError
from codemedic_core.registry import CommandRegistry
from codemedic_core.renderer import Renderer

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_CANCELLED = 130


class CommandDispatcher:
    """Runs one command per invocation against a populated registry."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    async def dispatch(self, name: str, args: Sequence[str], renderer: Renderer) -> int:
        """Run the handler registered under ``name``.

        Args:
            name: Command name (e.g. "health").
            args: Argument vector following the command name, passed through as-is.
            renderer: Output capability handed to the handler.

        Returns:
            The handler's exit code; 1 if the handler raised, 130 if it was
            cancelled.

        Raises:
            UnknownCommandError: If no plugin registered ``name``.
        """
        command = self.registry.get_command(name)
        if command is None:
            raise UnknownCommandError(name)

        plugin = self.registry.get_plugin_for_command(name)
        logger.debug(
            "Dispatching '%s' to plugin '%s'", name, plugin.metadata.id if plugin else "?"
        )

        try:
            return await command.handler(list(args), renderer)
        except (KeyboardInterrupt, asyncio.CancelledError):
            logger.warning("Command '%s' cancelled", name)
            return EXIT_CANCELLED
        except Exception:
            logger.exception("Command '%s' failed", name)
            return EXIT_FAILURE
