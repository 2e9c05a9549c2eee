"""Index plugin commands by name for dispatch."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from codemedic_core.errors import DuplicateCommandError, DuplicatePluginError
from codemedic_core.plugin import AnalysisPlugin, CommandRegistration

logger = logging.getLogger(__name__)


async def initialize_plugins(plugins: Iterable[AnalysisPlugin]) -> list[AnalysisPlugin]:
    """Initialize each plugin, dropping the ones that fail.

    A failing plugin is logged and left out of the returned list; the
    remaining plugins still initialize.

    Returns:
        Plugins that initialized successfully, in input order.
    """
    ready: list[AnalysisPlugin] = []
    for plugin in plugins:
        try:
            await plugin.initialize()
        except Exception:
            logger.exception(
                "Failed to initialize plugin '%s'. It will be unavailable.",
                plugin.metadata.id,
            )
            continue
        ready.append(plugin)
    return ready


class CommandRegistry:
    """Registers plugins and routes command names to their registrations.

    Command names must be unique across every registered plugin.
    """

    def __init__(self) -> None:
        self._plugins: dict[str, AnalysisPlugin] = {}
        self._commands: dict[str, tuple[AnalysisPlugin, CommandRegistration]] = {}

    def register(self, plugin: AnalysisPlugin) -> None:
        """Register a plugin and all its commands.

        Nothing is registered if any of the plugin's commands conflicts.

        Raises:
            DuplicatePluginError: If the plugin id is already registered.
            DuplicateCommandError: If a command name is already taken, or the
                plugin declares the same name twice.
        """
        plugin_id = plugin.metadata.id
        if plugin_id in self._plugins:
            raise DuplicatePluginError(f"Plugin '{plugin_id}' is already registered")

        commands: dict[str, CommandRegistration] = {}
        for cmd in plugin.register_commands():
            if cmd.name in self._commands:
                existing_plugin = self._commands[cmd.name][0]
                raise DuplicateCommandError(cmd.name, plugin_id, existing_plugin.metadata.id)
            if cmd.name in commands:
                raise DuplicateCommandError(cmd.name, plugin_id, plugin_id)
            commands[cmd.name] = cmd

        self._plugins[plugin_id] = plugin
        for name, cmd in commands.items():
            self._commands[name] = (plugin, cmd)
            logger.debug("Registered command '%s' from plugin '%s'", name, plugin_id)

        logger.debug("Registered plugin '%s'", plugin_id)

    def get_command(self, name: str) -> Optional[CommandRegistration]:
        """Return the registration for ``name``, or None."""
        if name in self._commands:
            return self._commands[name][1]
        return None

    def get_plugin_for_command(self, name: str) -> Optional[AnalysisPlugin]:
        """Return the plugin that provides ``name``, or None."""
        if name in self._commands:
            return self._commands[name][0]
        return None

    def get_plugin(self, plugin_id: str) -> Optional[AnalysisPlugin]:
        return self._plugins.get(plugin_id)

    def list_commands(self) -> list[str]:
        return sorted(self._commands)

    def list_plugins(self) -> list[str]:
        return sorted(self._plugins)

    def get_all_commands(self) -> list[tuple[str, CommandRegistration, AnalysisPlugin]]:
        """Return (name, registration, plugin) tuples sorted by command name."""
        return [
            (name, cmd, plugin)
            for name, (plugin, cmd) in sorted(self._commands.items())
        ]
