"""Exceptions raised by the CodeMedic core."""

from __future__ import annotations


class CodeMedicError(Exception):
    """Base class for CodeMedic errors."""


class DuplicatePluginError(CodeMedicError, ValueError):
    """A plugin with the same id is already registered."""


class DuplicateCommandError(CodeMedicError, ValueError):
    """Two plugins contribute a command with the same name."""

    def __init__(self, command: str, plugin_id: str, existing_plugin_id: str) -> None:
        self.command = command
        self.plugin_id = plugin_id
        self.existing_plugin_id = existing_plugin_id
        super().__init__(
            f"Command '{command}' from plugin '{plugin_id}' "
            f"conflicts with existing command from plugin '{existing_plugin_id}'"
        )


class UnknownCommandError(CodeMedicError, KeyError):
    """No registered command matches the requested name."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(command)

    def __str__(self) -> str:
        return f"Unknown command: {self.command}"
