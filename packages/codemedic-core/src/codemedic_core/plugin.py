"""Plugin protocol and command model that all CodeMedic analysis modules use."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Awaitable,
    Callable,
    Iterable,
    Protocol,
    Sequence,
    runtime_checkable,
)

if TYPE_CHECKING:
    from codemedic_core.renderer import Renderer


CommandHandler = Callable[[Sequence[str], "Renderer"], Awaitable[int]]


@dataclass(frozen=True)
class CommandArgument:
    """Declares a command-line argument that a command accepts.

    Used by the host to build help text. The resolver never reads
    ``default_value``; it only describes the fallback to the user.

    Attributes:
        description: Help text.
        short_name: Short alias without the leading dash (e.g. "p" for "-p").
        long_name: Long alias without the leading dashes (e.g. "path" for "--path").
        is_required: Whether the argument must be provided.
        has_value: False for boolean switches that take no following value.
        default_value: Default shown in help text.
        value_name: Value label for help display (e.g. "path", "format").
    """

    description: str
    short_name: str | None = None
    long_name: str | None = None
    is_required: bool = False
    has_value: bool = True
    default_value: str | None = None
    value_name: str | None = None


@dataclass(frozen=True)
class CommandRegistration:
    """A CLI subcommand contributed by a plugin.

    Attributes:
        name: Command name as typed on the CLI (e.g. "health", "bom").
        description: One-line help text.
        handler: Coroutine function called with the raw argument vector and
                 a renderer. Returns the process exit code.
        examples: Example invocations, for help display only.
        arguments: Argument declarations, for help display.
    """

    name: str
    description: str
    handler: CommandHandler
    examples: tuple[str, ...] | None = None
    arguments: tuple[CommandArgument, ...] | None = None


@dataclass(frozen=True)
class PluginMetadata:
    """Static descriptive data for a plugin.

    Attributes:
        id: Globally unique dotted identifier (e.g. "codemedic.health").
        name: Display name.
        description: Longer description for listings.
        author: Plugin author.
        tags: Free-form tags for discovery. Order and duplicates are not
              meaningful, so they are stored as a frozenset.
    """

    id: str
    name: str
    description: str
    author: str
    tags: frozenset[str] = frozenset()

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        description: str,
        author: str,
        tags: Iterable[str] = (),
    ) -> PluginMetadata:
        """Build metadata from any iterable of tags."""
        return cls(
            id=id,
            name=name,
            description=description,
            author=author,
            tags=frozenset(tags),
        )


@runtime_checkable
class AnalysisPlugin(Protocol):
    """Protocol that every CodeMedic analysis plugin must implement.

    A plugin provides:
    - Metadata (id, name, description, author, tags)
    - A short analysis description used in progress messages
    - The commands it contributes to the CLI
    - An async initialize hook run once before dispatch

    Example implementation:

        class MyPlugin:
            metadata = PluginMetadata.create(
                id="acme.loc",
                name="Line Counter",
                description="Counts lines of code",
                author="Acme",
                tags=["metrics"],
            )
            analysis_description = "Line count analysis"

            def register_commands(self) -> list[CommandRegistration]:
                return [
                    CommandRegistration(
                        name="loc",
                        description="Count lines of code",
                        handler=self._run,
                        arguments=(TARGET_PATH_ARGUMENT,),
                    )
                ]

            async def initialize(self) -> None:
                pass

            async def _run(self, args, renderer) -> int:
                ...
    """

    metadata: PluginMetadata
    analysis_description: str

    def register_commands(self) -> list[CommandRegistration]:
        """Return the commands this plugin contributes.

        Must be deterministic: repeated calls return equal lists.
        """
        ...

    async def initialize(self) -> None:
        """Perform one-time setup.

        An exception here makes this plugin unavailable; it must not take
        down the host.
        """
        ...
