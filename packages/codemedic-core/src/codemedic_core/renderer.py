"""Presentation contract consumed by command handlers."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Renderer(Protocol):
    """Output capability injected into every command handler.

    Handlers call these in a fixed order: banner, section header, wait,
    report. Concrete renderers live outside the core.
    """

    def render_banner(self) -> None:
        """Render the tool banner."""
        ...

    def render_section_header(self, text: str) -> None:
        """Render a header naming the report being produced."""
        ...

    async def render_wait(self, message: str, action: Callable[[], Awaitable[T]]) -> T:
        """Show ``message`` while awaiting ``action()`` and return its result.

        Exceptions raised by ``action`` propagate to the caller.
        """
        ...

    def render_report(self, report: Any) -> None:
        """Render the final report object."""
        ...
