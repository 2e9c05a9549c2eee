"""Shared render sequence for commands that produce a single report."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from codemedic_core.renderer import Renderer

logger = logging.getLogger(__name__)


async def execute_report_command(
    renderer: Renderer,
    *,
    title: str,
    analysis_description: str,
    analyze: Callable[[], Awaitable[Any]],
) -> int:
    """Drive the renderer through banner, header, wait and report.

    Args:
        renderer: Output capability supplied by the host.
        title: Section header text naming the report.
        analysis_description: Included in the wait message.
        analyze: Coroutine function producing the report.

    Returns:
        0 when the report was rendered, 1 when ``analyze`` raised. On failure
        the banner and header stay rendered and no report is emitted.
    """
    renderer.render_banner()
    renderer.render_section_header(title)

    try:
        report = await renderer.render_wait(f"Running {analysis_description}...", analyze)
    except Exception:
        logger.exception("%s failed", analysis_description)
        return 1

    renderer.render_report(report)
    return 0
