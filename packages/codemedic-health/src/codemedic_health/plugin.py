"""AnalysisPlugin implementation for the repository health dashboard."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from codemedic_core.arguments import TARGET_PATH_ARGUMENT, resolve_target_path
from codemedic_core.execution import execute_report_command
from codemedic_core.plugin import CommandRegistration, PluginMetadata
from codemedic_core.renderer import Renderer
from codemedic_core.report import Report

from codemedic_health.scanner import analyze_health

logger = logging.getLogger(__name__)

__version__ = "0.1.0"


class HealthAnalysisPlugin:
    """CodeMedic plugin for the `health` command."""

    version = __version__
    metadata = PluginMetadata.create(
        id="codemedic.health",
        name="Repository Health Analyzer",
        description=(
            "Analyzes .NET repository health, including projects, dependencies, "
            "and code quality indicators"
        ),
        author="CodeMedic Team",
        tags=["health", "analysis", "repository", "dotnet"],
    )
    analysis_description = "Repository health and code quality analysis"

    def register_commands(self) -> list[CommandRegistration]:
        return [
            CommandRegistration(
                name="health",
                description="Display repository health dashboard",
                handler=self.execute_health_command,
                arguments=(TARGET_PATH_ARGUMENT,),
                examples=(
                    "codemedic health",
                    "codemedic health -p /path/to/repo",
                    "codemedic health --path /path/to/repo --format markdown",
                    "codemedic health --format md > report.md",
                ),
            )
        ]

    async def initialize(self) -> None:
        logger.debug("Health plugin v%s ready", self.version)

    async def execute_health_command(self, args: Sequence[str], renderer: Renderer) -> int:
        """Render the health dashboard for the path given by -p/--path."""
        target_path = resolve_target_path(args)

        async def analyze() -> Report:
            return await asyncio.to_thread(analyze_health, target_path)

        return await execute_report_command(
            renderer,
            title="Repository Health Dashboard",
            analysis_description=self.analysis_description,
            analyze=analyze,
        )
