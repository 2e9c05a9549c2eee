"""AnalysisPlugin implementation for the bill of materials report."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from codemedic_core.arguments import TARGET_PATH_ARGUMENT, resolve_target_path
from codemedic_core.execution import execute_report_command
from codemedic_core.plugin import CommandRegistration, PluginMetadata
from codemedic_core.renderer import Renderer
from codemedic_core.report import Report

from codemedic_bom.manifests import analyze_bom

logger = logging.getLogger(__name__)

__version__ = "0.1.0"


class BomAnalysisPlugin:
    """CodeMedic plugin for the `bom` command - dependency and framework inventory."""

    version = __version__
    metadata = PluginMetadata.create(
        id="codemedic.bom",
        name="Bill of Materials Analyzer",
        description=(
            "Generates comprehensive Bill of Materials including NuGet packages, "
            "frameworks, services, and vendors"
        ),
        author="CodeMedic Team",
        tags=["bom", "dependencies", "packages", "inventory"],
    )
    analysis_description = "Comprehensive dependency and service inventory (BOM)"

    def register_commands(self) -> list[CommandRegistration]:
        return [
            CommandRegistration(
                name="bom",
                description="Generate bill of materials report",
                handler=self.execute_bom_command,
                arguments=(TARGET_PATH_ARGUMENT,),
                examples=(
                    "codemedic bom",
                    "codemedic bom -p /path/to/repo",
                    "codemedic bom --path /path/to/repo --format markdown",
                    "codemedic bom --format md > bom.md",
                ),
            )
        ]

    async def initialize(self) -> None:
        logger.debug("BOM plugin v%s ready", self.version)

    async def execute_bom_command(self, args: Sequence[str], renderer: Renderer) -> int:
        target_path = resolve_target_path(args)

        async def analyze() -> Report:
            return await asyncio.to_thread(analyze_bom, target_path)

        return await execute_report_command(
            renderer,
            title="Bill of Materials (BOM)",
            analysis_description=self.analysis_description,
            analyze=analyze,
        )
