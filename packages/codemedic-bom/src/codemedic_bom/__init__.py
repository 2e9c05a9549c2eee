"""CodeMedic plugin: bom - bill of materials report."""

from codemedic_bom.plugin import BomAnalysisPlugin


def create_plugin() -> BomAnalysisPlugin:
    """Factory used by the host's built-in plugin list."""
    return BomAnalysisPlugin()
