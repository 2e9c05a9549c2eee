"""CodeMedic plugin: health - repository health dashboard."""

from codemedic_health.plugin import HealthAnalysisPlugin


def create_plugin() -> HealthAnalysisPlugin:
    """Factory used by the host's built-in plugin list."""
    return HealthAnalysisPlugin()
