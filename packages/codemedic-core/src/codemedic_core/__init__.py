"""CodeMedic Core: plugin protocol, command model and dispatch."""

from codemedic_core.arguments import (
    TARGET_PATH_ARGUMENT,
    find_argument_value,
    find_option_value,
    resolve_target_path,
)
from codemedic_core.dispatcher import CommandDispatcher
from codemedic_core.errors import (
    CodeMedicError,
    DuplicateCommandError,
    DuplicatePluginError,
    UnknownCommandError,
)
from codemedic_core.execution import execute_report_command
from codemedic_core.plugin import (
    AnalysisPlugin,
    CommandArgument,
    CommandHandler,
    CommandRegistration,
    PluginMetadata,
)
from codemedic_core.registry import CommandRegistry, initialize_plugins
from codemedic_core.renderer import Renderer
from codemedic_core.report import Report, ReportTable

__all__ = [
    "AnalysisPlugin",
    "CodeMedicError",
    "CommandArgument",
    "CommandDispatcher",
    "CommandHandler",
    "CommandRegistration",
    "CommandRegistry",
    "DuplicateCommandError",
    "DuplicatePluginError",
    "PluginMetadata",
    "Renderer",
    "Report",
    "ReportTable",
    "TARGET_PATH_ARGUMENT",
    "UnknownCommandError",
    "execute_report_command",
    "find_argument_value",
    "find_option_value",
    "initialize_plugins",
    "resolve_target_path",
]
