"""CodeMedic CLI: host process for analysis plugins."""

__version__ = "0.1.0"
