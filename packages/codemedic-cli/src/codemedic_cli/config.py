"""Load CodeMedic settings from YAML."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "CODEMEDIC_CONFIG"
LOG_LEVEL_ENV_VAR = "CODEMEDIC_LOG_LEVEL"

DEFAULTS: dict[str, Any] = {
    "format": "console",
    "log_level": "WARNING",
    "disabled_plugins": [],
}


def _config_path(explicit: Path | None) -> Path | None:
    """Resolve which config file to read, if any."""
    # 1. Explicit path (testing / constructor override)
    if explicit is not None:
        return explicit

    # 2. CODEMEDIC_CONFIG env var
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path)

    # 3. User config
    user_path = Path.home() / ".config" / "codemedic" / "config.yaml"
    if user_path.exists():
        return user_path

    return None


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Return settings merged over DEFAULTS.

    Missing or invalid files fall back to the defaults; problems are reported
    on stderr. CODEMEDIC_LOG_LEVEL overrides ``log_level``.
    """
    config = dict(DEFAULTS)
    config_path = _config_path(path)

    if config_path is not None:
        if not config_path.exists():
            print(f"Warning: Config not found at {config_path}", file=sys.stderr)
        else:
            try:
                data = yaml.safe_load(config_path.read_text()) or {}
            except (OSError, yaml.YAMLError) as e:
                print(f"Error loading config {config_path}: {e}", file=sys.stderr)
                data = {}
            if isinstance(data, dict):
                config.update({k: v for k, v in data.items() if k in DEFAULTS})
            else:
                print(
                    f"Error loading config {config_path}: expected a mapping",
                    file=sys.stderr,
                )

    if level := os.environ.get(LOG_LEVEL_ENV_VAR):
        config["log_level"] = level

    disabled = config.get("disabled_plugins") or []
    if not isinstance(disabled, list):
        print(
            f"Error loading config {config_path}: disabled_plugins must be a list",
            file=sys.stderr,
        )
        disabled = []
    config["disabled_plugins"] = [str(plugin_id) for plugin_id in disabled]
    return config
