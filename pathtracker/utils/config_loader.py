"""
Dashboard config loader for pathtracker.

Loads DashboardConfig from YAML files, e.g.:

    show_achievements: false
    max_recommendations: 3
    theme:
      primary_color: "#6f42c1"
"""

import os
from pathlib import Path
from typing import Any

import yaml

from pathtracker.schemas import DashboardConfig

CONFIG_ENV_VAR = "PATHTRACKER_DASHBOARD_CONFIG"


def load_yaml_config(file_path: Path) -> dict[str, Any]:
    """
    Load a YAML mapping from disk.

    Returns:
        Parsed mapping (empty for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValueError: If the document is not a mapping
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Dashboard config not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Dashboard config must be a mapping: {file_path}")
    return data


def load_dashboard_config(path: Path | str | None = None) -> DashboardConfig:
    """
    Load the dashboard configuration.

    Args:
        path: YAML file to read. Falls back to $PATHTRACKER_DASHBOARD_CONFIG,
            then to the built-in defaults.

    Raises:
        FileNotFoundError: If an explicitly named file doesn't exist
        pydantic.ValidationError: If the file has unknown keys or bad values
    """
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return DashboardConfig()
    return DashboardConfig.model_validate(load_yaml_config(Path(path)))
