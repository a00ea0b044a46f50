"""pathtracker utilities."""

from .config_loader import load_dashboard_config, load_yaml_config, CONFIG_ENV_VAR
from .logging_config import configure_logging, LOG_FORMAT

__all__ = [
    "load_dashboard_config",
    "load_yaml_config",
    "CONFIG_ENV_VAR",
    "configure_logging",
    "LOG_FORMAT",
]
