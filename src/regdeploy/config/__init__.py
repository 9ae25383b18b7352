"""Public configuration API."""

from .loader import CONFIG_FILENAME, format_validation_errors, load_tool_config
from .models import DeploymentConfig, ManifestsConfig, ToolConfig

__all__ = [
    "CONFIG_FILENAME",
    "DeploymentConfig",
    "ManifestsConfig",
    "ToolConfig",
    "format_validation_errors",
    "load_tool_config",
]
