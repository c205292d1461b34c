"""Configuration system for planwright."""

from .loader import get_config_path, load_config
from .schema import (
    DeepSeekConfig,
    OllamaConfig,
    OutputConfig,
    PlannerConfig,
    PlanningConfig,
    SearchConfig,
    ServerConfig,
)

__all__ = [
    "PlannerConfig",
    "DeepSeekConfig",
    "OllamaConfig",
    "SearchConfig",
    "PlanningConfig",
    "ServerConfig",
    "OutputConfig",
    "load_config",
    "get_config_path",
]
