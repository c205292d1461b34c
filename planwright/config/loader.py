# planwright/config/loader.py
"""
Configuration loading with auto-creation of defaults.

Uses platformdirs for cross-platform config directory management.
"""

import logging
import os
from pathlib import Path

import yaml
from platformdirs import user_config_path

from .schema import PlannerConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PLANWRIGHT_CONFIG"
API_KEY_ENV_VAR = "DEEPSEEK_API_KEY"


def get_config_path() -> Path:
    """Get path to config file, ensuring config directory exists."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    config_dir = user_config_path("planwright", ensure_exists=True)
    return config_dir / "config.yaml"


def _apply_env_overrides(config: PlannerConfig) -> PlannerConfig:
    """Fill secrets from the environment when the file leaves them unset."""
    api_key = os.environ.get(API_KEY_ENV_VAR)
    if api_key and not config.deepseek.api_key:
        config.deepseek.api_key = api_key
    return config


def load_config(path: Path | None = None) -> PlannerConfig:
    """
    Load configuration from YAML file.

    If config file doesn't exist, creates it with defaults.
    Returns validated Pydantic model.

    Args:
        path: Explicit config file (defaults to get_config_path())

    Raises:
        pydantic.ValidationError: If the file contains invalid values
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        # Create default config
        default_config = PlannerConfig()
        config_dict = default_config.model_dump(mode="json")

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Created default config at {config_path}")
        return _apply_env_overrides(default_config)

    # Load existing config
    with config_path.open("r") as f:
        config_data = yaml.safe_load(f) or {}

    # Parse and validate with Pydantic
    config = PlannerConfig(**config_data)
    logger.info(f"Loaded config from {config_path}")
    return _apply_env_overrides(config)
