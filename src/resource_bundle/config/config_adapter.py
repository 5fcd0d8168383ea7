"""Config adapters loading application settings and bundle trees from JSON, YAML and ENV."""
import json
import logging
import os
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

from resource_bundle.base.base_schema import BaseSchema

T = TypeVar('T', bound=BaseSchema)

logger = logging.getLogger(__name__)


class ConfigAdapter:
    """
    Configuration loading from files and environment variables.

    Application settings are loaded into schema instances. Bundle
    configuration trees are loaded raw, because their validation belongs to
    the extension that owns them.
    """

    @staticmethod
    def load_raw(path: str) -> Dict[str, Any]:
        """
        Load a raw configuration tree from a YAML or JSON file.

        Args:
            path: Path to the configuration file

        Returns:
            The tree keyed by extension alias, empty for an empty file
        """
        lowered = path.lower()
        with open(path) as f:
            if lowered.endswith('.json'):
                data = json.load(f)
            elif lowered.endswith(('.yaml', '.yml')):
                data = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported config file format: {path}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping at its root")
        logger.debug(f"Loaded raw configuration from {path} ({len(data)} roots)")
        return data

    @staticmethod
    def load_from_json(config_class: Type[T], path: str) -> T:
        with open(path) as f:
            return config_class.model_validate_json(f.read())

    @staticmethod
    def load_from_yaml(config_class: Type[T], path: str) -> T:
        with open(path) as f:
            data = yaml.safe_load(f)
        return config_class.model_validate(data or {})

    @staticmethod
    def load_with_env_override(
        config_class: Type[T],
        path: str,
        env_prefix: Optional[str] = None
    ) -> T:
        """
        Load configuration with environment variable overrides.

        Environment variables follow the format {env_prefix}__{field_name},
        nested fields separated by double underscores, e.g.
        APPLICATIONCONFIG__LOGGING__LEVEL=DEBUG.

        Args:
            config_class: The configuration class to instantiate
            path: Path to the configuration file (JSON or YAML)
            env_prefix: Optional prefix for environment variables

        Returns:
            Instance of the configuration class with overrides applied
        """
        if path.lower().endswith('.json'):
            config = ConfigAdapter.load_from_json(config_class, path)
        elif path.lower().endswith(('.yaml', '.yml')):
            config = ConfigAdapter.load_from_yaml(config_class, path)
        else:
            raise ValueError(f"Unsupported config file format: {path}")

        if not env_prefix:
            return config

        config_dict = config.model_dump()
        overridden = 0
        for env_var, value in os.environ.items():
            if not env_var.startswith(f"{env_prefix}__"):
                continue

            parts = env_var[len(f"{env_prefix}__"):].lower().split('__')
            target = config_dict
            for part in parts[:-1]:
                target = target.setdefault(part, {})
            target[parts[-1]] = value
            overridden += 1

        if overridden:
            logger.debug(f"Applied {overridden} environment override(s) with prefix {env_prefix}")
            config = config_class.model_validate(config_dict)

        return config
