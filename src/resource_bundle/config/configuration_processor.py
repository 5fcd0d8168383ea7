import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Type, Union

from pydantic import ValidationError

from resource_bundle.base.base_schema import BaseSchema
from resource_bundle.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

RawConfig = Union[Mapping[str, Any], Sequence[Optional[Mapping[str, Any]]], None]


class ConfigurationProcessor:
    """
    Validates and normalizes raw configuration trees against a schema.

    The host framework hands over one tree per configuration file. Trees are
    deep-merged in the order given, then validated by the pydantic schema,
    which applies defaults and coerces scalar and list fields.
    """

    def process(
        self,
        configs: RawConfig,
        schema: Type[BaseSchema],
        root: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Process raw configuration trees into a normalized configuration.

        Args:
            configs: A single tree or an ordered sequence of trees
            schema: The schema to validate against
            root: Name of the configuration root, used in error paths

        Returns:
            The normalized configuration as plain, JSON-compatible data

        Raises:
            InvalidConfigurationError: If any node is missing or mistyped
        """
        root_name = root or schema.__name__
        merged = self.merge(configs, root_name)

        try:
            validated = schema.model_validate(merged)
        except ValidationError as e:
            errors = e.errors()
            paths = [
                ".".join([root_name, *(str(part) for part in error["loc"])])
                for error in errors
            ]
            details = [error["msg"] for error in errors]
            logger.error(
                "Configuration of '%s' is invalid at %s", root_name, ", ".join(paths)
            )
            raise InvalidConfigurationError(root_name, paths, details) from e

        logger.debug("Processed configuration of '%s'", root_name)
        return validated.model_dump(mode="json")

    @classmethod
    def merge(cls, configs: RawConfig, root: str = "config") -> Dict[str, Any]:
        """
        Deep-merge configuration trees; later trees override earlier scalars.

        Raises:
            InvalidConfigurationError: If a tree is not a mapping
        """
        if configs is None:
            return {}
        if isinstance(configs, Mapping):
            configs = [configs]
        elif isinstance(configs, (str, bytes)) or not isinstance(configs, Sequence):
            cls._reject_tree(root, configs)

        merged: Dict[str, Any] = {}
        for config in configs:
            if config is None:
                continue
            if not isinstance(config, Mapping):
                cls._reject_tree(root, config)
            cls._deep_update(merged, config)
        return merged

    @staticmethod
    def _reject_tree(root: str, tree: Any) -> None:
        logger.error("Configuration of '%s' is not a mapping: %r", root, tree)
        raise InvalidConfigurationError(root, [root], [f"expected a mapping, got {type(tree).__name__}"])

    @classmethod
    def _deep_update(cls, base: Dict[str, Any], update: Mapping[str, Any]) -> None:
        for key, value in update.items():
            if isinstance(value, Mapping) and isinstance(base.get(key), dict):
                cls._deep_update(base[key], value)
            elif isinstance(value, Mapping):
                base[key] = {}
                cls._deep_update(base[key], value)
            else:
                base[key] = value
