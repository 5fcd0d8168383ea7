"""Logging configuration for applications built from resource bundles.

Example usage:
    from resource_bundle.config.logging_config import configure_logging

    config = ConfigAdapter.load_with_env_override(ApplicationConfig, "config/application.yaml")
    configure_logging(config.logging)
"""
import logging
import sys
from pathlib import Path
from typing import List

from resource_bundle.config.application_config import LoggingConfig


def configure_logging(logging_config: LoggingConfig) -> None:
    """Configure the root logger from a logging configuration.

    Handlers installed by a previous call are replaced.

    Args:
        logging_config: The logging section of the application config
    """
    level = getattr(logging, logging_config.level.upper(), logging.INFO)
    formatter = logging.Formatter(logging_config.format)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    handlers: List[logging.Handler] = []
    if logging_config.file_path:
        log_file = Path(logging_config.file_path)
        log_file.parent.mkdir(exist_ok=True, parents=True)
        handlers.append(logging.FileHandler(str(log_file)))

    if logging_config.console_enabled:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
        logging.root.addHandler(handler)
    logging.root.setLevel(level)
