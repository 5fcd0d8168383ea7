from .application_config import ApplicationConfig, LoggingConfig
from .config_adapter import ConfigAdapter
from .configuration_processor import ConfigurationProcessor
from .resource_config import ResourceConfig

__all__ = [
    "ApplicationConfig",
    "ConfigAdapter",
    "ConfigurationProcessor",
    "LoggingConfig",
    "ResourceConfig",
]
