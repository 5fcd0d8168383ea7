"""DI wiring of the resource bundle build services."""
import logging
from typing import Optional

from injector import Injector, Module, provider, singleton

from resource_bundle.config.application_config import ApplicationConfig
from resource_bundle.config.config_adapter import ConfigAdapter
from resource_bundle.config.configuration_processor import ConfigurationProcessor
from resource_bundle.config.logging_config import configure_logging
from resource_bundle.dependency_injection.compiler import MappingPassFactory
from resource_bundle.interfaces.driver_registry_interface import DriverRegistryInterface
from resource_bundle.kernel import Kernel
from resource_bundle.registry.driver_registry import DriverRegistry

logger = logging.getLogger(__name__)

ENV_PREFIX = "RESOURCE_BUNDLE"


class ResourceBundleModule(Module):
    """
    DI module providing the services a container build needs.

    Args:
        config_path: Application config file (YAML or JSON); defaults apply when unset
        settings: Ready-made application config, takes precedence over config_path
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        settings: Optional[ApplicationConfig] = None,
    ):
        self._config_path = config_path
        self._settings = settings

    @provider
    @singleton
    def provide_application_config(self) -> ApplicationConfig:
        """Provide the application config, environment overrides applied."""
        if self._settings is not None:
            return self._settings
        if self._config_path is None:
            logger.info("No application config file given, using defaults")
            return ApplicationConfig()
        return ConfigAdapter.load_with_env_override(
            ApplicationConfig, self._config_path, env_prefix=ENV_PREFIX
        )

    @provider
    @singleton
    def provide_driver_registry(self) -> DriverRegistryInterface:
        return DriverRegistry()

    @provider
    @singleton
    def provide_configuration_processor(self) -> ConfigurationProcessor:
        return ConfigurationProcessor()

    @provider
    @singleton
    def provide_mapping_pass_factory(self) -> MappingPassFactory:
        return MappingPassFactory()


def create_kernel(
    config_path: Optional[str] = None,
    settings: Optional[ApplicationConfig] = None,
    setup_logging: bool = True,
) -> Kernel:
    """
    Create a kernel from the DI module.

    Args:
        config_path: Application config file
        settings: Ready-made application config
        setup_logging: Whether to configure root logging from the settings
    """
    injector = Injector([ResourceBundleModule(config_path, settings)])
    if setup_logging:
        configure_logging(injector.get(ApplicationConfig).logging)
    return injector.get(Kernel)
