"""
Base extension of resource bundles.

An extension turns the configuration trees of its alias into container
state. `configure` runs a fixed pipeline:

1. normalize the trees against the schema
2. run the `process` hook
3. load the base service definition files
4. run the requested optional stages, in `ConfigureStageEnum` order
5. merge the bundle's class map into the global class registry

Any failure aborts the build.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type

from resource_bundle.base.base_schema import BaseSchema
from resource_bundle.config.configuration_processor import ConfigurationProcessor, RawConfig
from resource_bundle.config.resource_config import ResourceConfig, class_map_of
from resource_bundle.dependency_injection.class_registry import merge_into_registry
from resource_bundle.dependency_injection.container_builder import ContainerBuilderInterface
from resource_bundle.dependency_injection.driver import DatabaseDriver
from resource_bundle.dependency_injection.loader import FileLoaderInterface, get_loader
from resource_bundle.enum.configure_stage_enum import ConfigureStageEnum
from resource_bundle.enum.mapping_format_enum import ServicesFormatEnum
from resource_bundle.errors import (
    InvalidDriverError,
    MissingConfigDirectoryError,
    MissingServiceDefinitionError,
)
from resource_bundle.interfaces.driver_registry_interface import DriverRegistryInterface
from resource_bundle.model.bundle_capabilities import BundleCapabilities

logger = logging.getLogger(__name__)


@dataclass
class ExtensionContext:
    """State threaded through the configure stages of one extension."""

    config: Dict[str, Any]
    container: ContainerBuilderInterface
    loader: FileLoaderInterface


class AbstractResourceExtension:
    """
    Base class of resource bundle extensions.

    Subclasses declare what differs per bundle as class attributes:

    Attributes:
        alias: Configuration root name; defaults to the bundle prefix
        application_name: Prefix of class, validation group and registry parameters
        config_files: Base service definition files, without extension
        config_directory: Directory of the definition files; defaults to
            ``<bundle path>/resources/config``
        schema: Configuration schema used by `load`
        stages: Optional stages run by `load`
    """

    alias: Optional[str] = None
    application_name: str = "sylius"
    config_files: Sequence[str] = ("services",)
    config_directory: Optional[str] = None
    schema: Type[BaseSchema] = ResourceConfig
    stages: Sequence[ConfigureStageEnum] = (ConfigureStageEnum.LOADER,)

    def __init__(
        self,
        capabilities: BundleCapabilities,
        driver_registry: DriverRegistryInterface,
        processor: Optional[ConfigurationProcessor] = None,
        application_name: Optional[str] = None,
    ):
        self.capabilities = capabilities
        self.driver_registry = driver_registry
        self.processor = processor or ConfigurationProcessor()
        if application_name:
            self.application_name = application_name

        self._stage_functions: Dict[ConfigureStageEnum, Callable[[ExtensionContext], None]] = {
            ConfigureStageEnum.DATABASE: self._database_stage,
            ConfigureStageEnum.PARAMETERS: self._parameters_stage,
            ConfigureStageEnum.VALIDATORS: self._validators_stage,
        }

    def get_alias(self) -> str:
        return self.alias or self.capabilities.prefix

    def load(self, configs: RawConfig, container: ContainerBuilderInterface) -> None:
        """Entry point called by the kernel with all trees of this extension's alias."""
        self.configure(configs, self.schema, container, self.stages)

    def configure(
        self,
        configs: RawConfig,
        schema: Type[BaseSchema],
        container: ContainerBuilderInterface,
        stages: Iterable[ConfigureStageEnum] = (ConfigureStageEnum.LOADER,),
    ) -> Tuple[Dict[str, Any], FileLoaderInterface]:
        """
        Configure the container from the raw configuration trees.

        Args:
            configs: Raw trees of this extension's alias
            schema: Schema the trees are validated against
            container: The container being built
            stages: Optional stages to run; LOADER always runs

        Returns:
            The normalized configuration and the loader used

        Raises:
            InvalidConfigurationError: If the trees violate the schema
            MissingConfigDirectoryError: If the configuration directory does not exist
            MissingServiceDefinitionError: If a definition file cannot be found
            InvalidDriverError: If the configured driver is not supported by the bundle
        """
        alias = self.get_alias()
        requested = set(stages)
        logger.info(
            f"Configuring extension '{alias}' with stages "
            f"{[stage.value for stage in ConfigureStageEnum if stage in requested]}"
        )

        config = self.processor.process(configs, schema, root=alias)
        config = self.process(config, container)

        loader = self.get_loader(container)
        self.load_configuration_files(self.config_files, loader)

        context = ExtensionContext(config, container, loader)
        for stage in ConfigureStageEnum:
            if stage in requested and stage in self._stage_functions:
                self._stage_functions[stage](context)

        merge_into_registry(container, self.application_name, class_map_of(config))

        return config, loader

    def process(self, config: Dict[str, Any], container: ContainerBuilderInterface) -> Dict[str, Any]:
        """In case any extra processing is needed; override in subclasses."""
        return config

    def get_loader(self, container: ContainerBuilderInterface) -> FileLoaderInterface:
        return get_loader(container, self.capabilities.services_format, self.get_configuration_directory())

    def get_configuration_directory(self) -> Path:
        """
        Raises:
            MissingConfigDirectoryError: If the directory does not exist
        """
        if self.config_directory:
            directory = Path(self.config_directory)
            if not directory.is_absolute():
                directory = Path(self.capabilities.path) / directory
        else:
            directory = Path(self.capabilities.path) / "resources" / "config"

        if not directory.is_dir():
            logger.error(f"Configuration directory of '{self.get_alias()}' not found: {directory}")
            raise MissingConfigDirectoryError(str(directory))
        return directory

    def load_configuration_files(self, filenames: Iterable[str], loader: FileLoaderInterface) -> None:
        """
        Load definition files, looking in the configuration directory first
        and in its ``services`` subdirectory second.

        Raises:
            MissingServiceDefinitionError: If a file is on neither path
        """
        directory = self.get_configuration_directory()
        services_format = self.capabilities.services_format
        extension = services_format.value if isinstance(services_format, ServicesFormatEnum) else services_format

        for filename in filenames:
            candidates = [
                directory / f"{filename}.{extension}",
                directory / "services" / f"{filename}.{extension}",
            ]
            path = next((candidate for candidate in candidates if candidate.is_file()), None)
            if path is None:
                logger.error(f"Service definition file '{filename}.{extension}' of '{self.get_alias()}' not found")
                raise MissingServiceDefinitionError(
                    f"{filename}.{extension}", [str(candidate) for candidate in candidates]
                )
            loader.load(path)

    def load_database_driver(
        self,
        config: Mapping[str, Any],
        loader: FileLoaderInterface,
        container: ContainerBuilderInterface,
    ) -> None:
        """
        Load the configured driver and the persistence services of every model.

        Raises:
            InvalidDriverError: If the bundle does not support the driver
        """
        driver = config["driver"]
        alias = self.get_alias()

        if not self.driver_registry.is_supported(self.capabilities, driver):
            logger.error(f"Driver '{driver}' requested for unsupporting bundle '{self.capabilities.name}'")
            raise InvalidDriverError(driver, self.capabilities.name)
        descriptor = self.driver_registry.get_mapping_info(driver)

        self.load_configuration_files([f"driver/{driver}"], loader)

        container.set_parameter(f"{alias}.driver", driver)
        container.set_parameter(f"{alias}.driver.{driver}", True)

        templates = config.get("templates") or {}
        for model, classes in class_map_of(config).items():
            if "model" in classes:
                DatabaseDriver(
                    descriptor, container, self.application_name, model, templates.get(model)
                ).load(classes)

    def map_class_parameters(
        self, classes: Mapping[str, Mapping[str, str]], container: ContainerBuilderInterface
    ) -> None:
        """Set ``<app>.<kind>.<model>.class`` for every class; kind "form" is keyed as "form.type"."""
        for model, service_classes in classes.items():
            for service, class_name in service_classes.items():
                kind = "form.type" if service == "form" else service
                container.set_parameter(f"{self.application_name}.{kind}.{model}.class", class_name)

    def map_validation_group_parameters(
        self, validation_groups: Mapping[str, List[str]], container: ContainerBuilderInterface
    ) -> None:
        for model, groups in validation_groups.items():
            container.set_parameter(f"{self.application_name}.validation_group.{model}", list(groups))

    def _database_stage(self, context: ExtensionContext) -> None:
        self.load_database_driver(context.config, context.loader, context.container)

    def _parameters_stage(self, context: ExtensionContext) -> None:
        self.map_class_parameters(class_map_of(context.config), context.container)

    def _validators_stage(self, context: ExtensionContext) -> None:
        self.map_validation_group_parameters(context.config.get("validation_groups") or {}, context.container)
