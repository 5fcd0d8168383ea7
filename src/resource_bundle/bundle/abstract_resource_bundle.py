import logging
from pathlib import Path
from typing import ClassVar, Optional, Type

from resource_bundle.config.configuration_processor import ConfigurationProcessor
from resource_bundle.dependency_injection.abstract_resource_extension import AbstractResourceExtension
from resource_bundle.dependency_injection.compiler import MappingPassFactory, ResolveTargetEntitiesPass
from resource_bundle.dependency_injection.container_builder import ContainerBuilderInterface
from resource_bundle.interfaces.driver_registry_interface import DriverRegistryInterface
from resource_bundle.model.bundle_capabilities import BundleCapabilities

logger = logging.getLogger(__name__)


class AbstractResourceBundle:
    """
    Base class of resource bundles.

    A bundle declares its capabilities and its extension class explicitly:

        class ProductBundle(AbstractResourceBundle):
            capabilities = BundleCapabilities(
                name="ProductBundle",
                prefix="sylius_product",
                supported_drivers=frozenset({DriverEnum.DOCTRINE_ORM}),
                model_namespace="Sylius\\Component\\Product\\Model",
            )
            extension_class = ProductExtension
    """

    capabilities: ClassVar[BundleCapabilities]
    extension_class: ClassVar[Optional[Type[AbstractResourceExtension]]] = None

    def get_capabilities(self) -> BundleCapabilities:
        return self.capabilities

    def get_container_extension(
        self,
        driver_registry: DriverRegistryInterface,
        processor: Optional[ConfigurationProcessor] = None,
        application_name: Optional[str] = None,
    ) -> Optional[AbstractResourceExtension]:
        if self.extension_class is None:
            return None
        return self.extension_class(self.capabilities, driver_registry, processor, application_name)

    def build(
        self,
        container: ContainerBuilderInterface,
        mapping_pass_factory: MappingPassFactory,
        driver_registry: DriverRegistryInterface,
    ) -> None:
        """
        Register the bundle's compiler passes.

        One mapping pass is added per supported driver; each is enabled only
        by its ``<prefix>.driver.<driver>`` parameter, which the extension
        sets for the configured driver.

        Raises:
            UnsupportedMappingFormatError: If the mapping file type is neither XML nor YAML
        """
        capabilities = self.capabilities

        if capabilities.model_interfaces:
            container.add_compiler_pass(
                ResolveTargetEntitiesPass(capabilities.prefix, capabilities.model_interfaces)
            )

        if capabilities.model_namespace is None:
            return

        method_name = driver_registry.get_mapping_pass_method(capabilities.mapping_format)
        for driver in sorted(driver_registry.get_supported_drivers(capabilities), key=lambda d: d.value):
            descriptor = driver_registry.get_mapping_info(driver)
            container.add_compiler_pass(
                mapping_pass_factory.create(
                    method_name,
                    {self.get_config_files_path(): capabilities.model_namespace},
                    descriptor.manager_service_names,
                    f"{capabilities.prefix}.driver.{driver.value}",
                )
            )
        logger.debug(f"Registered mapping passes of bundle '{capabilities.name}'")

    def get_config_files_path(self) -> str:
        """Directory holding the bundle's mapping files."""
        return str(
            Path(self.capabilities.path)
            / "resources"
            / "config"
            / "doctrine"
            / self.capabilities.mapping_directory.lower()
        )
