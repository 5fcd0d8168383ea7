"""Resource bundles: persistence driver resolution and class wiring for a DI container build."""

from resource_bundle.bundle.abstract_resource_bundle import AbstractResourceBundle
from resource_bundle.config.configuration_processor import ConfigurationProcessor
from resource_bundle.config.resource_config import ResourceConfig
from resource_bundle.controller.request_configuration import RequestConfiguration
from resource_bundle.controller.resource_resolver import ResourceResolver
from resource_bundle.dependency_injection.abstract_resource_extension import AbstractResourceExtension
from resource_bundle.dependency_injection.container_builder import ContainerBuilder
from resource_bundle.enum import ConfigureStageEnum, DriverEnum, MappingFormatEnum, ServicesFormatEnum
from resource_bundle.kernel import Kernel
from resource_bundle.model.bundle_capabilities import BundleCapabilities
from resource_bundle.registry.driver_registry import DriverRegistry

__all__ = [
    "AbstractResourceBundle",
    "AbstractResourceExtension",
    "BundleCapabilities",
    "ConfigurationProcessor",
    "ConfigureStageEnum",
    "ContainerBuilder",
    "DriverEnum",
    "DriverRegistry",
    "Kernel",
    "MappingFormatEnum",
    "RequestConfiguration",
    "ResourceConfig",
    "ResourceResolver",
    "ServicesFormatEnum",
]
