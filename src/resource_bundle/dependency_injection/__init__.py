from .abstract_resource_extension import AbstractResourceExtension, ExtensionContext
from .class_registry import class_registry_key, merge_class_maps, merge_into_registry
from .compiler import MappingPass, MappingPassFactory, ResolveTargetEntitiesPass
from .container_builder import (
    CompilerPassInterface,
    ContainerBuilder,
    ContainerBuilderInterface,
)
from .driver import DatabaseDriver
from .loader import FileLoaderInterface, FileLocator, XmlFileLoader, YamlFileLoader, get_loader

__all__ = [
    "AbstractResourceExtension",
    "CompilerPassInterface",
    "ContainerBuilder",
    "ContainerBuilderInterface",
    "DatabaseDriver",
    "ExtensionContext",
    "FileLoaderInterface",
    "FileLocator",
    "MappingPass",
    "MappingPassFactory",
    "ResolveTargetEntitiesPass",
    "XmlFileLoader",
    "YamlFileLoader",
    "class_registry_key",
    "get_loader",
    "merge_class_maps",
    "merge_into_registry",
]
