"""Compiler passes registered by resource bundles."""
import logging
from typing import Callable, Dict, Optional, Sequence

from resource_bundle.dependency_injection.container_builder import (
    CompilerPassInterface,
    ContainerBuilderInterface,
)
from resource_bundle.enum.mapping_format_enum import MappingFormatEnum

logger = logging.getLogger(__name__)

MAPPINGS_PARAMETER = "doctrine.mappings"
RESOLVE_TARGET_ENTITIES_PARAMETER = "resource.resolve_target_entities"


class MappingPass(CompilerPassInterface):
    """
    Registers model mapping metadata for a set of object managers.

    The pass does nothing unless `enabled_parameter` is set in the container,
    so one pass per supported driver can be registered while only the
    configured driver takes effect.

    Each manager gets a list under ``doctrine.mappings.<manager>`` of entries
    ``{"format", "directory", "namespace"}``.
    """

    def __init__(
        self,
        mapping_format: MappingFormatEnum,
        namespaces: Dict[str, str],
        manager_parameters: Sequence[str],
        enabled_parameter: Optional[str] = None,
    ):
        self.mapping_format = mapping_format
        self.namespaces = dict(namespaces)
        self.manager_parameters = list(manager_parameters)
        self.enabled_parameter = enabled_parameter

    def process(self, container: ContainerBuilderInterface) -> None:
        if self.enabled_parameter and not container.has_parameter(self.enabled_parameter):
            return

        for manager in self.manager_parameters:
            key = f"{MAPPINGS_PARAMETER}.{manager}"
            mappings = list(container.get_parameter(key)) if container.has_parameter(key) else []
            for directory, namespace in self.namespaces.items():
                mappings.append(
                    {
                        "format": self.mapping_format.value,
                        "directory": directory,
                        "namespace": namespace,
                    }
                )
            container.set_parameter(key, mappings)
            logger.debug(f"Registered {len(self.namespaces)} {self.mapping_format.value} mapping(s) for {manager}")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.mapping_format.value}, "
            f"managers={self.manager_parameters}, enabled_by={self.enabled_parameter})"
        )


class MappingPassFactory:
    """Creates mapping passes; the method is picked by mapping file type."""

    def __init__(self) -> None:
        self._methods: Dict[str, Callable[..., MappingPass]] = {
            "create_xml_mapping_driver": self.create_xml_mapping_driver,
            "create_yaml_mapping_driver": self.create_yaml_mapping_driver,
        }

    def create_xml_mapping_driver(
        self,
        namespaces: Dict[str, str],
        manager_parameters: Sequence[str],
        enabled_parameter: Optional[str] = None,
    ) -> MappingPass:
        return MappingPass(MappingFormatEnum.XML, namespaces, manager_parameters, enabled_parameter)

    def create_yaml_mapping_driver(
        self,
        namespaces: Dict[str, str],
        manager_parameters: Sequence[str],
        enabled_parameter: Optional[str] = None,
    ) -> MappingPass:
        return MappingPass(MappingFormatEnum.YAML, namespaces, manager_parameters, enabled_parameter)

    def create(
        self,
        method_name: str,
        namespaces: Dict[str, str],
        manager_parameters: Sequence[str],
        enabled_parameter: Optional[str] = None,
    ) -> MappingPass:
        """
        Create a mapping pass with the named factory method.

        Raises:
            ValueError: If the factory has no such method
        """
        try:
            method = self._methods[method_name]
        except KeyError:
            raise ValueError(
                f"Unknown mapping pass factory method '{method_name}', "
                f"expected one of {sorted(self._methods)}"
            ) from None
        return method(namespaces, manager_parameters, enabled_parameter)


class ResolveTargetEntitiesPass(CompilerPassInterface):
    """
    Resolves model interfaces to the model classes configured for them.

    Nothing is resolved unless the bundle's ``<prefix>.driver`` parameter is
    set, i.e. unless the bundle's extension loaded a database driver.

    Args:
        prefix: Parameter prefix of the bundle
        interfaces: Interface name to the parameter holding its model class
    """

    def __init__(self, prefix: str, interfaces: Dict[str, str]):
        self.prefix = prefix
        self.interfaces = dict(interfaces)

    def process(self, container: ContainerBuilderInterface) -> None:
        if not container.has_parameter(f"{self.prefix}.driver"):
            logger.debug(f"No driver configured for '{self.prefix}', skipping target entity resolution")
            return

        resolved = (
            dict(container.get_parameter(RESOLVE_TARGET_ENTITIES_PARAMETER))
            if container.has_parameter(RESOLVE_TARGET_ENTITIES_PARAMETER)
            else {}
        )
        for interface, parameter in self.interfaces.items():
            resolved[interface] = container.get_parameter(parameter)
        container.set_parameter(RESOLVE_TARGET_ENTITIES_PARAMETER, resolved)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.prefix}, {len(self.interfaces)} interfaces)"
