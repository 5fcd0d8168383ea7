from abc import ABC, abstractmethod
from typing import FrozenSet, Union

from resource_bundle.enum.driver_enum import DriverEnum
from resource_bundle.enum.mapping_format_enum import MappingFormatEnum
from resource_bundle.model.bundle_capabilities import BundleCapabilities
from resource_bundle.model.driver_descriptor import DriverDescriptor


class DriverRegistryInterface(ABC):
    """
    Interface for the persistence driver registry.

    The registry maps every known driver to the information needed to wire
    it, and answers which drivers a bundle supports.
    """

    @abstractmethod
    def get_mapping_info(self, driver: Union[DriverEnum, str]) -> DriverDescriptor:
        """
        Get the mapping information for a driver.

        Args:
            driver: The driver or its string value

        Returns:
            The descriptor of the driver

        Raises:
            UnknownDriverError: If the driver is not a known driver constant
        """
        pass

    @abstractmethod
    def get_supported_drivers(self, capabilities: BundleCapabilities) -> FrozenSet[DriverEnum]:
        """
        Get the drivers a bundle declares support for.

        Args:
            capabilities: The bundle's declared capabilities

        Returns:
            The set of supported drivers
        """
        pass

    @abstractmethod
    def get_mapping_pass_method(self, mapping_format: Union[MappingFormatEnum, str]) -> str:
        """
        Get the name of the mapping pass factory method for a mapping file type.

        Args:
            mapping_format: The mapping file type

        Returns:
            Name of the factory method creating the mapping pass

        Raises:
            UnsupportedMappingFormatError: If the type is neither XML nor YAML
        """
        pass
