import logging
from typing import Dict, FrozenSet, Union

from resource_bundle.enum.driver_enum import DriverEnum
from resource_bundle.enum.mapping_format_enum import MappingFormatEnum
from resource_bundle.errors import UnknownDriverError, UnsupportedMappingFormatError
from resource_bundle.interfaces.driver_registry_interface import DriverRegistryInterface
from resource_bundle.model.bundle_capabilities import BundleCapabilities
from resource_bundle.model.driver_descriptor import DriverDescriptor

logger = logging.getLogger(__name__)


_DEFAULT_DESCRIPTORS: Dict[DriverEnum, DriverDescriptor] = {
    DriverEnum.DOCTRINE_ORM: DriverDescriptor(
        DriverEnum.DOCTRINE_ORM,
        "doctrine_orm_mappings_pass",
        ("doctrine.orm.entity_manager",),
        "Doctrine\\ORM\\EntityRepository",
    ),
    DriverEnum.DOCTRINE_MONGODB_ODM: DriverDescriptor(
        DriverEnum.DOCTRINE_MONGODB_ODM,
        "doctrine_mongodb_mappings_pass",
        ("doctrine_mongodb.odm.document_manager",),
        "Doctrine\\ODM\\MongoDB\\DocumentRepository",
    ),
    DriverEnum.DOCTRINE_PHPCR_ODM: DriverDescriptor(
        DriverEnum.DOCTRINE_PHPCR_ODM,
        "doctrine_phpcr_mappings_pass",
        ("doctrine_phpcr.odm.document_manager",),
        "Doctrine\\ODM\\PHPCR\\DocumentRepository",
    ),
}

_MAPPING_PASS_METHODS: Dict[MappingFormatEnum, str] = {
    MappingFormatEnum.XML: "create_xml_mapping_driver",
    MappingFormatEnum.YAML: "create_yaml_mapping_driver",
}


def to_driver(driver: Union[DriverEnum, str]) -> DriverEnum:
    """
    Convert a driver string to its enum member.

    Raises:
        UnknownDriverError: If the value is not a known driver
    """
    if isinstance(driver, DriverEnum):
        return driver
    try:
        return DriverEnum(driver)
    except ValueError:
        raise UnknownDriverError(str(driver)) from None


class DriverRegistry(DriverRegistryInterface):
    """
    Registry of the statically known persistence drivers.

    The set of drivers is closed: the registry answers for the driver
    constants only and never invents a driver a bundle did not declare.
    """

    def __init__(self) -> None:
        self._descriptors: Dict[DriverEnum, DriverDescriptor] = dict(_DEFAULT_DESCRIPTORS)

    def get_mapping_info(self, driver: Union[DriverEnum, str]) -> DriverDescriptor:
        try:
            return self._descriptors[to_driver(driver)]
        except UnknownDriverError:
            logger.error(f"Mapping info requested for unknown driver '{driver}'")
            raise

    def get_supported_drivers(self, capabilities: BundleCapabilities) -> FrozenSet[DriverEnum]:
        return frozenset(to_driver(driver) for driver in capabilities.supported_drivers)

    def is_supported(self, capabilities: BundleCapabilities, driver: Union[DriverEnum, str]) -> bool:
        """
        Check whether a bundle supports a driver.

        An unknown requested driver is reported as unsupported rather than
        raised.

        Raises:
            UnknownDriverError: If the bundle declares an unknown driver
        """
        supported = self.get_supported_drivers(capabilities)
        try:
            return to_driver(driver) in supported
        except UnknownDriverError:
            return False

    def get_mapping_pass_method(self, mapping_format: Union[MappingFormatEnum, str]) -> str:
        value = mapping_format.value if isinstance(mapping_format, MappingFormatEnum) else mapping_format
        for supported, method_name in _MAPPING_PASS_METHODS.items():
            if supported.value == value:
                return method_name

        raise UnsupportedMappingFormatError(
            str(value), [supported.value for supported in _MAPPING_PASS_METHODS]
        )

    def __contains__(self, driver: Union[DriverEnum, str]) -> bool:
        try:
            return to_driver(driver) in self._descriptors
        except UnknownDriverError:
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._descriptors)} drivers)"
