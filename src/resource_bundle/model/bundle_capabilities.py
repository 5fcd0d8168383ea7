from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

from resource_bundle.enum.driver_enum import DriverEnum
from resource_bundle.enum.mapping_format_enum import MappingFormatEnum, ServicesFormatEnum


@dataclass(frozen=True)
class BundleCapabilities:
    """
    Statically declared description of a resource bundle.

    A bundle hands this to the build at registration time, so nothing about
    it has to be inferred from class or module names.

    Attributes:
        name: Bundle name used in error messages
        prefix: Parameter prefix of the bundle, e.g. "sylius_product"
        supported_drivers: Drivers the bundle ships definitions for
        services_format: File type of the bundle's service definitions
        path: Root directory of the bundle
        model_namespace: Namespace of the mapped models; no mapping pass without it
        mapping_format: File type of the mapping metadata
        mapping_directory: Directory name below resources/config/doctrine
        model_interfaces: Interface name to the parameter holding its model class
    """

    name: str
    prefix: str
    supported_drivers: FrozenSet[DriverEnum] = frozenset({DriverEnum.DOCTRINE_ORM})
    services_format: ServicesFormatEnum = ServicesFormatEnum.XML
    path: str = "."
    model_namespace: Optional[str] = None
    mapping_format: MappingFormatEnum = MappingFormatEnum.XML
    mapping_directory: str = "model"
    model_interfaces: Dict[str, str] = field(default_factory=dict)
