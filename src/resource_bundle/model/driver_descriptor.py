from dataclasses import dataclass
from typing import Tuple

from resource_bundle.enum.driver_enum import DriverEnum


@dataclass(frozen=True)
class DriverDescriptor:
    """
    Everything needed to wire one persistence driver into the container.

    Attributes:
        driver: The driver this descriptor belongs to
        mapping_pass_id: Identifier of the compiler pass wiring the mapping metadata
        manager_service_names: Object manager services the mapping is registered for
        default_repository_class: Repository class used when a model declares none
    """

    driver: DriverEnum
    mapping_pass_id: str
    manager_service_names: Tuple[str, ...]
    default_repository_class: str

    @property
    def default_manager(self) -> str:
        return self.manager_service_names[0]
