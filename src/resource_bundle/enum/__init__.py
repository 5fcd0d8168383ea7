from .configure_stage_enum import ConfigureStageEnum
from .driver_enum import DriverEnum
from .mapping_format_enum import MappingFormatEnum, ServicesFormatEnum
from .resource_operation_enum import FactoryOperationEnum, RepositoryOperationEnum

__all__ = [
    "ConfigureStageEnum",
    "DriverEnum",
    "FactoryOperationEnum",
    "MappingFormatEnum",
    "RepositoryOperationEnum",
    "ServicesFormatEnum",
]
