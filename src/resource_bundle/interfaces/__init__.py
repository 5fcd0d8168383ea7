from .driver_registry_interface import DriverRegistryInterface
from .resource.factory_interface import FactoryInterface
from .resource.repository_interface import RepositoryInterface

__all__ = ["DriverRegistryInterface", "FactoryInterface", "RepositoryInterface"]
