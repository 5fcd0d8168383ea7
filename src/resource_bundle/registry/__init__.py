from .driver_registry import DriverRegistry, to_driver

__all__ = ["DriverRegistry", "to_driver"]
