from .bundle_capabilities import BundleCapabilities
from .driver_descriptor import DriverDescriptor
from .service_definition import ServiceDefinition

__all__ = ["BundleCapabilities", "DriverDescriptor", "ServiceDefinition"]
