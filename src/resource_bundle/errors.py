"""Exceptions raised while building the container from resource bundles.

Every error here is a configuration fault detected at build time. None of
them is retried; a misconfigured bundle aborts the whole build.
"""
from typing import Iterable, Sequence

__all__ = [
    "ResourceBundleError",
    "UnknownDriverError",
    "InvalidDriverError",
    "UnsupportedMappingFormatError",
    "UnsupportedServicesFormatError",
    "InvalidConfigurationError",
    "MissingServiceDefinitionError",
    "MissingConfigDirectoryError",
    "ParameterNotFoundError",
    "FrozenContainerError",
    "UnsupportedResourceOperationError",
]


class ResourceBundleError(Exception):
    """Base class for all resource bundle errors."""
    pass


class UnknownDriverError(ResourceBundleError):
    """Raised when a driver is not one of the known driver constants."""

    def __init__(self, driver: str):
        self.driver = driver
        super().__init__(f'Unknown driver "{driver}".')


class InvalidDriverError(ResourceBundleError):
    """Raised when the requested driver is not supported by the bundle."""

    def __init__(self, driver: str, bundle_name: str):
        self.driver = driver
        self.bundle_name = bundle_name
        super().__init__(
            f'Driver "{driver}" is unsupported for bundle "{bundle_name}".'
        )


class UnsupportedMappingFormatError(ResourceBundleError):
    """Raised when a mapping file type is neither XML nor YAML."""

    def __init__(self, mapping_format: str, available: Iterable[str]):
        self.mapping_format = mapping_format
        self.available = list(available)
        super().__init__(
            f'MappingFileType "{mapping_format}" not in list of available types: '
            f"{self.available}"
        )


class UnsupportedServicesFormatError(ResourceBundleError):
    """Raised when a service definition file type has no loader."""

    def __init__(self, services_format: str, available: Iterable[str]):
        self.services_format = services_format
        self.available = list(available)
        super().__init__(
            f'Loader "{services_format}" not in list of available loaders: '
            f"{self.available}"
        )


class InvalidConfigurationError(ResourceBundleError):
    """Raised when a configuration tree violates its schema.

    Attributes:
        paths: Dotted paths of every offending node, in error order.
    """

    def __init__(self, root: str, paths: Sequence[str], details: Sequence[str]):
        self.root = root
        self.paths = list(paths)
        lines = [f"{path}: {detail}" for path, detail in zip(self.paths, details)]
        super().__init__(
            f'Invalid configuration for "{root}":\n' + "\n".join(lines)
        )


class MissingServiceDefinitionError(ResourceBundleError):
    """Raised when a service definition file exists on none of the lookup paths."""

    def __init__(self, filename: str, searched: Sequence[str]):
        self.filename = filename
        self.searched = list(searched)
        super().__init__(
            f'Service definition file "{filename}" not found in: {self.searched}'
        )


class MissingConfigDirectoryError(ResourceBundleError):
    """Raised when a bundle's configuration directory does not exist."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f'The configuration directory "{directory}" does not exist.')


class ParameterNotFoundError(ResourceBundleError, KeyError):
    """Raised when reading a container parameter that was never set."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'You have requested a non-existent parameter "{key}".')

    def __str__(self) -> str:
        return self.args[0]


class FrozenContainerError(ResourceBundleError):
    """Raised when writing to a container that has already been compiled."""
    pass


class UnsupportedResourceOperationError(ResourceBundleError):
    """Raised when a resource method override names an unknown operation."""

    def __init__(self, method: str, available: Iterable[str]):
        self.method = method
        self.available = list(available)
        super().__init__(
            f'Resource method "{method}" is not one of: {self.available}'
        )
