from typing import Any, Sequence

from resource_bundle.controller.request_configuration import RequestConfiguration
from resource_bundle.enum.resource_operation_enum import (
    FactoryOperationEnum,
    RepositoryOperationEnum,
)
from resource_bundle.interfaces.resource.factory_interface import FactoryInterface
from resource_bundle.interfaces.resource.repository_interface import RepositoryInterface


class ResourceResolver:
    """
    Invokes provider and factory operations, honoring per-route overrides.

    Whatever the invoked operation raises reaches the caller unchanged.
    """

    def __init__(self, configuration: RequestConfiguration):
        self.configuration = configuration

    def get_resource(
        self, provider: RepositoryInterface, default_method: str, default_arguments: Sequence[Any] = ()
    ) -> Any:
        """
        Get resources from the provider.

        Raises:
            UnsupportedResourceOperationError: If the method is not a repository operation
        """
        operation = RepositoryOperationEnum.from_name(self.configuration.get_provider_method(default_method))
        arguments = self.configuration.get_provider_arguments(default_arguments)

        return getattr(provider, operation.value)(*arguments)

    def create_resource(
        self, factory: FactoryInterface, default_method: str, default_arguments: Sequence[Any] = ()
    ) -> Any:
        """
        Create a resource with the factory.

        Raises:
            UnsupportedResourceOperationError: If the method is not a factory operation
        """
        operation = FactoryOperationEnum.from_name(self.configuration.get_factory_method(default_method))
        arguments = self.configuration.get_factory_arguments(default_arguments)

        return getattr(factory, operation.value)(*arguments)
