"""
Unit tests for ResourceResolver and RequestConfiguration.
"""
from unittest.mock import Mock

import pytest

from resource_bundle.controller.request_configuration import RequestConfiguration
from resource_bundle.controller.resource_resolver import ResourceResolver
from resource_bundle.enum.resource_operation_enum import RepositoryOperationEnum, to_snake_case
from resource_bundle.errors import UnsupportedResourceOperationError
from resource_bundle.interfaces.resource.factory_interface import FactoryInterface
from resource_bundle.interfaces.resource.repository_interface import RepositoryInterface


@pytest.fixture
def repository() -> Mock:
    return Mock(spec=RepositoryInterface)


@pytest.fixture
def factory() -> Mock:
    return Mock(spec=FactoryInterface)


class TestResourceResolverGetResource:
    """Test cases for get_resource."""

    def test_default_method_without_arguments(self, repository: Mock) -> None:
        """Test that the default operation is called with no arguments when none are configured."""
        # Given
        repository.find_all.return_value = ["product"]
        resolver = ResourceResolver(RequestConfiguration())

        # When
        result = resolver.get_resource(repository, "findAll")

        # Then
        assert result == ["product"]
        repository.find_all.assert_called_once_with()

    def test_default_arguments(self, repository: Mock) -> None:
        # Given
        resolver = ResourceResolver(RequestConfiguration())

        # When
        resolver.get_resource(repository, "find", [42])

        # Then
        repository.find.assert_called_once_with(42)

    def test_route_override_replaces_method_and_arguments(self, repository: Mock) -> None:
        """Test that a route-level override wins over the caller's defaults."""
        # Given
        configuration = RequestConfiguration({"repository": {"method": "findBy", "arguments": "status"}})
        resolver = ResourceResolver(configuration)

        # When
        resolver.get_resource(repository, "findAll", ["ignored"])

        # Then
        repository.find_by.assert_called_once_with("status")
        repository.find_all.assert_not_called()

    def test_request_attribute_arguments(self, repository: Mock) -> None:
        # Given
        configuration = RequestConfiguration(
            {"repository": {"method": "find_one_by", "arguments": [{"slug": "$slug"}]}},
            {"slug": "t-shirt"},
        )
        resolver = ResourceResolver(configuration)

        # When
        resolver.get_resource(repository, "find")

        # Then
        repository.find_one_by.assert_called_once_with({"slug": "t-shirt"})

    def test_missing_request_attribute_raises(self, repository: Mock) -> None:
        # Given
        configuration = RequestConfiguration({"repository": {"arguments": ["$id"]}})
        resolver = ResourceResolver(configuration)

        # When / Then
        with pytest.raises(KeyError, match="id"):
            resolver.get_resource(repository, "find")
        repository.find.assert_not_called()

    def test_operation_errors_propagate_unchanged(self, repository: Mock) -> None:
        # Given
        error = LookupError("connection lost")
        repository.find.side_effect = error
        resolver = ResourceResolver(RequestConfiguration())

        # When
        with pytest.raises(LookupError) as exc_info:
            resolver.get_resource(repository, "find", [1])

        # Then
        assert exc_info.value is error

    @pytest.mark.parametrize("method", ["delete", "__class__", "findEverything", "create_new"])
    def test_unsupported_operation_raises(self, repository: Mock, method: str) -> None:
        """Test that only declared repository operations can be invoked."""
        # Given
        resolver = ResourceResolver(RequestConfiguration({"repository": {"method": method}}))

        # When
        with pytest.raises(UnsupportedResourceOperationError) as exc_info:
            resolver.get_resource(repository, "findAll")

        # Then
        assert exc_info.value.method == method
        assert "find_all" in exc_info.value.available


class TestResourceResolverCreateResource:
    """Test cases for create_resource."""

    def test_default_factory_method(self, factory: Mock) -> None:
        # Given
        factory.create_new.return_value = "new product"
        resolver = ResourceResolver(RequestConfiguration())

        # When
        result = resolver.create_resource(factory, "createNew")

        # Then
        assert result == "new product"
        factory.create_new.assert_called_once_with()

    def test_factory_override_with_request_attribute(self, factory: Mock) -> None:
        # Given
        configuration = RequestConfiguration(
            {"factory": {"method": "createFor", "arguments": ["$productId"]}},
            {"productId": 7},
        )
        resolver = ResourceResolver(configuration)

        # When
        resolver.create_resource(factory, "createNew")

        # Then
        factory.create_for.assert_called_once_with(7)

    def test_repository_operation_is_not_a_factory_operation(self, factory: Mock) -> None:
        # Given
        resolver = ResourceResolver(RequestConfiguration())

        # When / Then
        with pytest.raises(UnsupportedResourceOperationError):
            resolver.create_resource(factory, "findAll")


class TestRequestConfiguration:
    """Test cases for RequestConfiguration."""

    def test_unrelated_route_parameters_are_ignored(self) -> None:
        # Given / When
        configuration = RequestConfiguration({"template": "Product:index.html", "paginate": 10})

        # Then
        assert configuration.get_provider_method("findAll") == "findAll"
        assert configuration.get_provider_arguments([1]) == [1]

    def test_nested_arguments_are_resolved(self) -> None:
        # Given
        configuration = RequestConfiguration(
            {"repository": {"arguments": [["$a", {"b": "$b"}], "$literal-is-attribute", 3]}},
            {"a": 1, "b": 2, "literal-is-attribute": "x"},
        )

        # When / Then
        assert configuration.get_provider_arguments() == [[1, {"b": 2}], "x", 3]

    @pytest.mark.parametrize(
        "name, expected",
        [("findOneBy", "find_one_by"), ("find_all", "find_all"), ("createPaginator", "create_paginator")],
    )
    def test_method_names_normalize(self, name: str, expected: str) -> None:
        assert to_snake_case(name) == expected
        assert RepositoryOperationEnum.from_name(name).value == expected
