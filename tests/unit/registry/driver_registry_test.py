"""
Unit tests for DriverRegistry.

Tests driver descriptor lookup, supported driver resolution and mapping pass
method selection.
"""
import pytest

from resource_bundle.enum.driver_enum import DriverEnum
from resource_bundle.enum.mapping_format_enum import MappingFormatEnum
from resource_bundle.errors import UnknownDriverError, UnsupportedMappingFormatError
from resource_bundle.model.bundle_capabilities import BundleCapabilities
from resource_bundle.registry.driver_registry import DriverRegistry, to_driver


class TestDriverRegistryMappingInfo:
    """Test cases for get_mapping_info."""

    @pytest.mark.parametrize("driver", list(DriverEnum))
    def test_known_driver_has_managers(self, driver_registry: DriverRegistry, driver: DriverEnum) -> None:
        """Test that every known driver maps to a descriptor with at least one manager."""
        # Given / When
        descriptor = driver_registry.get_mapping_info(driver)

        # Then
        assert descriptor.driver is driver
        assert len(descriptor.manager_service_names) > 0
        assert descriptor.mapping_pass_id

    @pytest.mark.parametrize(
        "driver, manager",
        [
            ("doctrine/orm", "doctrine.orm.entity_manager"),
            ("doctrine/mongodb-odm", "doctrine_mongodb.odm.document_manager"),
            ("doctrine/phpcr-odm", "doctrine_phpcr.odm.document_manager"),
        ],
    )
    def test_string_driver_resolves_manager(self, driver_registry: DriverRegistry, driver: str, manager: str) -> None:
        """Test that string driver values resolve to the expected object manager."""
        # Given / When
        descriptor = driver_registry.get_mapping_info(driver)

        # Then
        assert descriptor.manager_service_names == (manager,)
        assert descriptor.default_manager == manager

    @pytest.mark.parametrize("driver", ["doctrine/dbal", "propel", "", "DOCTRINE/ORM"])
    def test_unknown_driver_raises(self, driver_registry: DriverRegistry, driver: str) -> None:
        """Test that any other string is rejected as an unknown driver."""
        # Given / When / Then
        with pytest.raises(UnknownDriverError, match="Unknown driver"):
            driver_registry.get_mapping_info(driver)

    def test_to_driver_passes_enum_through(self) -> None:
        """Test that to_driver returns enum members unchanged."""
        assert to_driver(DriverEnum.DOCTRINE_PHPCR_ODM) is DriverEnum.DOCTRINE_PHPCR_ODM


class TestDriverRegistrySupportedDrivers:
    """Test cases for supported driver resolution."""

    def test_supported_drivers_come_from_capabilities(self, driver_registry: DriverRegistry) -> None:
        """Test that the registry reports exactly what the bundle declares."""
        # Given
        capabilities = BundleCapabilities(
            name="SyliusOrderBundle",
            prefix="sylius_order",
            supported_drivers=frozenset({DriverEnum.DOCTRINE_ORM, DriverEnum.DOCTRINE_MONGODB_ODM}),
        )

        # When
        supported = driver_registry.get_supported_drivers(capabilities)

        # Then
        assert supported == {DriverEnum.DOCTRINE_ORM, DriverEnum.DOCTRINE_MONGODB_ODM}

    def test_is_supported(self, driver_registry: DriverRegistry) -> None:
        """Test supported, unsupported and unknown drivers."""
        # Given
        capabilities = BundleCapabilities(name="SyliusProductBundle", prefix="sylius_product")

        # When / Then
        assert driver_registry.is_supported(capabilities, "doctrine/orm")
        assert not driver_registry.is_supported(capabilities, DriverEnum.DOCTRINE_PHPCR_ODM)
        assert not driver_registry.is_supported(capabilities, "propel")

    def test_unknown_declared_driver_raises(self, driver_registry: DriverRegistry) -> None:
        """Test that a bundle declaring an unknown driver is not masked as unsupported."""
        # Given
        capabilities = BundleCapabilities(
            name="PropelBundle",
            prefix="propel",
            supported_drivers=frozenset({"propel"}),
        )

        # When / Then
        with pytest.raises(UnknownDriverError):
            driver_registry.get_supported_drivers(capabilities)
        with pytest.raises(UnknownDriverError):
            driver_registry.is_supported(capabilities, "doctrine/orm")

    def test_contains_known_drivers_only(self, driver_registry: DriverRegistry) -> None:
        assert "doctrine/orm" in driver_registry
        assert "propel" not in driver_registry


class TestDriverRegistryMappingPassMethod:
    """Test cases for get_mapping_pass_method."""

    @pytest.mark.parametrize(
        "mapping_format, method",
        [
            (MappingFormatEnum.XML, "create_xml_mapping_driver"),
            (MappingFormatEnum.YAML, "create_yaml_mapping_driver"),
            ("xml", "create_xml_mapping_driver"),
            ("yaml", "create_yaml_mapping_driver"),
        ],
    )
    def test_supported_formats(self, driver_registry: DriverRegistry, mapping_format, method: str) -> None:
        assert driver_registry.get_mapping_pass_method(mapping_format) == method

    @pytest.mark.parametrize("mapping_format", [MappingFormatEnum.ANNOTATION, "php", "yml"])
    def test_unsupported_format_raises(self, driver_registry: DriverRegistry, mapping_format) -> None:
        """Test that formats other than XML and YAML are rejected with the available list."""
        # Given / When
        with pytest.raises(UnsupportedMappingFormatError) as exc_info:
            driver_registry.get_mapping_pass_method(mapping_format)

        # Then
        assert exc_info.value.available == ["xml", "yaml"]
