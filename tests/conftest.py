"""
Shared test fixtures for resource bundle tests.

Provides sample bundles backed by the definition files in tests/resources,
plus fresh build services for every test.
"""
from pathlib import Path
from typing import Generator

import pytest

from resource_bundle.bundle.abstract_resource_bundle import AbstractResourceBundle
from resource_bundle.config.configuration_processor import ConfigurationProcessor
from resource_bundle.dependency_injection.abstract_resource_extension import AbstractResourceExtension
from resource_bundle.dependency_injection.compiler import MappingPassFactory
from resource_bundle.dependency_injection.container_builder import ContainerBuilder
from resource_bundle.enum.configure_stage_enum import ConfigureStageEnum
from resource_bundle.enum.driver_enum import DriverEnum
from resource_bundle.enum.mapping_format_enum import MappingFormatEnum, ServicesFormatEnum
from resource_bundle.model.bundle_capabilities import BundleCapabilities
from resource_bundle.registry.driver_registry import DriverRegistry

RESOURCES_DIR = Path(__file__).parent / "resources"


class ProductExtension(AbstractResourceExtension):
    stages = (
        ConfigureStageEnum.DATABASE,
        ConfigureStageEnum.PARAMETERS,
        ConfigureStageEnum.VALIDATORS,
    )


class ProductBundle(AbstractResourceBundle):
    capabilities = BundleCapabilities(
        name="SyliusProductBundle",
        prefix="sylius_product",
        supported_drivers=frozenset({DriverEnum.DOCTRINE_ORM}),
        services_format=ServicesFormatEnum.XML,
        path=str(RESOURCES_DIR / "bundles" / "product"),
        model_namespace="Sylius\\Component\\Product\\Model",
        mapping_format=MappingFormatEnum.XML,
        model_interfaces={
            "Sylius\\Component\\Product\\Model\\ProductInterface": "sylius.model.product.class",
        },
    )
    extension_class = ProductExtension


class OrderExtension(AbstractResourceExtension):
    stages = (ConfigureStageEnum.DATABASE, ConfigureStageEnum.PARAMETERS)


class OrderBundle(AbstractResourceBundle):
    capabilities = BundleCapabilities(
        name="SyliusOrderBundle",
        prefix="sylius_order",
        supported_drivers=frozenset({DriverEnum.DOCTRINE_ORM, DriverEnum.DOCTRINE_MONGODB_ODM}),
        services_format=ServicesFormatEnum.YAML,
        path=str(RESOURCES_DIR / "bundles" / "order"),
        model_namespace="Sylius\\Component\\Order\\Model",
        mapping_format=MappingFormatEnum.YAML,
    )
    extension_class = OrderExtension


@pytest.fixture
def resources_dir() -> Path:
    """Directory holding the test resource files."""
    return RESOURCES_DIR


@pytest.fixture
def container() -> ContainerBuilder:
    """Create a fresh container builder for each test."""
    return ContainerBuilder()


@pytest.fixture
def driver_registry() -> DriverRegistry:
    return DriverRegistry()


@pytest.fixture
def processor() -> ConfigurationProcessor:
    return ConfigurationProcessor()


@pytest.fixture
def mapping_pass_factory() -> MappingPassFactory:
    return MappingPassFactory()


@pytest.fixture
def product_bundle() -> ProductBundle:
    return ProductBundle()


@pytest.fixture
def order_bundle() -> OrderBundle:
    return OrderBundle()


@pytest.fixture
def product_extension(driver_registry: DriverRegistry, processor: ConfigurationProcessor) -> ProductExtension:
    """Product extension backed by XML definitions in the primary lookup path."""
    return ProductExtension(ProductBundle.capabilities, driver_registry, processor)


@pytest.fixture
def order_extension(driver_registry: DriverRegistry, processor: ConfigurationProcessor) -> OrderExtension:
    """Order extension backed by YAML definitions in the services/ lookup path."""
    return OrderExtension(OrderBundle.capabilities, driver_registry, processor)


@pytest.fixture
def product_config() -> dict:
    return {
        "driver": "doctrine/orm",
        "classes": {
            "product": {
                "model": "Sylius\\Component\\Product\\Model\\Product",
                "controller": "Sylius\\Bundle\\ResourceBundle\\Controller\\ResourceController",
                "form": "Sylius\\Bundle\\ProductBundle\\Form\\Type\\ProductType",
            },
        },
        "templates": {"product": "SyliusWebBundle:Backend/Product"},
        "validation_groups": {"product": ["sylius"]},
    }


@pytest.fixture
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Remove resource bundle environment overrides for the duration of a test."""
    import os

    for name in list(os.environ):
        if name.startswith("RESOURCE_BUNDLE__"):
            monkeypatch.delenv(name)
    yield monkeypatch
