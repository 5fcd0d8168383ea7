"""
Build orchestration of a container from resource bundles.

One `Kernel.build` call is one container build: it starts a fresh
`ContainerBuilder`, lets every bundle register its compiler passes, loads
every extension with the configuration trees of its alias and compiles the
container. The builder returned is frozen.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from injector import inject

from resource_bundle.bundle.abstract_resource_bundle import AbstractResourceBundle
from resource_bundle.config.application_config import ApplicationConfig
from resource_bundle.config.config_adapter import ConfigAdapter
from resource_bundle.config.configuration_processor import ConfigurationProcessor, RawConfig
from resource_bundle.dependency_injection.compiler import MappingPassFactory
from resource_bundle.dependency_injection.container_builder import ContainerBuilder
from resource_bundle.interfaces.driver_registry_interface import DriverRegistryInterface
from resource_bundle.logging.build_logger import BuildLogger

logger = logging.getLogger(__name__)


class Kernel:

    @inject
    def __init__(
        self,
        settings: ApplicationConfig,
        driver_registry: DriverRegistryInterface,
        processor: ConfigurationProcessor,
        mapping_pass_factory: MappingPassFactory,
    ):
        self.settings = settings
        self.driver_registry = driver_registry
        self.processor = processor
        self.mapping_pass_factory = mapping_pass_factory

    def build(
        self,
        bundles: Sequence[AbstractResourceBundle],
        configs: Optional[Mapping[str, RawConfig]] = None,
    ) -> ContainerBuilder:
        """
        Build and compile a container.

        Args:
            bundles: Bundles in registration order
            configs: Extension alias to its configuration tree(s)

        Returns:
            The compiled container

        Raises:
            ResourceBundleError: If any bundle is misconfigured
        """
        configs = configs or {}
        application_name = self.settings.application_name

        container = ContainerBuilder(
            {
                "kernel.application_name": application_name,
                "kernel.stage": self.settings.stage,
                "kernel.version": self.settings.version,
            }
        )
        with BuildLogger(application_name) as build_log:
            build_log.info(
                "Building container (application=%s, version=%s, stage=%s, bundles=%d)",
                application_name, self.settings.version, self.settings.stage, len(bundles),
            )
            for bundle in bundles:
                with build_log.step(bundle.get_capabilities().name):
                    bundle.build(container, self.mapping_pass_factory, self.driver_registry)

            for bundle in bundles:
                extension = bundle.get_container_extension(
                    self.driver_registry, self.processor, application_name
                )
                if extension is None:
                    continue
                alias = extension.get_alias()
                with build_log.step(alias):
                    build_log.info("Loading extension")
                    extension.load(configs.get(alias), container)

            with build_log.step("compile"):
                container.compile()

        logger.info(f"Container built: {container!r}")
        return container

    @staticmethod
    def load_config_files(paths: Sequence[str]) -> Dict[str, List[Any]]:
        """
        Read configuration files into per-alias lists of trees, in file order.

        Args:
            paths: YAML or JSON files, each keyed by extension alias
        """
        configs: Dict[str, List[Any]] = {}
        for path in paths:
            for alias, tree in ConfigAdapter.load_raw(path).items():
                configs.setdefault(alias, []).append(tree)
        return configs
