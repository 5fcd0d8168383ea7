import logging
from typing import Dict, Optional

from resource_bundle.dependency_injection.container_builder import ContainerBuilderInterface
from resource_bundle.model.driver_descriptor import DriverDescriptor
from resource_bundle.model.service_definition import ServiceDefinition

logger = logging.getLogger(__name__)


class DatabaseDriver:
    """
    Registers the persistence services of one resource for one driver.

    For a resource ``product`` under prefix ``sylius`` this sets:

    - parameter ``sylius.model.product.class``
    - alias ``sylius.manager.product`` to the driver's default object manager
    - service ``sylius.repository.product``
    - service ``sylius.controller.product`` when a controller class is configured
    """

    def __init__(
        self,
        descriptor: DriverDescriptor,
        container: ContainerBuilderInterface,
        prefix: str,
        resource_name: str,
        template: Optional[str] = None,
    ):
        self.descriptor = descriptor
        self.container = container
        self.prefix = prefix
        self.resource_name = resource_name
        self.template = template

    def load(self, classes: Dict[str, str]) -> None:
        """
        Register the services of the resource.

        Args:
            classes: Service kind to class name; must contain "model"
        """
        self.container.set_parameter(self._key("model", suffix=".class"), classes["model"])
        self.container.set_alias(self._key("manager"), self.descriptor.default_manager)
        self.container.set_definition(self._key("repository"), self._repository_definition(classes))

        if "controller" in classes:
            self.container.set_definition(self._key("controller"), self._controller_definition(classes))

        logger.debug(
            f"Loaded {self.descriptor.driver.value} services for resource '{self.prefix}.{self.resource_name}'"
        )

    def _repository_definition(self, classes: Dict[str, str]) -> ServiceDefinition:
        return ServiceDefinition(
            class_name=classes.get("repository", self.descriptor.default_repository_class),
            arguments=[
                f"@{self._key('manager')}",
                f"%{self._key('model', suffix='.class')}%",
            ],
        )

    def _controller_definition(self, classes: Dict[str, str]) -> ServiceDefinition:
        configuration = {
            "bundle_prefix": self.prefix,
            "resource_name": self.resource_name,
            "template_namespace": self.template,
        }
        return ServiceDefinition(class_name=classes["controller"], arguments=[configuration])

    def _key(self, kind: str, suffix: str = "") -> str:
        return f"{self.prefix}.{kind}.{self.resource_name}{suffix}"
