"""
Container builder used as the build context of one container build.

The builder accumulates parameters, service definitions, aliases and
compiler passes while bundles and extensions are loaded. `compile()` runs
the passes in registration order and freezes the builder; every write after
that raises `FrozenContainerError`.
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from resource_bundle.errors import FrozenContainerError, ParameterNotFoundError
from resource_bundle.model.service_definition import ServiceDefinition

logger = logging.getLogger(__name__)


class CompilerPassInterface(ABC):
    """A build step run against the container when it is compiled."""

    @abstractmethod
    def process(self, container: "ContainerBuilderInterface") -> None:
        pass


class ContainerBuilderInterface(ABC):
    """The container operations resource bundles and extensions rely on."""

    @abstractmethod
    def set_parameter(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def get_parameter(self, key: str) -> Any:
        """
        Raises:
            ParameterNotFoundError: If the parameter was never set
        """
        pass

    @abstractmethod
    def has_parameter(self, key: str) -> bool:
        pass

    @abstractmethod
    def add_compiler_pass(self, compiler_pass: CompilerPassInterface) -> None:
        pass

    @abstractmethod
    def set_definition(self, service_id: str, definition: ServiceDefinition) -> ServiceDefinition:
        pass

    @abstractmethod
    def set_alias(self, alias: str, service_id: str) -> None:
        pass


class ContainerBuilder(ContainerBuilderInterface):
    """In-memory container builder scoped to a single build."""

    def __init__(self, parameters: Optional[Dict[str, Any]] = None) -> None:
        self._parameters: Dict[str, Any] = dict(parameters or {})
        self._definitions: Dict[str, ServiceDefinition] = {}
        self._aliases: Dict[str, str] = {}
        self._compiler_passes: List[CompilerPassInterface] = []
        self._compiled = False

    @property
    def is_compiled(self) -> bool:
        return self._compiled

    def set_parameter(self, key: str, value: Any) -> None:
        self._ensure_not_compiled()
        if key in self._parameters and self._parameters[key] != value:
            logger.debug(f"Overriding parameter '{key}'")
        self._parameters[key] = value
        logger.debug(f"Set parameter '{key}' = {value!r}")

    def get_parameter(self, key: str) -> Any:
        if key not in self._parameters:
            raise ParameterNotFoundError(key)
        return self._parameters[key]

    def has_parameter(self, key: str) -> bool:
        return key in self._parameters

    def get_parameters(self) -> Dict[str, Any]:
        """Return a deep copy of all parameters."""
        return copy.deepcopy(self._parameters)

    def add_compiler_pass(self, compiler_pass: CompilerPassInterface) -> None:
        self._ensure_not_compiled()
        self._compiler_passes.append(compiler_pass)
        logger.debug(f"Added compiler pass {compiler_pass!r}")

    def get_compiler_passes(self) -> List[CompilerPassInterface]:
        return list(self._compiler_passes)

    def set_definition(self, service_id: str, definition: ServiceDefinition) -> ServiceDefinition:
        self._ensure_not_compiled()
        self._aliases.pop(service_id, None)
        self._definitions[service_id] = definition
        logger.debug(f"Registered service '{service_id}' ({definition.class_name})")
        return definition

    def has_definition(self, service_id: str) -> bool:
        return service_id in self._definitions

    def get_definition(self, service_id: str) -> ServiceDefinition:
        return self._definitions[self._aliases.get(service_id, service_id)]

    def get_definitions(self) -> Dict[str, ServiceDefinition]:
        return dict(self._definitions)

    def set_alias(self, alias: str, service_id: str) -> None:
        self._ensure_not_compiled()
        self._aliases[alias] = service_id

    def has_alias(self, alias: str) -> bool:
        return alias in self._aliases

    def get_alias(self, alias: str) -> str:
        return self._aliases[alias]

    def compile(self) -> None:
        """Run all compiler passes in registration order, then freeze the builder."""
        self._ensure_not_compiled()
        logger.info(f"Compiling container with {len(self._compiler_passes)} compiler pass(es)")
        for compiler_pass in self._compiler_passes:
            compiler_pass.process(self)
        self._compiled = True

    def _ensure_not_compiled(self) -> None:
        if self._compiled:
            raise FrozenContainerError("Cannot modify a compiled container.")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({len(self._parameters)} parameters, "
            f"{len(self._definitions)} services, compiled={self._compiled})"
        )
