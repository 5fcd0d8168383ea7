"""
Loaders for service definition files.

Both loaders understand the same two sections: ``parameters``, copied into
the container as-is, and ``services``, turned into `ServiceDefinition`
entries or aliases. Service references are kept as ``@service_id`` strings
in either format.
"""
import logging
import xml.etree.ElementTree as ElementTree
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from resource_bundle.dependency_injection.container_builder import ContainerBuilderInterface
from resource_bundle.enum.mapping_format_enum import ServicesFormatEnum
from resource_bundle.errors import UnsupportedServicesFormatError
from resource_bundle.model.service_definition import ServiceDefinition

logger = logging.getLogger(__name__)


class FileLocator:
    """Finds files relative to a list of directories, first match wins."""

    def __init__(self, paths: Union[str, Path, Sequence[Union[str, Path]]]):
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self.paths: List[Path] = [Path(p) for p in paths]

    def locate(self, name: str) -> Optional[Path]:
        """
        Locate a file.

        Args:
            name: Relative file name, or an absolute path

        Returns:
            Path of the first existing match, None if there is none
        """
        candidate = Path(name)
        if candidate.is_absolute():
            return candidate if candidate.is_file() else None

        for directory in self.paths:
            path = directory / name
            if path.is_file():
                return path
        return None


class FileLoaderInterface(ABC):
    """Loads a definition file into a container."""

    @abstractmethod
    def load(self, resource: Union[str, Path]) -> None:
        """
        Load a definition file.

        Args:
            resource: File path, absolute or relative to the locator paths

        Raises:
            FileNotFoundError: If the file cannot be located
        """
        pass


class _FileLoader(FileLoaderInterface):

    def __init__(self, container: ContainerBuilderInterface, locator: FileLocator):
        self.container = container
        self.locator = locator

    def load(self, resource: Union[str, Path]) -> None:
        path = self.locator.locate(str(resource))
        if path is None:
            raise FileNotFoundError(f"Definition file not found: {resource}")

        logger.debug(f"Loading definitions from {path}")
        parameters, services = self._parse(path)

        for key, value in parameters.items():
            self.container.set_parameter(key, value)
        for service_id, definition in services.items():
            if isinstance(definition, str):
                self.container.set_alias(service_id, definition)
            else:
                self.container.set_definition(service_id, definition)

        logger.info(
            f"Loaded {len(parameters)} parameter(s) and {len(services)} service(s) from {path.name}"
        )

    @abstractmethod
    def _parse(self, path: Path) -> "tuple[Dict[str, Any], Dict[str, Union[str, ServiceDefinition]]]":
        pass


class YamlFileLoader(_FileLoader):
    """Loads YAML service definition files."""

    def _parse(self, path: Path):
        with open(path) as f:
            content = yaml.safe_load(f) or {}
        if not isinstance(content, dict):
            raise ValueError(f"The service file {path} is not valid: a mapping is expected")

        parameters = dict(content.get("parameters") or {})
        services: Dict[str, Union[str, ServiceDefinition]] = {}
        for service_id, service in (content.get("services") or {}).items():
            if isinstance(service, str) and service.startswith("@"):
                services[service_id] = service[1:]
            elif isinstance(service, dict) and "alias" in service:
                services[service_id] = service["alias"]
            else:
                services[service_id] = self._parse_definition(service_id, service or {}, path)
        return parameters, services

    @staticmethod
    def _parse_definition(service_id: str, service: Any, path: Path) -> ServiceDefinition:
        if not isinstance(service, dict):
            raise ValueError(f'Service "{service_id}" in {path} must be a mapping')

        tags: Dict[str, Dict[str, Any]] = {}
        for tag in service.get("tags") or []:
            if isinstance(tag, str):
                tags[tag] = {}
            else:
                attributes = dict(tag)
                tags[attributes.pop("name")] = attributes

        return ServiceDefinition(
            class_name=service.get("class"),
            arguments=list(service.get("arguments") or []),
            tags=tags,
            public=bool(service.get("public", True)),
            factory=service.get("factory"),
        )


class XmlFileLoader(_FileLoader):
    """Loads XML service definition files, with or without the services namespace."""

    def _parse(self, path: Path):
        root = ElementTree.parse(path).getroot()

        parameters: Dict[str, Any] = {}
        services: Dict[str, Union[str, ServiceDefinition]] = {}
        for section in root:
            if _local_name(section) == "parameters":
                for parameter in _children(section, "parameter"):
                    parameters[parameter.get("key")] = self._parse_value(parameter)
            elif _local_name(section) == "services":
                for service in _children(section, "service"):
                    service_id = service.get("id")
                    if service.get("alias"):
                        services[service_id] = service.get("alias")
                    else:
                        services[service_id] = self._parse_definition(service)
        return parameters, services

    def _parse_definition(self, service: ElementTree.Element) -> ServiceDefinition:
        tags: Dict[str, Dict[str, Any]] = {}
        for tag in _children(service, "tag"):
            attributes = dict(tag.attrib)
            tags[attributes.pop("name")] = attributes

        return ServiceDefinition(
            class_name=service.get("class"),
            arguments=[self._parse_value(argument) for argument in _children(service, "argument")],
            tags=tags,
            public=service.get("public", "true").lower() != "false",
            factory=service.get("factory-service") or service.get("factory"),
        )

    def _parse_value(self, element: ElementTree.Element) -> Any:
        value_type = element.get("type")
        if value_type == "service":
            return f"@{element.get('id')}"
        if value_type == "collection":
            items = list(element)
            if items and all(item.get("key") is not None for item in items):
                return {item.get("key"): self._parse_value(item) for item in items}
            return [self._parse_value(item) for item in items]

        text = (element.text or "").strip()
        if value_type == "string":
            return text
        lowered = text.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        if lowered == "null":
            return None
        return text


def _local_name(element: ElementTree.Element) -> str:
    return element.tag.rsplit("}", 1)[-1]


def _children(element: ElementTree.Element, name: str) -> List[ElementTree.Element]:
    return [child for child in element if _local_name(child) == name]


_LOADERS = {
    ServicesFormatEnum.XML: XmlFileLoader,
    ServicesFormatEnum.YAML: YamlFileLoader,
}


def get_loader(
    container: ContainerBuilderInterface,
    services_format: Union[ServicesFormatEnum, str],
    directory: Union[str, Path],
) -> FileLoaderInterface:
    """
    Create the loader for a services file type.

    Raises:
        UnsupportedServicesFormatError: If no loader handles the file type
    """
    value = services_format.value if isinstance(services_format, ServicesFormatEnum) else services_format
    for supported, loader_class in _LOADERS.items():
        if supported.value == value:
            return loader_class(container, FileLocator(directory))

    raise UnsupportedServicesFormatError(str(value), [supported.value for supported in _LOADERS])
