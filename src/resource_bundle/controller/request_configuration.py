import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import ConfigDict, field_validator

from resource_bundle.base.base_schema import BaseSchema

logger = logging.getLogger(__name__)


class OperationOverride(BaseSchema):
    """Route-level replacement of a resource operation and its arguments."""

    method: Optional[str] = None
    arguments: Optional[List[Any]] = None

    @field_validator("arguments", mode="before")
    @classmethod
    def wrap_single_argument(cls, value: Any) -> Any:
        if value is None or isinstance(value, list):
            return value
        if isinstance(value, tuple):
            return list(value)
        return [value]


class RouteParameters(BaseSchema):
    """Resource section of a route's defaults; keys for other concerns are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    repository: OperationOverride = OperationOverride()
    factory: OperationOverride = OperationOverride()


class RequestConfiguration:
    """
    Resource configuration of the current request.

    Route parameters may override the provider and factory operations:

        {"repository": {"method": "findBy", "arguments": ["$status"]}}

    String arguments starting with "$" are replaced by the request attribute
    of that name.
    """

    def __init__(
        self,
        parameters: Optional[Mapping[str, Any]] = None,
        request_attributes: Optional[Mapping[str, Any]] = None,
    ):
        self.parameters = RouteParameters.model_validate(dict(parameters or {}))
        self.request_attributes: Dict[str, Any] = dict(request_attributes or {})

    def get_provider_method(self, default: str) -> str:
        return self.parameters.repository.method or default

    def get_provider_arguments(self, default: Sequence[Any] = ()) -> List[Any]:
        return self._arguments(self.parameters.repository, default)

    def get_factory_method(self, default: str) -> str:
        return self.parameters.factory.method or default

    def get_factory_arguments(self, default: Sequence[Any] = ()) -> List[Any]:
        return self._arguments(self.parameters.factory, default)

    def _arguments(self, override: OperationOverride, default: Sequence[Any]) -> List[Any]:
        if override.arguments is None:
            return list(default)
        return [self._resolve(argument) for argument in override.arguments]

    def _resolve(self, argument: Any) -> Any:
        if isinstance(argument, str) and argument.startswith("$"):
            name = argument[1:]
            if name not in self.request_attributes:
                logger.error(f"Request attribute '{name}' referenced by resource arguments is not set")
                raise KeyError(name)
            return self.request_attributes[name]
        if isinstance(argument, dict):
            return {key: self._resolve(value) for key, value in argument.items()}
        if isinstance(argument, list):
            return [self._resolve(value) for value in argument]
        return argument
