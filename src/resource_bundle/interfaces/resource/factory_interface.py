from abc import ABC, abstractmethod
from typing import Any


class FactoryInterface(ABC):
    """Creation operations a resource factory offers to the resource resolver."""

    @abstractmethod
    def create_new(self) -> Any:
        """Create a new, empty resource."""
        pass

    @abstractmethod
    def create_for(self, *arguments: Any) -> Any:
        """Create a new resource bound to the given arguments, e.g. a parent resource."""
        pass
