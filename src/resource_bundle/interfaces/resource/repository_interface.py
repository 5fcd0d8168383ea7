from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class RepositoryInterface(ABC):
    """
    Read operations a resource provider offers to the resource resolver.

    Route configuration may swap the default operation for any other one
    declared here, never for an arbitrary method.
    """

    @abstractmethod
    def find(self, identifier: Any) -> Optional[Any]:
        pass

    @abstractmethod
    def find_all(self) -> List[Any]:
        pass

    @abstractmethod
    def find_by(self, *criteria: Any) -> List[Any]:
        pass

    @abstractmethod
    def find_one_by(self, *criteria: Any) -> Optional[Any]:
        pass

    @abstractmethod
    def create_paginator(
        self, criteria: Optional[Dict[str, Any]] = None, sorting: Optional[Dict[str, str]] = None
    ) -> Any:
        pass
