import re
from enum import Enum

from resource_bundle.errors import UnsupportedResourceOperationError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """Convert "findOneBy" style method names to "find_one_by"."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class _OperationEnum(Enum):

    @classmethod
    def from_name(cls, name: str) -> "_OperationEnum":
        """
        Resolve an operation from its method name, camelCase or snake_case.

        Raises:
            UnsupportedResourceOperationError: If no operation has that name
        """
        try:
            return cls(to_snake_case(name))
        except ValueError:
            raise UnsupportedResourceOperationError(name, [op.value for op in cls]) from None


class RepositoryOperationEnum(_OperationEnum):
    """Operations the resource resolver may invoke on a provider."""

    FIND = "find"
    FIND_ALL = "find_all"
    FIND_BY = "find_by"
    FIND_ONE_BY = "find_one_by"
    CREATE_PAGINATOR = "create_paginator"


class FactoryOperationEnum(_OperationEnum):
    """Operations the resource resolver may invoke on a factory."""

    CREATE_NEW = "create_new"
    CREATE_FOR = "create_for"
