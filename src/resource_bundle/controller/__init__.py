from .request_configuration import RequestConfiguration
from .resource_resolver import ResourceResolver

__all__ = ["RequestConfiguration", "ResourceResolver"]
