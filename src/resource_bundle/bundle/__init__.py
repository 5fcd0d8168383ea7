from .abstract_resource_bundle import AbstractResourceBundle

__all__ = ["AbstractResourceBundle"]
