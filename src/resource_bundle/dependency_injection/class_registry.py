"""
Merge policy of the global class registry.

The registry is the container parameter ``<app>.config.classes``, mapping a
model name to its service kind to class name map. It accumulates across all
bundles loaded in one build. Merging happens on model keys only:

- a model already in the registry keeps its existing class map
- a model not yet in the registry is added with the incoming class map

The merge never removes a model, so the registry grows monotonically, and
merging the same class map again changes nothing.
"""
import copy
import logging
from typing import Dict, Mapping

from resource_bundle.dependency_injection.container_builder import ContainerBuilderInterface

logger = logging.getLogger(__name__)

ClassMap = Dict[str, Dict[str, str]]


def class_registry_key(application_name: str) -> str:
    return f"{application_name}.config.classes"


def merge_class_maps(existing: Mapping[str, Mapping[str, str]], incoming: Mapping[str, Mapping[str, str]]) -> ClassMap:
    """
    Merge an incoming class map into an existing registry.

    Args:
        existing: The registry accumulated so far
        incoming: The class map of the bundle being loaded

    Returns:
        A new class map; neither argument is modified
    """
    merged: ClassMap = {model: dict(classes) for model, classes in existing.items()}
    for model, classes in incoming.items():
        if model in merged:
            if merged[model] != dict(classes):
                logger.debug(f"Class map of model '{model}' already registered, keeping existing entry")
            continue
        merged[model] = dict(classes)
    return merged


def merge_into_registry(
    container: ContainerBuilderInterface, application_name: str, classes: Mapping[str, Mapping[str, str]]
) -> ClassMap:
    """Merge a bundle's class map into the registry parameter and return the result."""
    key = class_registry_key(application_name)
    existing = copy.deepcopy(container.get_parameter(key)) if container.has_parameter(key) else {}
    merged = merge_class_maps(existing, classes)
    container.set_parameter(key, merged)
    return merged
