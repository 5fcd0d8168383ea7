"""Default configuration schema of a resource bundle extension."""
from typing import Any, Dict, List

from pydantic import Field, field_validator

from resource_bundle.base.base_schema import BaseSchema
from resource_bundle.enum.driver_enum import DriverEnum


class ResourceConfig(BaseSchema):
    """
    Configuration tree of one resource bundle.

    Attributes:
        driver: Persistence driver, validated against the bundle's supported set later
        classes: Model name to service kind to class name
        templates: Model name to template namespace
        validation_groups: Model name to the validation groups applied to its forms
    """

    driver: str = DriverEnum.DOCTRINE_ORM.value
    classes: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    templates: Dict[str, str] = Field(default_factory=dict)
    validation_groups: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("validation_groups", mode="before")
    @classmethod
    def wrap_single_group(cls, value: object) -> object:
        # "product: sylius" is shorthand for "product: [sylius]"
        if isinstance(value, dict):
            return {
                model: [groups] if isinstance(groups, str) else groups
                for model, groups in value.items()
            }
        return value

    @field_validator("classes", mode="before")
    @classmethod
    def drop_empty_class_maps(cls, value: object) -> object:
        if isinstance(value, dict):
            return {model: classes for model, classes in value.items() if classes is not None}
        return value


def class_map_of(config: Dict[str, Any]) -> Dict[str, Dict[str, str]]:
    """Return the class map of a normalized config, empty when absent."""
    classes = config.get("classes")
    return dict(classes) if classes else {}
