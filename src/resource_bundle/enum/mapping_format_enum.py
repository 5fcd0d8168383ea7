from enum import Enum


class MappingFormatEnum(Enum):
    """File formats of the model mapping metadata."""

    ANNOTATION = "annotation"
    XML = "xml"
    YAML = "yaml"


class ServicesFormatEnum(Enum):
    """File formats of the service definition files, valued by file extension."""

    XML = "xml"
    YAML = "yml"
