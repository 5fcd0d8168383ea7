from enum import Enum


class ConfigureStageEnum(Enum):
    """
    Optional stages of an extension's configure pipeline.

    The declaration order is the execution order. LOADER always runs,
    whether requested or not.
    """

    LOADER = "loader"
    DATABASE = "database"
    PARAMETERS = "parameters"
    VALIDATORS = "validators"
