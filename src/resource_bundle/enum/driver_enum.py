from enum import Enum


class DriverEnum(Enum):
    """Persistence drivers a resource bundle can be configured with."""

    DOCTRINE_ORM = "doctrine/orm"
    DOCTRINE_MONGODB_ODM = "doctrine/mongodb-odm"
    DOCTRINE_PHPCR_ODM = "doctrine/phpcr-odm"
