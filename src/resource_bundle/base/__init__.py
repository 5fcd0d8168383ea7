from .base_schema import BaseSchema

__all__ = ["BaseSchema"]
