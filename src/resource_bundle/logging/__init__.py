from .build_logger import BuildLogger

__all__ = ["BuildLogger"]
