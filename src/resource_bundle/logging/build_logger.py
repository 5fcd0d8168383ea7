"""Logging scoped to one container build.

The build runs before the application's own logging configuration is
applied, so the kernel reports bundles, extensions and compilation through a
dedicated ``{application_name}.build`` logger. Every record carries the build
step it was emitted in, and leaving the build logs its outcome and duration.

Usage pattern:

    with BuildLogger(application_name) as build_log:
        with build_log.step("sylius_product"):
            build_log.info("Loading extension")
"""
from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator, List, Optional

DEFAULT_FORMAT = "%(asctime)s | BUILD | %(levelname)-8s | %(name)s | [%(build_step)s] %(message)s"


class _BuildStepFilter(logging.Filter):
    """Stamps the current build step onto every record."""

    def __init__(self, build_logger: "BuildLogger"):
        super().__init__()
        self._build_logger = build_logger

    def filter(self, record: logging.LogRecord) -> bool:
        record.build_step = self._build_logger.current_step
        return True


class BuildLogger:
    """
    Temporary logger of a single container build.

    Entering attaches a handler to ``{application_name}.build`` and stops
    propagation; leaving logs the build outcome and detaches it again, also
    when the build raised. Steps nest; the innermost one is reported.

    Args:
        application_name: Prefix of the logger name
        level: Level of the build logger while the build runs
        handler: Handler to attach; a stderr stream handler when unset
    """

    def __init__(
        self,
        application_name: str,
        level: int = logging.INFO,
        handler: Optional[logging.Handler] = None,
    ):
        self.logger = logging.getLogger(f"{application_name}.build")
        self.level = level
        self.handler = handler or logging.StreamHandler()
        self._steps: List[str] = []
        self._filter = _BuildStepFilter(self)
        self._started: Optional[float] = None
        self.failed_step: Optional[str] = None

    @property
    def current_step(self) -> str:
        return self._steps[-1] if self._steps else "kernel"

    @contextmanager
    def step(self, name: str) -> Iterator["BuildLogger"]:
        """Report records emitted inside the block under the step `name`."""
        self._steps.append(name)
        try:
            yield self
        except BaseException:
            # innermost step wins
            if self.failed_step is None:
                self.failed_step = name
            raise
        finally:
            self._steps.pop()

    def info(self, msg: str, *args) -> None:
        self.logger.info(msg, *args)

    def error(self, msg: str, *args) -> None:
        self.logger.error(msg, *args)

    def __enter__(self) -> "BuildLogger":
        if self.handler.formatter is None:
            self.handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        self.handler.addFilter(self._filter)
        self.logger.addHandler(self.handler)
        self.logger.setLevel(self.level)
        self.logger.propagate = False
        self._started = time.perf_counter()
        self.failed_step = None
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        elapsed = time.perf_counter() - (self._started or time.perf_counter())
        try:
            if exc is None:
                self.logger.info("Container build finished in %.3fs", elapsed)
            else:
                self.logger.error(
                    "Container build failed in step '%s' after %.3fs: %s",
                    self.failed_step or self.current_step, elapsed, exc,
                )
        finally:
            self._steps.clear()
            self.logger.removeHandler(self.handler)
            self.handler.removeFilter(self._filter)
            self.logger.propagate = True
        return False


__all__ = ["BuildLogger"]
