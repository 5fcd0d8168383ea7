from typing import Optional

from resource_bundle.base.base_schema import BaseSchema


class LoggingConfig(BaseSchema):
    """Logging configuration.

    Attributes:
        level: Logging level (INFO, DEBUG, WARNING, ERROR, CRITICAL)
        format: Log message format string
        file_path: Path to a log file, console only when unset
        console_enabled: Whether to log to the console
    """
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file_path: Optional[str] = None
    console_enabled: bool = True


class ApplicationConfig(BaseSchema):
    """Settings of the application the resource bundles are built into."""
    app_name: str = "resource_bundle"
    version: str = "1.0.0"
    stage: str = "local"  # local | cicd | prod

    # Prefix of every class, validation group and class registry parameter
    application_name: str = "sylius"
    logging: LoggingConfig = LoggingConfig()
