"""Custom exceptions for aiohttp-stubgen.

The metadata pipeline itself never raises: malformed description metadata is
degraded to documented defaults. These exceptions cover the outer surfaces
only, loading configuration and loading description metadata.
"""


class StubgenError(Exception):
    """Base exception for all aiohttp-stubgen errors.

    Example:
        try:
            config = get_config()
        except StubgenError as e:
            print(f"aiohttp-stubgen error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(StubgenError):
    """Error in configuration.

    Raised when no configuration can be found or when a configuration file
    cannot be read or validated.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class DescriptionLoadError(StubgenError):
    """Failed to load API description metadata from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load description from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
