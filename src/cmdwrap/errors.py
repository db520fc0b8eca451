"""Exceptions raised by cmdwrap."""


class InvalidArgumentError(ValueError):
    """An argument passed to a cmdwrap call is missing or unusable."""

    def __init__(self, message: str, param_name: str | None = None):
        super().__init__(message)
        self.param_name = param_name


class ConfigError(Exception):
    """The configuration file could not be read or validated."""
