"""Launch configuration for external commands."""

from cmdwrap.environment import EnvironmentVariables
from cmdwrap.errors import ConfigError, InvalidArgumentError
from cmdwrap.models import LaunchConfig, ProcessStartInfo, WindowStyle
from cmdwrap.secure import SecureString

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "EnvironmentVariables",
    "InvalidArgumentError",
    "LaunchConfig",
    "ProcessStartInfo",
    "SecureString",
    "WindowStyle",
    "__version__",
]
