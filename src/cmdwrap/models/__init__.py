"""Model package for cmdwrap."""

from cmdwrap.models.launch_config import LaunchConfig
from cmdwrap.models.start_info import ProcessStartInfo, WindowStyle

__all__ = [
    "LaunchConfig",
    "ProcessStartInfo",
    "WindowStyle",
]
