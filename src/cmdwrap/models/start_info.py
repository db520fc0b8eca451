"""Process-start descriptor handed to the launcher."""

from dataclasses import dataclass, field
from enum import Enum

from cmdwrap.environment import EnvironmentVariables
from cmdwrap.secure import SecureString


class WindowStyle(str, Enum):
    """Window visibility requested for the launched process."""

    NORMAL = "normal"
    HIDDEN = "hidden"
    MINIMIZED = "minimized"
    MAXIMIZED = "maximized"

    @property
    def show_command(self) -> int:
        """Win32 ``SW_*`` value for ``STARTUPINFO.wShowWindow``."""
        return _SHOW_COMMANDS[self]


_SHOW_COMMANDS = {
    WindowStyle.HIDDEN: 0,  # SW_HIDE
    WindowStyle.NORMAL: 1,  # SW_SHOWNORMAL
    WindowStyle.MINIMIZED: 2,  # SW_SHOWMINIMIZED
    WindowStyle.MAXIMIZED: 3,  # SW_SHOWMAXIMIZED
}


@dataclass
class ProcessStartInfo:
    """Everything needed to spawn one process."""

    file_name: str = ""
    arguments: list[str] = field(default_factory=list)
    working_directory: str | None = None
    window_style: WindowStyle = WindowStyle.NORMAL
    create_no_window: bool = False
    redirect_standard_input: bool = False
    redirect_standard_output: bool = False
    redirect_standard_error: bool = False
    domain: str | None = None
    user_name: str | None = None
    password: SecureString | None = field(default=None, repr=False)
    load_user_profile: bool = False
    environment_variables: EnvironmentVariables = field(default_factory=EnvironmentVariables)
