"""Launch configuration model and its conversion to a process-start descriptor."""

import logging
import ntpath
import os
import posixpath
import re
from collections.abc import Mapping
from types import ModuleType

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from cmdwrap.environment import EnvironmentVariables
from cmdwrap.errors import InvalidArgumentError
from cmdwrap.models.start_info import ProcessStartInfo, WindowStyle
from cmdwrap.secure import SecureString

log = logging.getLogger(__name__)


def _path_module() -> ModuleType:
    """Return the path flavour whose join matches the host platform."""
    return ntpath if os.name == "nt" else posixpath


_WINDOWS_VARIABLE = re.compile(r"%([^%]+)%")


def _expand_windows(value: str) -> str:
    """Expand ``%NAME%`` the way ExpandEnvironmentStrings does.

    Quotes and ``$`` are literal, ``%%`` is left alone and unknown names stay
    as written.
    """
    return _WINDOWS_VARIABLE.sub(
        lambda match: os.environ.get(match.group(1), match.group(0)), value
    )


def _expandvars(value: str) -> str:
    if os.name == "nt":
        return _expand_windows(value)
    return posixpath.expandvars(value)


class LaunchConfig(BaseModel):
    """Values used when executing a command.

    The fields mirror the matching ``ProcessStartInfo`` fields, plus ``path``,
    a directory that is joined in front of the file name at conversion time.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
        hide_input_in_errors=True,
    )

    create_no_window: bool = False
    domain: str | None = None
    environment_variables: EnvironmentVariables = Field(default_factory=EnvironmentVariables)
    load_user_profile: bool = False
    password: SecureString | None = None
    path: str | None = None
    redirect_standard_input: bool = False
    user_name: str | None = None
    window_style: WindowStyle = WindowStyle.NORMAL
    working_directory: str | None = None

    @field_validator("environment_variables", mode="before")
    @classmethod
    def own_environment(cls, value: object) -> object:
        if value is None:
            return EnvironmentVariables()
        if isinstance(value, EnvironmentVariables):
            return value.copy()
        if isinstance(value, Mapping):
            return EnvironmentVariables(value)
        return value

    @field_validator("password", mode="before")
    @classmethod
    def wrap_password(cls, value: object) -> object:
        if value is None or isinstance(value, SecureString):
            return value
        if isinstance(value, (str, bytes, bytearray, SecretStr)):
            return SecureString(value)
        raise TypeError(f"password must be a string or SecureString, not {type(value).__name__}")

    def __copy__(self) -> "LaunchConfig":
        clone = super().__copy__()
        clone.__dict__["environment_variables"] = self.environment_variables.copy()
        return clone

    @classmethod
    def from_path(cls, path: str | None) -> "LaunchConfig":
        """Build a default configuration that looks for executables in ``path``."""
        return cls(path=path)

    @classmethod
    def from_start_info(cls, start_info: ProcessStartInfo) -> "LaunchConfig":
        """Build a configuration from the matching fields of ``start_info``.

        Any object exposing the ``ProcessStartInfo`` attributes works; its
        ``environment_variables`` only needs an ``items()`` method. Keys and
        values are copied as strings into a mapping owned by the new object.
        """
        if start_info is None:
            raise InvalidArgumentError("start_info must not be None", "start_info")

        environment = {
            str(key): str(value) for key, value in start_info.environment_variables.items()
        }
        return cls(
            create_no_window=start_info.create_no_window,
            domain=start_info.domain,
            load_user_profile=start_info.load_user_profile,
            password=start_info.password,
            redirect_standard_input=start_info.redirect_standard_input,
            user_name=start_info.user_name,
            window_style=start_info.window_style,
            working_directory=start_info.working_directory,
            environment_variables=environment,
        )

    def to_start_info(self, file_name: str) -> ProcessStartInfo:
        """Return a ``ProcessStartInfo`` with the matching fields of this object.

        ``path`` is joined in front of ``file_name``. Environment variable
        references in the file name and the working directory are expanded
        from the current process environment; unresolved references are left
        as written.
        """
        if file_name is None:
            raise InvalidArgumentError("file_name must not be None", "file_name")
        if len(file_name) == 0:
            raise InvalidArgumentError("The given file name was empty.", "file_name")

        working_directory = self.working_directory
        if working_directory:
            working_directory = _expandvars(working_directory)

        full_file_name = file_name
        if self.path:
            full_file_name = _path_module().join(self.path, file_name)
        full_file_name = _expandvars(full_file_name)
        log.debug("file_name=%s working_directory=%s", full_file_name, working_directory)

        start_info = ProcessStartInfo(
            create_no_window=self.create_no_window,
            domain=self.domain,
            file_name=full_file_name,
            load_user_profile=self.load_user_profile,
            password=self.password,
            redirect_standard_input=self.redirect_standard_input,
            user_name=self.user_name,
            window_style=self.window_style,
            working_directory=working_directory,
        )
        for key, value in self.environment_variables.items():
            start_info.environment_variables[key] = str(value)
        log.debug("copied %d environment variables", len(start_info.environment_variables))
        return start_info
