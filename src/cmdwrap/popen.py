"""Translate a ProcessStartInfo into subprocess keyword arguments."""

import logging
import os
import subprocess
from typing import Any

from cmdwrap.environment import EnvironmentVariables
from cmdwrap.errors import InvalidArgumentError
from cmdwrap.models import ProcessStartInfo, WindowStyle

log = logging.getLogger(__name__)

# Windows creation flag fallbacks (defined manually for type-checkers/Unix)
_CREATE_NO_WINDOW = 0x08000000
_STARTF_USESHOWWINDOW = 0x00000001


def _windows_options(start_info: ProcessStartInfo) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if start_info.create_no_window:
        kwargs["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", _CREATE_NO_WINDOW)
    if start_info.window_style is not WindowStyle.NORMAL:
        startupinfo = subprocess.STARTUPINFO()  # type: ignore[attr-defined]
        startupinfo.dwFlags |= getattr(subprocess, "STARTF_USESHOWWINDOW", _STARTF_USESHOWWINDOW)
        startupinfo.wShowWindow = start_info.window_style.show_command
        kwargs["startupinfo"] = startupinfo
    return kwargs


def _unsupported_options(start_info: ProcessStartInfo) -> list[str]:
    """Return the names of set options that subprocess has no way to apply."""
    skipped = []
    if start_info.domain:
        skipped.append("domain")
    if start_info.password:
        skipped.append("password")
    if start_info.load_user_profile:
        skipped.append("load_user_profile")
    if os.name == "nt" and start_info.user_name:
        skipped.append("user_name")
    return skipped


def popen_kwargs(start_info: ProcessStartInfo) -> dict[str, Any]:
    """Return keyword arguments for ``subprocess.Popen``/``subprocess.run``."""
    if not start_info.file_name:
        raise InvalidArgumentError("The start info has no file name.", "file_name")

    kwargs: dict[str, Any] = {
        "args": [start_info.file_name, *start_info.arguments],
        "cwd": start_info.working_directory or None,
        "env": None,
    }
    if start_info.environment_variables:
        overrides = start_info.environment_variables
        env = EnvironmentVariables(os.environ, case_sensitive=overrides.case_sensitive)
        env.update(overrides)
        kwargs["env"] = env.to_dict()

    if start_info.redirect_standard_input:
        kwargs["stdin"] = subprocess.PIPE
    if start_info.redirect_standard_output:
        kwargs["stdout"] = subprocess.PIPE
    if start_info.redirect_standard_error:
        kwargs["stderr"] = subprocess.PIPE

    if os.name == "nt":
        kwargs.update(_windows_options(start_info))
    elif start_info.user_name:
        kwargs["user"] = start_info.user_name

    skipped = _unsupported_options(start_info)
    if skipped:
        log.warning("subprocess cannot apply %s; ignoring", ", ".join(skipped))
    log.debug("popen args=%s cwd=%s", kwargs["args"], kwargs["cwd"])
    return kwargs


def start_info_summary(start_info: ProcessStartInfo) -> dict[str, Any]:
    """Return a JSON-safe view of ``start_info`` with the password masked."""
    return {
        "file_name": start_info.file_name,
        "arguments": list(start_info.arguments),
        "working_directory": start_info.working_directory,
        "window_style": start_info.window_style.value,
        "create_no_window": start_info.create_no_window,
        "redirect_standard_input": start_info.redirect_standard_input,
        "redirect_standard_output": start_info.redirect_standard_output,
        "redirect_standard_error": start_info.redirect_standard_error,
        "domain": start_info.domain,
        "user_name": start_info.user_name,
        "password": "set" if start_info.password else "unset",
        "load_user_profile": start_info.load_user_profile,
        "environment_variables": start_info.environment_variables.to_dict(),
    }
