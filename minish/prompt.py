"""Building the interactive prompt from the user, host and working directory."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass
from itertools import takewhile
from typing import Any, Mapping

# Colour sequences wrapped in \001/\002 so line editing can ignore their width.
RESET = "\001\033[0m\002"
RED = "\001\033[1;31m\002"
GREEN = "\001\033[1;32m\002"
YELLOW = "\001\033[1;33m\002"
BLUE = "\001\033[1;34m\002"
MAGENTA = "\001\033[1;35m\002"
CYAN = "\001\033[1;36m\002"
WHITE = "\001\033[1;37m\002"

_UNSET: Any = object()


def current_directory(cwd: str | None = None, home: Any = _UNSET) -> str | None:
    """Return the working directory with a leading home directory shown as ``~``.

    ``cwd`` defaults to the process's working directory and ``home`` to the
    HOME environment variable; pass ``home=None`` for no home directory.
    Returns None when the working directory cannot be determined.
    """
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError:
            return None
    if home is _UNSET:
        home = os.environ.get("HOME")
    if home is not None and cwd.startswith(home):
        return "~" + cwd[len(home):]
    return cwd


def username(environ: Mapping[str, str] | None = None) -> str:
    """Return the USER variable, or ``user`` when it is not set."""
    env = os.environ if environ is None else environ
    return env.get("USER", "user")


def hostname(environ: Mapping[str, str] | None = None) -> str:
    """Return the HOSTNAME variable, else the system host name, else ``host``."""
    env = os.environ if environ is None else environ
    if "HOSTNAME" in env:
        return env["HOSTNAME"]
    try:
        return socket.gethostname()
    except OSError:
        return "host"


def join_all(first: str | None, *args: str | None) -> str | None:
    """Concatenate ``first`` and the following strings up to the first None.

    Returns None when ``first`` itself is None.
    """
    if first is None:
        return None
    return first + "".join(takewhile(lambda part: part is not None, args))


@dataclass
class Prompt:
    """The pieces shown in the prompt."""

    cwd: str | None
    user: str
    host: str

    @classmethod
    def from_environment(cls) -> "Prompt":
        """Collect the prompt pieces from the current process environment."""
        return cls(cwd=current_directory(), user=username(), host=hostname())

    def plain(self) -> str | None:
        """Render ``user@host:cwd$ ``; None if a piece is missing."""
        parts = (self.user, "@", self.host, ":", self.cwd, "$ ")
        if any(part is None for part in parts):
            return None
        return "".join(parts)  # type: ignore[arg-type]

    def colored(self) -> str | None:
        """Render the prompt with colours for user, host, directory and sign."""
        return join_all(
            GREEN, self.user, RESET, "@",
            CYAN, self.host, RESET, " ",
            YELLOW, self.cwd, RESET, " ",
            RED, "$ ", RESET,
        )