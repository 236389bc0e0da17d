"""Host system access used by the completion engine.

The engine only reads from the host: directory listings, existence checks,
the home directory and executable lookup on the search path.
"""

from __future__ import annotations

import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

__all__ = ["HostSystem", "LocalHost"]


class HostSystem(ABC):
    """Abstract access to the host operating system.

    Relative paths are resolved against the current working directory.
    """

    @abstractmethod
    def list_directory(self, path: str) -> list[str]:
        """Return the entry names of `path`.

        Raises:
            OSError: if the directory can't be read
        """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Tell whether `path` is an existing directory."""

    @abstractmethod
    def home_directory(self) -> str:
        """Return the absolute path of the user's home directory."""

    def path_separator(self) -> str:
        """Return the path separator."""
        return os.sep

    @abstractmethod
    def resolve_executable(self, name: str) -> str | None:
        """Return the path of the executable `name`, None if not found."""


class LocalHost(HostSystem):
    """The machine the process runs on."""

    def list_directory(self, path: str) -> list[str]:
        # sorted: two requests on an unchanged directory give the same output
        return sorted(os.listdir(path))

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def home_directory(self) -> str:
        return str(Path.home())

    def resolve_executable(self, name: str) -> str | None:
        return shutil.which(name)
