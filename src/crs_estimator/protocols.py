"""Protocol definitions for dependency injection.

The estimator core is pure; only the loaders for profile, draw dataset and
config files touch storage, and they do so through this protocol so tests can
substitute an in-memory implementation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading text files."""

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        ...

    def exists(self, path: Path) -> bool:
        """Return True when the path exists."""
        ...
