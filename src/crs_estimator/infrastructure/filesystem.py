"""Filesystem implementations for infrastructure.

Usage example:
    from pathlib import Path

    from crs_estimator.infrastructure.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    payload = fs.read_text(Path("data/reference/draws.json"))
"""

from __future__ import annotations

from pathlib import Path
from typing import override

from ..protocols import FileSystem


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()
