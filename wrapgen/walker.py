"""Component directory discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .config import DEFAULT_EXCLUDED_DIRS
from .logging import get_logger


class ComponentWalker:
    """Lists the immediate subdirectories of a source root that hold components."""

    def __init__(self, exclude_dirs: Iterable[str] | None = None) -> None:
        self.exclude_dirs = set(DEFAULT_EXCLUDED_DIRS if exclude_dirs is None else exclude_dirs)
        self.logger = get_logger("walker")

    def walk(self, root: str | Path) -> List[Path]:
        """Return candidate component directories under ``root`` in name order."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Source path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {root}")

        directories = [
            entry
            for entry in root_path.iterdir()
            if entry.is_dir() and self._is_candidate(entry.name)
        ]
        directories.sort(key=lambda entry: entry.name)
        self.logger.debug("Walker found %d candidate directories in %s", len(directories), root_path)
        return directories

    def _is_candidate(self, name: str) -> bool:
        return not name.startswith(".") and name not in self.exclude_dirs


__all__ = ["ComponentWalker"]
