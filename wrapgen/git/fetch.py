"""Source tree acquisition via ``git clone``."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Iterable, List

from ..logging import get_logger


class FetchError(RuntimeError):
    """Raised when the component source tree cannot be obtained."""


class SourceFetcher:
    """Clones the upstream component repository into a working directory."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git.fetch")

    def clone(
        self,
        repo_url: str,
        destination: Path,
        *,
        ref: str | None = None,
        depth: int | None = None,
    ) -> Path:
        """Clone ``repo_url`` into ``destination`` and return the checkout path."""
        destination = Path(destination)
        if destination.exists() and any(destination.iterdir()):
            raise FetchError(f"Clone destination already exists and is not empty: {destination}")

        args: List[str] = ["git", "clone"]
        if depth is not None:
            args.extend(["--depth", str(depth)])
        if ref:
            args.extend(["--branch", ref])
        args.extend([repo_url, str(destination)])

        self.logger.info("Cloning %s", repo_url)
        try:
            self._run(args, cwd=destination.parent)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise FetchError(f"Failed to clone repository: {exc}") from exc
        self.logger.info("Repository cloned to %s", destination)
        return destination

    def cleanup(self, path: Path) -> bool:
        """Remove a checkout; failures are logged and reported as ``False``."""
        self.logger.info("Cleaning up temporary files...")
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            return True
        except OSError as exc:
            self.logger.warning("Failed to cleanup %s: %s", path, exc)
            return False
        self.logger.debug("Removed %s", path)
        return True

    # ------------------------------------------------------------------
    # Helpers

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        cwd.mkdir(parents=True, exist_ok=True)
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        subprocess.run(list(args), cwd=str(cwd), check=True, text=True)
        return ""
