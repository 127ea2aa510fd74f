"""Filesystem output for generated modules."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger


class OutputWriter:
    """Writes component modules and the index file under an output directory."""

    def __init__(
        self,
        output_dir: Path,
        *,
        component_filename: str = "index.tsx",
        index_filename: str = "index.ts",
    ) -> None:
        self.output_dir = Path(output_dir)
        self.component_filename = component_filename
        self.index_filename = index_filename
        self.logger = get_logger("writer")

    def write_component(self, component_name: str, text: str) -> Path | None:
        """Write ``<output>/<component>/<component_filename>``; empty text is not written."""
        if not text:
            return None
        path = self.output_dir / component_name / self.component_filename
        self._write(path, text)
        return path

    def write_index(self, text: str) -> Path:
        path = self.output_dir / self.index_filename
        self._write(path, text)
        return path

    def _write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        self.logger.info("Generated %s", path)
