"""Aggregated export manifest rendering."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Sequence

from jinja2 import Environment

from ..models import Component, ExportRecord
from .templating import Clock, create_environment, render_header, utc_now


def collect_exports(components: Iterable[Component]) -> List[ExportRecord]:
    """Flatten components into export records, keeping component and variant order."""
    return [
        ExportRecord.from_variant(variant, component.name)
        for component in components
        for variant in component.variants
    ]


class IndexAggregator:
    """Renders the top-level module that re-exports every generated wrapper."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        library_label: str = "Material Web",
        clock: Clock | None = None,
        env: Environment | None = None,
    ) -> None:
        self.library_label = library_label
        self.clock = clock or utc_now
        self._env = env or create_environment(templates_dir)

    def render(self, records: Sequence[ExportRecord], *, moment: datetime | None = None) -> str:
        header = render_header(
            self._env,
            f"Main exports for all {self.library_label} React components",
            moment or self.clock(),
        )
        template = self._env.get_template("index.ts.j2")
        return template.render(header=header, records=list(records))


__all__ = ["IndexAggregator", "collect_exports"]
