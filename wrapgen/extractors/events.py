"""Event discovery from ``@fires`` annotations in internal implementation files."""

from __future__ import annotations

import re
from pathlib import Path

from ..logging import get_logger
from ..models import EventMap

_FIRES_RE = re.compile(r"@fires\s+(\w+)\s+\{[^}]*\}")

INTERNAL_DIRNAME = "internal"


def handler_name(event_name: str) -> str:
    """Return the React-style handler prop for a native event name."""
    return f"on{event_name[:1].upper()}{event_name[1:]}"


def parse_fires(text: str) -> EventMap:
    events: EventMap = {}
    for match in _FIRES_RE.finditer(text):
        event_name = match.group(1)
        events[handler_name(event_name)] = event_name
    return events


class EventExtractor:
    """Maps handler names to native events for one component directory.

    Only the first implementation file under ``internal/`` is consulted. The
    scan stops there even when that file declares no events.
    """

    def __init__(self, suffix: str = ".ts") -> None:
        self.suffix = suffix
        self.logger = get_logger("extractors.events")

    def extract(self, component_dir: Path) -> EventMap:
        internal = component_dir / INTERNAL_DIRNAME
        try:
            names = sorted(entry.name for entry in internal.iterdir())
            for name in names:
                if not self._is_candidate(name):
                    continue
                text = (internal / name).read_text(encoding="utf-8")
                events = parse_fires(text)
                self.logger.debug(
                    "Found %d events in %s/%s", len(events), component_dir.name, name
                )
                return events
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.debug("No events for %s: %s", component_dir.name, exc)
        return {}

    def _is_candidate(self, name: str) -> bool:
        return name.endswith(self.suffix) and "styles" not in name and "test" not in name


__all__ = ["EventExtractor", "handler_name", "parse_fires"]
