"""Variant discovery from custom element source files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from ..logging import get_logger
from ..models import EventMap, Variant
from .docs import extract_documentation
from .events import EventExtractor

CUSTOM_ELEMENT_MARKER = "@customElement"
CLASS_EXPORT_MARKER = "export class"

_CLASS_NAME_RE = re.compile(r"export class (Md\w+)")
_TAG_NAME_RE = re.compile(r"""@customElement\(['"`]([^'"`]+)['"`]\)""")

_EXCLUDED_NAME_PARTS = ("internal", "test", "demo")


def extract_class_name(text: str) -> Optional[str]:
    match = _CLASS_NAME_RE.search(text)
    return match.group(1) if match else None


def extract_tag_name(text: str) -> Optional[str]:
    match = _TAG_NAME_RE.search(text)
    return match.group(1) if match else None


class VariantExtractor:
    """Builds :class:`Variant` records for each public element file in a component folder."""

    def __init__(
        self,
        library_root: str = "@material/web",
        suffix: str = ".ts",
        event_extractor: EventExtractor | None = None,
    ) -> None:
        self.library_root = library_root.rstrip("/")
        self.suffix = suffix
        self.event_extractor = event_extractor or EventExtractor(suffix=suffix)
        self.logger = get_logger("extractors.variants")

    def extract(self, component_dir: Path) -> List[Variant]:
        """Return the variants defined in ``component_dir`` in file name order."""
        try:
            names = sorted(entry.name for entry in component_dir.iterdir() if entry.is_file())
        except OSError as exc:
            self.logger.debug("Skipping %s: %s", component_dir, exc)
            return []

        variants: List[Variant] = []
        events: EventMap | None = None
        for name in names:
            if not self._is_candidate(name):
                continue
            variant = self.extract_file(component_dir / name, component_dir.name)
            if variant is None:
                continue
            if events is None:
                events = self.event_extractor.extract(component_dir)
            variant.events = dict(events)
            variants.append(variant)
        return variants

    def extract_file(self, path: Path, component_name: str) -> Optional[Variant]:
        """Parse a single source file, returning ``None`` when it is not a variant."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.debug("Unable to read %s: %s", path, exc)
            return None

        if CUSTOM_ELEMENT_MARKER not in text or CLASS_EXPORT_MARKER not in text:
            return None

        class_name = extract_class_name(text)
        tag_name = extract_tag_name(text)
        if not class_name or not tag_name:
            self.logger.debug("Skipping %s: class or tag name not found", path.name)
            return None

        docs = extract_documentation(text)
        stem = path.name[: -len(self.suffix)] if path.name.endswith(self.suffix) else path.stem
        return Variant(
            file_name=stem,
            class_name=class_name,
            tag_name=tag_name,
            import_path=f"{self.library_root}/{component_name}/{stem}.js",
            documentation=docs.documentation,
            property_docs=docs.property_docs,
        )

    def _is_candidate(self, name: str) -> bool:
        if not name.endswith(self.suffix):
            return False
        return not any(part in name for part in _EXCLUDED_NAME_PARTS)


__all__ = [
    "VariantExtractor",
    "extract_class_name",
    "extract_tag_name",
]
