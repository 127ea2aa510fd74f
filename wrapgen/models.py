"""Metadata records shared across wrapgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

EventMap = Dict[str, str]


@dataclass
class Variant:
    """One wrappable custom element recovered from a single source file."""

    file_name: str
    class_name: str
    tag_name: str
    import_path: str
    events: EventMap = field(default_factory=dict)
    documentation: str = ""
    property_docs: Dict[str, str] = field(default_factory=dict)


@dataclass
class Component:
    """A component folder and the variants found inside it."""

    name: str
    variants: List[Variant]


@dataclass(frozen=True)
class ExportRecord:
    """Public symbols a generated wrapper contributes to the index."""

    component_name: str
    props_name: str
    element_name: str
    folder: str

    @classmethod
    def from_variant(cls, variant: Variant, folder: str) -> "ExportRecord":
        return cls(
            component_name=variant.class_name,
            props_name=f"{variant.class_name}Props",
            element_name=f"{variant.class_name}Element",
            folder=folder,
        )


@dataclass
class GenerationResult:
    """Summary of a generation run."""

    components: List[Component]
    written: List[Path] = field(default_factory=list)
    index_path: Optional[Path] = None
