"""React wrapper module rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List

from jinja2 import Environment

from ..models import Component, EventMap, Variant
from .templating import Clock, create_environment, render_header, utc_now

_EVENT_INDENT = " " * 8
_CLOSING_INDENT = " " * 4


@dataclass
class _Definition:
    class_name: str
    tag_name: str
    import_path: str
    events: str
    doc_lines: List[str]


def humanize_class_name(class_name: str) -> str:
    """``MdFilledTonalButton`` -> ``Filled Tonal Button``."""
    stripped = class_name.replace("Md", "", 1)
    return re.sub(r"([A-Z])", r" \1", stripped).strip()


def render_events(events: EventMap) -> str:
    if not events:
        return "{}"
    entries = f",\n{_EVENT_INDENT}".join(
        f"{handler}: '{native}'" for handler, native in events.items()
    )
    return f"{{\n{_EVENT_INDENT}{entries},\n{_CLOSING_INDENT}}}"


def _comment_line(text: str) -> str:
    return f" * {text}" if text else " *"


class WrapperGenerator:
    """Renders one wrapper module per component from its variant records."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        design_system: str = "Material Design",
        library_label: str = "Material Web",
        clock: Clock | None = None,
        env: Environment | None = None,
    ) -> None:
        self.design_system = design_system
        self.library_label = library_label
        self.clock = clock or utc_now
        self._env = env or create_environment(templates_dir)

    def render(self, component: Component, *, moment: datetime | None = None) -> str:
        """Return module text for ``component`` or ``""`` when it has no variants."""
        if not component.variants:
            return ""

        header = render_header(
            self._env,
            f"React wrappers for {self.library_label} {component.name} components",
            moment or self.clock(),
        )
        template = self._env.get_template("wrapper.tsx.j2")
        return template.render(
            header=header,
            definitions=[self._definition(variant) for variant in component.variants],
        )

    def documentation_lines(self, variant: Variant) -> List[str]:
        """Doc comment body lines for the component definition, already prefixed."""
        if variant.documentation:
            lines = variant.documentation.split("\n")
        else:
            lines = [
                f"{self.design_system} {humanize_class_name(variant.class_name)} component.",
                "This component is a React wrapper around the "
                f"`{variant.tag_name}` custom element.",
            ]
        lines.extend(["", "@component"])
        lines.extend(self._param_lines(variant.property_docs))
        return [_comment_line(line) for line in lines]

    @staticmethod
    def _param_lines(property_docs: Dict[str, str]) -> List[str]:
        return [f"@param {{any}} {prop} - {doc}" for prop, doc in property_docs.items()]

    def _definition(self, variant: Variant) -> _Definition:
        return _Definition(
            class_name=variant.class_name,
            tag_name=variant.tag_name,
            import_path=variant.import_path,
            events=render_events(variant.events),
            doc_lines=self.documentation_lines(variant),
        )


__all__ = ["WrapperGenerator", "humanize_class_name", "render_events"]
