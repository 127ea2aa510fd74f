"""Pattern-based metadata extraction from component sources."""

from .docs import DocBlock, extract_documentation
from .events import EventExtractor, handler_name
from .variants import VariantExtractor, extract_class_name, extract_tag_name

__all__ = [
    "DocBlock",
    "EventExtractor",
    "VariantExtractor",
    "extract_class_name",
    "extract_documentation",
    "extract_tag_name",
    "handler_name",
]
