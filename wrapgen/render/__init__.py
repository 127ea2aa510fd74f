"""Template rendering for generated wrapper modules and the export index."""

from .index import IndexAggregator, collect_exports
from .templating import create_environment, format_timestamp, utc_now
from .wrapper import WrapperGenerator

__all__ = [
    "IndexAggregator",
    "WrapperGenerator",
    "collect_exports",
    "create_environment",
    "format_timestamp",
    "utc_now",
]
