"""wrapgen: React wrapper generation for custom element libraries."""

__version__ = "0.1.0"

from .config import ConfigError, WrapgenConfig, load_config
from .models import Component, ExportRecord, GenerationResult, Variant
from .orchestrator import Orchestrator

__all__ = [
    "__version__",
    "Component",
    "ConfigError",
    "ExportRecord",
    "GenerationResult",
    "Orchestrator",
    "Variant",
    "WrapgenConfig",
    "load_config",
]
