"""Configuration loading for wrapgen (.wrapgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".wrapgen.yml"

DEFAULT_REPO_URL = "https://github.com/material-components/material-web.git"
DEFAULT_EXCLUDED_DIRS = ("docs", "testing", "tokens", "scripts", "catalog")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SourceConfig:
    """Where the component sources come from and how they are read."""

    repo_url: str = DEFAULT_REPO_URL
    ref: Optional[str] = None
    clone_depth: Optional[int] = None
    work_dir: Path = Path("temp-material-web")
    library_root: str = "@material/web"
    exclude_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS))
    suffix: str = ".ts"


@dataclass
class OutputConfig:
    """Where generated wrappers land and how they are labelled."""

    dir: Path = Path("src")
    component_filename: str = "index.tsx"
    index_filename: str = "index.ts"
    design_system: str = "Material Design"
    library_label: str = "Material Web"
    templates_dir: Optional[Path] = None


@dataclass
class WrapgenConfig:
    """Represents the settings defined in .wrapgen.yml."""

    root: Path
    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def defaults(cls, root: Path | None = None) -> "WrapgenConfig":
        base = (root or Path.cwd()).resolve()
        config = cls(root=base)
        config.source.work_dir = base / config.source.work_dir
        config.output.dir = base / config.output.dir
        return config


def load_config(config_path: Path) -> WrapgenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return WrapgenConfig.defaults(root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = WrapgenConfig.defaults(root)

    source_data = _as_dict(data.get("source"))
    if source_data:
        source = config.source
        source.repo_url = _as_str(source_data.get("repo_url")) or source.repo_url
        source.ref = _as_str(source_data.get("ref"))
        source.clone_depth = _as_int(source_data.get("clone_depth"))
        work_dir = _as_str(source_data.get("work_dir"))
        if work_dir:
            source.work_dir = root / work_dir
        source.library_root = (
            _as_str(source_data.get("library_root")) or source.library_root
        ).rstrip("/")
        if "exclude_dirs" in source_data:
            source.exclude_dirs = _as_str_list(source_data.get("exclude_dirs"))
        suffix = _as_str(source_data.get("suffix"))
        if suffix:
            source.suffix = suffix if suffix.startswith(".") else f".{suffix}"

    output_data = _as_dict(data.get("output"))
    if output_data:
        output = config.output
        out_dir = _as_str(output_data.get("dir"))
        if out_dir:
            output.dir = root / out_dir
        output.component_filename = (
            _as_str(output_data.get("component_filename")) or output.component_filename
        )
        output.index_filename = _as_str(output_data.get("index_filename")) or output.index_filename
        output.design_system = _as_str(output_data.get("design_system")) or output.design_system
        output.library_label = _as_str(output_data.get("library_label")) or output.library_label
        templates_dir = _as_str(output_data.get("templates_dir"))
        if templates_dir:
            output.templates_dir = root / templates_dir

    if config.source.clone_depth is not None and config.source.clone_depth < 1:
        raise ConfigError("source.clone_depth must be a positive integer")

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
