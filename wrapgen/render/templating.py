"""Jinja environment and shared header rendering."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

from jinja2 import Environment, FileSystemLoader

Clock = Callable[[], datetime]

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Build a Jinja environment, letting ``templates_dir`` override bundled templates."""
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(DEFAULT_TEMPLATES_DIR))
    ordered = list(dict.fromkeys(directories))
    loader = FileSystemLoader(ordered)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def render_header(env: Environment, overview: str, moment: datetime) -> str:
    template = env.get_template("header.j2")
    return template.render(overview=overview, timestamp=format_timestamp(moment))
