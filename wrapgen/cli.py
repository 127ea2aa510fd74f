"""CLI entrypoints for wrapgen commands."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from jinja2 import TemplateError

from .config import CONFIG_FILENAME, ConfigError, load_config
from .git.fetch import FetchError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Path to the configuration file (defaults to ./{CONFIG_FILENAME}).",
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Use an existing checkout instead of cloning the upstream repository.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrapgen",
        description="Generate React wrappers for custom element libraries.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Clone the component sources and write wrapper modules plus an index.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_source_options(generate_parser)
    generate_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory that receives generated modules (overrides output.dir).",
    )
    generate_parser.add_argument(
        "--keep-source",
        action="store_true",
        help="Keep the cloned checkout after generation.",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Print extracted component metadata as JSON without writing files.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_source_options(analyze_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for wrapgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "generate":
        if args.output is not None:
            config.output.dir = args.output.expanduser().resolve()
        orchestrator = Orchestrator(config)
        try:
            result = orchestrator.run(
                args.source,
                keep_source=bool(getattr(args, "keep_source", False)),
            )
        except FetchError as exc:
            parser.exit(1, f"{exc}\n")
        except (OSError, RuntimeError, TemplateError) as exc:
            parser.exit(1, f"wrapgen generate failed: {exc}\nRun with --verbose for more details.\n")
        print(f"Generated {len(result.written)} wrapper modules in {_relativize(config.output.dir)}")
    elif args.command == "analyze":
        if args.source is None:
            parser.exit(1, "wrapgen analyze requires --source pointing at a checkout\n")
        try:
            components = Orchestrator(config).analyze(args.source)
        except OSError as exc:
            parser.exit(1, f"wrapgen analyze failed: {exc}\n")
        print(json.dumps([asdict(component) for component in components], indent=2))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
