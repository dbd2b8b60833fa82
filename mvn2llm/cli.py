"""CLI entrypoints for mvn2llm commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .archive import ArchiveError
from .config import CacheSettings, ConfigError, Mvn2LlmConfig, ProxySettings, load_config
from .formatting import FORMATS, write_records
from .logging import configure_logging, get_logger, parse_level
from .maven import DEFAULT_REPOSITORY
from .orchestrator import Orchestrator

_EPILOG = """\
examples:
  mvn2llm extract tech.kwik:kwik:0.9.1
  mvn2llm -v extract com.google.guava:guava:32.1.3-android
  mvn2llm -l OFF extract com.google.guava:guava:32.1.3-jre
  mvn2llm scan path/to/sources.jar --format json -o docs.jsonl
"""


def _add_common_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    def _default(value: object) -> object:
        return argparse.SUPPRESS if suppress_default else value

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=_default(False),
        help="Enable verbose logging (shorthand for --log-level DEBUG).",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default=_default(None),
        help="Log level: DEBUG, INFO, WARNING, ERROR, OFF (Java names such as FINE are accepted).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=_default(None),
        help="Also write logs to this file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=_default(None),
        help="Path to a .mvn2llm.yml file (defaults to ./.mvn2llm.yml when present).",
    )


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write results to this file instead of standard output.",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of source files to scan concurrently.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mvn2llm",
        description="Extract JavaDoc and the declarations it documents from Maven sources for LLM processing.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_common_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Download a sources jar by groupId:artifactId:version and extract its docs.",
    )
    _add_common_options(extract_parser, suppress_default=True)
    _add_output_options(extract_parser)
    extract_parser.add_argument("coordinate", help="Maven coordinate groupId:artifactId:version.")
    extract_parser.add_argument(
        "-r",
        "--repo",
        default=None,
        help=f"Maven repository URL (default: {DEFAULT_REPOSITORY}).",
    )
    extract_parser.add_argument(
        "--http-proxy",
        default=None,
        help="HTTP proxy URL (overrides HTTP_PROXY environment variable).",
    )
    extract_parser.add_argument(
        "--https-proxy",
        default=None,
        help="HTTPS proxy URL (overrides HTTPS_PROXY environment variable).",
    )
    extract_parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Directory for cached source jars.",
    )
    extract_parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Download into a temporary file and delete it afterwards.",
    )
    extract_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds.",
    )

    scan_parser = subparsers.add_parser(
        "scan",
        help="Extract docs from a local JAR/ZIP, directory or .java file.",
    )
    _add_common_options(scan_parser, suppress_default=True)
    _add_output_options(scan_parser)
    scan_parser.add_argument("path", help="Archive, directory or source file to scan.")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_common_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _effective_config(args: argparse.Namespace, config: Mvn2LlmConfig) -> Mvn2LlmConfig:
    """Apply command line overrides on top of the file configuration."""
    updated = config
    workers = getattr(args, "workers", None)
    if workers is not None:
        updated = replace(updated, workers=max(workers, 1))
    fmt = getattr(args, "format", None)
    if fmt is not None:
        updated = replace(updated, format=fmt)
    repo = getattr(args, "repo", None)
    if repo:
        updated = replace(updated, repository=repo)
    timeout = getattr(args, "timeout", None)
    if timeout is not None:
        updated = replace(updated, timeout=timeout)
    http_proxy = getattr(args, "http_proxy", None)
    https_proxy = getattr(args, "https_proxy", None)
    if http_proxy or https_proxy:
        updated = replace(
            updated,
            proxy=ProxySettings(
                http=http_proxy or updated.proxy.http,
                https=https_proxy or updated.proxy.https,
            ),
        )
    cache_dir = getattr(args, "cache_dir", None)
    no_cache = bool(getattr(args, "no_cache", False))
    if cache_dir is not None or no_cache:
        updated = replace(
            updated,
            cache=CacheSettings(
                enabled=updated.cache.enabled and not no_cache,
                dir=cache_dir.expanduser() if cache_dir is not None else updated.cache.dir,
            ),
        )
    return updated


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mvn2llm commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(getattr(args, "config", None))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    config = _effective_config(args, config)
    if config.format not in FORMATS:
        parser.error(f"Unknown output format '{config.format}' in configuration")

    level = getattr(args, "log_level", None) or config.log_level
    if level is not None:
        try:
            parse_level(level)
        except ValueError as exc:
            parser.error(str(exc))
    configure_logging(
        verbose=bool(getattr(args, "verbose", False)),
        level=level,
        log_file=getattr(args, "log_file", None),
    )
    logger = get_logger("cli")
    logger.debug("Arguments: %s", vars(args))

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return

    orchestrator = Orchestrator(config)
    try:
        if args.command == "extract":
            result = orchestrator.run_extract(args.coordinate)
        elif args.command == "scan":
            result = orchestrator.run_scan(args.path)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except ValueError as exc:
        parser.exit(1, f"{exc}\nRun with --verbose for more details.\n")
    except (ArchiveError, RuntimeError) as exc:
        logger.debug("Error processing request", exc_info=True)
        parser.exit(1, f"mvn2llm {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    write_records(result.records, config.format, args.output)
    if args.output is not None:
        print(f"Wrote {len(result.records)} records to {_relativize(args.output)}", file=sys.stderr)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
