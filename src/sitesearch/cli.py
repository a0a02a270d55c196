"""CLI entry point for SiteSearch.

Subcommands:
  - ``serve``: run the HTTP API with uvicorn
  - ``query``: search a corpus file once and print the results as JSON
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from sitesearch.config.settings import Settings


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = _load_settings(args.config)
    if args.log_level:
        settings.observability.log_level = args.log_level
    if getattr(args, "corpus", None):
        settings.search.corpus_path = Path(args.corpus)

    from sitesearch.observability.logging import setup_logging

    setup_logging(settings.observability)

    if args.command == "serve":
        _serve(args, settings)
    else:
        _query(args, settings)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitesearch",
        description="SiteSearch: term-weighted search for personal site content",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"SiteSearch {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP search API")
    serve.add_argument("--host", type=str, default=None, help="Server bind address (overrides config)")
    serve.add_argument("--port", "-p", type=int, default=None, help="Server port (overrides config)")
    serve.add_argument("--corpus", type=str, default=None, help="Corpus file to index (overrides config)")

    query = subparsers.add_parser("query", help="Search a corpus file and print JSON results")
    query.add_argument("text", type=str, help="Free-text query")
    query.add_argument("--corpus", type=str, default=None, help="Corpus file to index (overrides config)")
    query.add_argument("--limit", "-n", type=int, default=None, help="Maximum number of results")

    return parser


def _load_settings(config: str | None) -> Settings:
    if config:
        config_path = Path(config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        return Settings.from_yaml(config_path)
    return Settings()


def _serve(args: argparse.Namespace, settings: Settings) -> None:
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port

    import uvicorn

    from sitesearch.api.app import create_app

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.observability.log_level,
    )


def _query(args: argparse.Namespace, settings: Settings) -> None:
    from sitesearch.adapters.base.exceptions import AdapterError
    from sitesearch.api.app import build_engine

    if settings.search.corpus_path is None:
        print("Error: No corpus given (use --corpus or search.corpus_path)", file=sys.stderr)
        sys.exit(1)

    try:
        engine = build_engine(settings)
    except (FileNotFoundError, ValueError, AdapterError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    limit = args.limit if args.limit is not None else settings.search.default_limit
    results = engine.search(args.text, limit=limit)
    payload = [result.model_dump(mode="json") for result in results]
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _get_version() -> str:
    """Get the package version."""
    from sitesearch import __version__

    return __version__


if __name__ == "__main__":
    main()
