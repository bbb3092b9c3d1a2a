"""Command-line interface entry point for jobradar."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from jobradar import __version__, pipelines
from jobradar.errors import JobRadarError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobradar", description="jobradar command-line interface"
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command")

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "--config-path", dest="config_path", help="Override path to config file"
    )
    shared.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )

    parse = subparsers.add_parser(
        "parse", parents=[shared], help="Decode the frontmatter of a markdown document"
    )
    parse.add_argument(
        "input_path", nargs="?", default="-", help="Markdown file, '-' for stdin"
    )
    parse.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Exit with status 1 when a structured key fails to decode",
    )

    batch = subparsers.add_parser(
        "batch", parents=[shared], help="Normalize a JSON job list into job links"
    )
    batch.add_argument(
        "input_path", nargs="?", default="-", help="JSON file, '-' for stdin"
    )

    secretary = argparse.ArgumentParser(add_help=False, parents=[shared])
    secretary.add_argument("url", help="Page to extract")
    secretary.add_argument("--source-language", dest="source_language")
    secretary.add_argument("--target-language", dest="target_language")
    secretary.add_argument(
        "--use-cache", dest="use_cache", action="store_true", default=None
    )
    secretary.add_argument(
        "--template-dir", dest="template_dir", help="Directory with extraction templates"
    )

    import_list = subparsers.add_parser(
        "import-list", parents=[secretary], help="Extract job links from an overview page"
    )
    import_list.add_argument(
        "--container-selector",
        dest="container_selector",
        help="XPath or CSS selector of the element holding the list",
    )
    subparsers.add_parser(
        "import-job", parents=[secretary], help="Extract a single job posting"
    )

    config_parser = subparsers.add_parser(
        "config", parents=[shared], help="Inspect configuration"
    )
    config_subparsers = config_parser.add_subparsers(dest="config_command")
    config_subparsers.add_parser("show", help="Show effective configuration")

    return parser


def _normalize_cli_options(namespace: argparse.Namespace) -> dict[str, Any]:
    cli_options = {
        key: value
        for key, value in vars(namespace).items()
        if key not in {"command", "config_command"}
    }
    return {key: value for key, value in cli_options.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command is None:
        parser.print_help()
        return

    handlers: dict[str, Any] = {
        "parse": pipelines.run_parse,
        "batch": pipelines.run_batch,
        "import-list": pipelines.run_import_list,
        "import-job": pipelines.run_import_job,
        "config": pipelines.run_config_show,
    }

    cli_options = _normalize_cli_options(args)
    try:
        exit_code = handlers[args.command](cli_options)
    except JobRadarError as exc:
        print(f"jobradar: error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"jobradar: hint: {exc.hint}", file=sys.stderr)
        sys.exit(1)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
