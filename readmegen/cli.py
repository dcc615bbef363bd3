"""CLI entrypoints for readmegen commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import InvalidRepositoryReference, UpstreamError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .synthesis.rendering import TemplateError

INVALID_URL_MESSAGE = "Please enter a valid GitHub repository URL"


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


def _add_url_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "url",
        help="GitHub repository URL (https://github.com/<owner>/<repo>).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate README files from a GitHub repository's metadata and layout.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .readmegen.yml or its directory (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write DEBUG logs to this file (overrides logging.file).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Analyze a repository and write a README.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_url_argument(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Destination file or directory (defaults to output.path, README.md).",
    )
    generate_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the README instead of writing it.",
    )

    detect_parser = subparsers.add_parser(
        "detect",
        help="Print the detected technology profile as JSON.",
    )
    _add_verbose_option(detect_parser, suppress_default=True)
    _add_url_argument(detect_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    verbose = bool(args.verbose)
    configure_logging(verbose=verbose)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    log_file = Path(args.log_file) if args.log_file else config.logging.file
    if log_file is not None:
        configure_logging(verbose=verbose, log_file=log_file)

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, config=config)
        return

    orchestrator = Orchestrator(config=config)
    try:
        bundle = orchestrator.analyze(args.url)
    except InvalidRepositoryReference:
        parser.exit(1, f"{INVALID_URL_MESSAGE}\n")
    except UpstreamError as exc:
        parser.exit(1, f"Analysis failed: {exc}\nRun with --verbose for more details.\n")
    except TemplateError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "detect":
        print(json.dumps(bundle.profile.to_dict(), indent=2))
    elif args.command == "generate":
        if args.stdout:
            sys.stdout.write(bundle.document + "\n")
            return
        destination = Path(args.output) if args.output else None
        path = orchestrator.write(bundle, destination)
        print(f"README created at {_relativize(path)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
