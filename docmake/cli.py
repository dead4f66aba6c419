"""CLI entrypoints for docmake commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jinja2 import TemplateError

from .config import ConfigError
from .credentials import CredentialsError
from .generator.base import UnsupportedStackError
from .logging import configure_logging
from .pipeline import Pipeline
from .process import ExternalProcessError


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


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also append log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docmake",
        description="Auto-dockerize and auto-deploy a repository.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    clone_parser = subparsers.add_parser(
        "clone",
        help="Clone a repository, containerize it, push the image and start it locally.",
    )
    _add_verbose_option(clone_parser, suppress_default=True)
    _add_log_file_option(clone_parser, suppress_default=True)
    clone_parser.add_argument("repo_url", help="URL of the repository to clone.")
    clone_parser.add_argument(
        "--hub-user",
        default=None,
        help="Docker Hub username (falls back to DOCKERHUB_USERNAME).",
    )
    clone_parser.add_argument(
        "--hub-pass",
        default=None,
        help="Docker Hub password or token (falls back to DOCKERHUB_PASSWORD).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docmake commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "clone":
        try:
            result = Pipeline().run(
                args.repo_url,
                username=args.hub_user,
                password=args.hub_pass,
            )
        except (
            ExternalProcessError,
            UnsupportedStackError,
            CredentialsError,
            ConfigError,
            TemplateError,
        ) as exc:
            parser.exit(1, f"docmake clone failed: {exc}\n")
        except (OSError, ValueError) as exc:
            parser.exit(1, f"docmake clone failed: {exc}\nRun with --verbose for more details.\n")
        for artifact in result.artifacts:
            print(f"Generated {_relativize(artifact)}")
        for image in result.images:
            print(f"Image {'pushed' if result.pushed else 'built'}: {image}")
        if result.started:
            print("Project is now running locally")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
