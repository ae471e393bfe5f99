"""Command line interface for creating C++ class stubs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .command import ClassCreator, Prompt
from .scaffold import expand_directory
from .config import Settings, load_settings
from .errors import CreationAborted, ScaffoldError, StubWriteError
from .naming import NamingScheme


def _prompt(message: str) -> Prompt:
    def ask() -> str | None:
        try:
            return input(f"{message}: ")
        except (EOFError, KeyboardInterrupt):
            return None

    return ask


def _set_path_argument(value: str) -> bool | str:
    lowered = value.strip().lower()
    if lowered == "false":
        return False
    if lowered == "true":
        return True
    return value


def _add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-w",
        "--workspace",
        type=Path,
        default=None,
        help="Workspace root used for default locations and settings (default: cwd)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Path to a TOML settings file")
    parser.add_argument(
        "--ifndef",
        dest="use_ifndef",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wrap the header in #ifndef/#define/#endif guards",
    )
    parser.add_argument(
        "--pragma-once",
        dest="use_pragma_once",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit #pragma once in the header",
    )
    parser.add_argument(
        "--hpp",
        dest="use_hpp_ending",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the .hpp extension instead of .h",
    )
    parser.add_argument(
        "--naming-scheme",
        choices=[scheme.value for scheme in NamingScheme],
        default=None,
        help="File naming convention",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create C++ header/source class stubs")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging output (-v for info, -vv for debug)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="create a header/source pair")
    create_parser.add_argument(
        "name", nargs="?", help="Class name (prompted for when omitted)"
    )
    create_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        help="File or folder to create the class next to; overrides --set-path",
    )
    create_parser.add_argument(
        "--set-path",
        type=_set_path_argument,
        help="Target path, 'ask' or 'true' to be prompted for one, 'false' for the workspace root",
    )
    create_parser.add_argument(
        "--create-folder",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Put the files in a folder named after the class (workspace root only)",
    )
    _add_settings_arguments(create_parser)

    preview_parser = subparsers.add_parser(
        "preview", help="print the generated files without writing them"
    )
    preview_parser.add_argument("name", help="Class name")
    _add_settings_arguments(preview_parser)

    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _settings(args: argparse.Namespace, workspace: Path) -> Settings:
    settings = load_settings(args.config, workspace_root=workspace)
    return settings.merged(
        use_ifndef=args.use_ifndef,
        use_pragma_once=args.use_pragma_once,
        use_hpp_ending=args.use_hpp_ending,
        naming_scheme=args.naming_scheme,
        set_path=getattr(args, "set_path", None),
        create_folder=getattr(args, "create_folder", None),
    )


def _creator(args: argparse.Namespace) -> ClassCreator:
    workspace = expand_directory(args.workspace or Path.cwd())
    return ClassCreator(
        settings=_settings(args, workspace),
        workspace_root=workspace,
        ask_name=_prompt("Type your class name"),
        ask_path=_prompt("Type a valid path"),
    )


def _handle_create(args: argparse.Namespace) -> int:
    creator = _creator(args)
    report = creator.create(args.name, context_path=args.directory)
    print(report.message)
    for path in report.result.paths:
        print(f"  {path}")
    return 0


def _handle_preview(args: argparse.Namespace) -> int:
    creator = _creator(args)
    spec, stub = creator.prepare(args.name)
    header_path = spec.directory / f"{spec.file_name}{stub.header_extension}"
    source_path = spec.directory / f"{spec.file_name}.cpp"
    sys.stdout.write(f"// {header_path}\n{stub.header_text}\n")
    sys.stdout.write(f"// {source_path}\n{stub.source_text}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handlers = {"create": _handle_create, "preview": _handle_preview}
    handler = handlers.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return 2

    try:
        return handler(args)
    except CreationAborted as exc:
        print(f"Aborted: {exc}", file=sys.stderr)
    except StubWriteError as exc:
        print(f"Your class has not been created completely: {exc}", file=sys.stderr)
        for outcome in (exc.result.header, exc.result.source):
            if outcome.written:
                print(f"  written: {outcome.path}", file=sys.stderr)
    except ScaffoldError as exc:
        print(f"Your class could not be created: {exc}", file=sys.stderr)
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
