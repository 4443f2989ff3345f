"""CLI entry point for the line rewriter."""
import argparse
from dotenv import load_dotenv
import json
import os
import sys
import traceback
from pathlib import Path

from line_rewriter.exceptions import LineRewriterError, UnknownHandlerError
from line_rewriter.models import DEFAULT_ENCODING, PreviewOptions, ProcessOptions

load_dotenv()

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_PROCESSING_ERROR = 2
EXIT_IO_ERROR = 3
EXIT_UNEXPECTED = 4
EXIT_KEYBOARD_INTERRUPT = 130

# Environment overrides
ENV_ENCODING = "LINE_REWRITER_ENCODING"
ENV_HANDLERS = "LINE_REWRITER_HANDLERS"

DEFAULT_EXCLUDE_PATTERNS = [".git", "__pycache__", "node_modules"]


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    default_encoding = os.getenv(ENV_ENCODING, DEFAULT_ENCODING)
    parser = argparse.ArgumentParser(
        prog="line-rewriter",
        description="Rewrite text files line by line with predefined handlers",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to process (directories are walked recursively)",
    )
    parser.add_argument(
        "--handler",
        dest="handlers",
        action="append",
        default=[],
        help=(
            "Predefined handler to apply, repeatable; applied in the given order "
            f"(default: comma-separated list from ${ENV_HANDLERS})"
        ),
    )
    parser.add_argument(
        "--preview", action="store_true", help="Show the pending change without writing"
    )
    parser.add_argument(
        "--unified",
        action="store_true",
        help="With --preview, print a unified diff instead of the annotated preview",
    )
    parser.add_argument(
        "--show-spaces", action="store_true", help="Render spaces as '·' and tabs as '▸'"
    )
    parser.add_argument(
        "--hide-original-lines",
        action="store_true",
        help="Only show the new text of modified lines",
    )
    parser.add_argument(
        "--show-unchanged-lines", action="store_true", help="Also show untouched lines"
    )
    parser.add_argument(
        "--keep-original-indentation",
        action="store_true",
        help="Do not trim shared indentation of modified lines in the preview",
    )
    parser.add_argument(
        "--hide-deleted-lines", action="store_true", help="Do not show deleted lines"
    )
    parser.add_argument(
        "--hide-unchanged-log",
        action="store_true",
        help="Do not log files that were left unchanged",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=default_encoding,
        help=f"Text encoding of the files (default: {default_encoding})",
    )
    parser.add_argument("--verbose", action="store_true", help="Print tracebacks on errors")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print config and exit without processing"
    )
    parser.add_argument(
        "--output-json", action="store_true", help="With --dry-run, print config as JSON"
    )
    parser.add_argument(
        "--list-handlers", action="store_true", help="List predefined handlers and exit"
    )
    return parser


def resolve_handler_names(args: argparse.Namespace) -> list[str]:
    """Handler names from --handler, falling back to the environment."""
    if args.handlers:
        return args.handlers
    raw = os.getenv(ENV_HANDLERS, "")
    return [name.strip() for name in raw.split(",") if name.strip()]


def expand_paths(raw_paths: list[str]) -> list[str]:
    """Expand directories into the files below them.

    Raises:
        SystemExit: If a path is neither a file nor a directory.
    """
    from line_rewriter.utils.files import list_files

    files: list[str] = []
    for raw_path in raw_paths:
        path = Path(raw_path)
        if path.is_dir():
            files.extend(list_files(raw_path, DEFAULT_EXCLUDE_PATTERNS))
        elif path.is_file():
            files.append(raw_path)
        else:
            print(f"Error: '{raw_path}' is not a valid file or directory.", file=sys.stderr)
            raise SystemExit(EXIT_INVALID_INPUT)
    return files


def build_options(args: argparse.Namespace) -> ProcessOptions:
    return ProcessOptions(
        preview=args.preview,
        unified_diff=args.unified,
        hide_log_of_unchanged_file=args.hide_unchanged_log,
        encoding=args.encoding,
        preview_options=PreviewOptions(
            show_spaces=args.show_spaces,
            hide_original_lines=args.hide_original_lines,
            show_unchanged_lines=args.show_unchanged_lines,
            keep_original_indentation=args.keep_original_indentation,
            hide_deleted_lines=args.hide_deleted_lines,
        ),
    )


def print_config_human(config: dict) -> None:
    """Print configuration in human-readable format."""
    print("\nConfiguration:")
    print(f"{'='*40}")
    for key, value in config.items():
        print(f"  {key}: {value}")
    print(f"{'='*40}")


def print_handlers() -> None:
    from line_rewriter.handlers import registry

    for name in registry.names():
        print(name)


def _handle_error(label: str, exc: BaseException, verbose: bool, exit_code: int) -> int:
    """Print error message to stderr and return the exit code."""
    print(f"{label}: {exc}", file=sys.stderr)
    if verbose:
        traceback.print_exc(file=sys.stderr)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_handlers:
        print_handlers()
        return EXIT_SUCCESS

    if not args.paths:
        print("Error: no file or directory given.", file=sys.stderr)
        return EXIT_INVALID_INPUT

    handler_names = resolve_handler_names(args)
    if not handler_names:
        print(
            f"Error: no handler given (use --handler or set {ENV_HANDLERS}).",
            file=sys.stderr,
        )
        return EXIT_INVALID_INPUT

    try:
        files = expand_paths(args.paths)
    except SystemExit as exc:
        return exc.code

    options = build_options(args)

    if args.dry_run:
        config = {
            "files": files,
            "handlers": handler_names,
            **options.model_dump(),
        }
        if args.output_json:
            print(json.dumps(config, indent=2))
        else:
            print_config_human(config)
        return EXIT_SUCCESS

    try:
        from line_rewriter.engine import process_file
        from line_rewriter.handlers import registry

        handlers = registry.get_many(handler_names)
        for file_path in files:
            process_file(file_path, handlers, options)
        return EXIT_SUCCESS

    except UnknownHandlerError as exc:
        return _handle_error("Invalid handler", exc, args.verbose, EXIT_INVALID_INPUT)

    except LineRewriterError as exc:
        return _handle_error("Processing error", exc, args.verbose, EXIT_PROCESSING_ERROR)

    except OSError as exc:
        return _handle_error("I/O error", exc, args.verbose, EXIT_IO_ERROR)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_KEYBOARD_INTERRUPT

    except Exception as exc:
        return _handle_error("Unexpected error", exc, args.verbose, EXIT_UNEXPECTED)


if __name__ == "__main__":
    sys.exit(main())
