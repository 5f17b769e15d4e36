"""CLI entry point for filetree — I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from filetree.config import DEFAULT_MAX_DEPTH, Config
from filetree.context import ScanContext
from filetree.errors import FileTreeError, ScanInterruptedError
from filetree.node import ScanResult
from filetree.renderer import RenderOptions, default_filename, render
from filetree.scanner import scan

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

EXIT_ERROR = 1
EXIT_INCOMPLETE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``filetree`` command.
    """
    parser = argparse.ArgumentParser(
        prog="filetree",
        description="scan a directory and print it as a box-drawing file tree",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Root directory to scan (default: current directory)",
    )

    # scan policy
    parser.add_argument(
        "-L",
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        dest="max_depth",
        help=(
            "Deepest directory level whose entries are listed; the root is "
            f"level 0, negative means unlimited (default: {DEFAULT_MAX_DEPTH})"
        ),
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="show_hidden",
        help="Include hidden entries (starting with .)",
    )
    parser.add_argument(
        "--no-dirsfirst",
        action="store_false",
        dest="sort_dirs_first",
        help="Keep filesystem order instead of listing directories first",
    )
    parser.add_argument(
        "-I",
        "--exclude",
        action="append",
        default=[],
        dest="patterns",
        help="Exclude entries matching pattern (can be specified multiple times)",
    )
    parser.add_argument(
        "--preset",
        type=str,
        default=None,
        help="Apply exclusion preset (python, node, rust, generic)",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Skip entries matched by the root .gitignore",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Abort the scan after SECONDS, 0 disables (default: {DEFAULT_TIMEOUT:g})",
    )

    # output
    parser.add_argument(
        "--charset",
        choices=["unicode", "ascii"],
        default="unicode",
        help="Character set for tree connectors (default: unicode)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        dest="output_file",
        help="Write output to a file instead of stdout",
    )
    output.add_argument(
        "--save",
        action="store_true",
        help="Write output to file_tree_<timestamp>.txt in the current directory",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log skipped entries"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )
    return parser


def run_filetree(argv: list[str] | None = None) -> str:
    """Run filetree with provided CLI args and return rendered output.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.

    Returns:
        str: Rendered tree text.

    Raises:
        FileTreeError: On any user-facing validation, I/O or scan error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    output, _ = _run_with_args(args)
    return output


def _build_exclude_patterns(args: argparse.Namespace) -> tuple[str, ...]:
    """Combine ``-I`` patterns with the selected preset.

    Raises:
        FileTreeError: If ``--preset`` names an unknown preset.
    """
    patterns: list[str] = list(args.patterns)
    if not args.preset:
        return tuple(patterns)

    from filetree.filter import get_preset_patterns

    try:
        patterns.extend(get_preset_patterns(args.preset))
    except ValueError as exc:
        raise FileTreeError(str(exc)) from exc
    return tuple(patterns)


def _build_config(args: argparse.Namespace) -> Config:
    return Config(
        max_depth=args.max_depth,
        show_hidden=args.show_hidden,
        sort_dirs_first=args.sort_dirs_first,
        exclude_patterns=_build_exclude_patterns(args),
        gitignore=args.gitignore,
    )


def _build_context(args: argparse.Namespace) -> ScanContext:
    if args.timeout < 0:
        raise FileTreeError("--timeout must not be negative")
    return ScanContext(timeout=args.timeout or None)


def _scan_in_background(
    context: ScanContext, directory: str, config: Config
) -> ScanResult:
    """Run the scan on a worker thread; Ctrl-C cancels it cooperatively."""
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="filetree-scan") as pool:
        future = pool.submit(scan, context, directory, config)
        try:
            return future.result()
        except KeyboardInterrupt:
            context.cancel()
            return future.result()


def _run_with_args(args: argparse.Namespace) -> tuple[str, ScanResult]:
    """Run the scan/render pipeline for parsed arguments.

    Returns:
        tuple[str, ScanResult]: Rendered output and the scan result.

    Raises:
        FileTreeError: On any user-facing validation, I/O or scan error.
    """
    config = _build_config(args)
    context = _build_context(args)
    result = _scan_in_background(context, args.directory, config)
    output = render(result.root, RenderOptions(charset=args.charset))
    return output, result


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level, format="filetree: %(levelname)s: %(message)s", stream=sys.stderr
    )


def main() -> None:
    """Run the CLI entry point with process arguments.

    Writes output to stdout, ``-o`` file or a timestamped file. Exits
    with code 1 on errors and 2 when the scan was cancelled or timed out.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse
    _configure_logging(args)

    try:
        output, result = _run_with_args(args)
    except ScanInterruptedError as exc:
        sys.stderr.write(f"filetree: {exc}\n")
        sys.exit(EXIT_INCOMPLETE)
    except FileTreeError as exc:
        sys.stderr.write(f"filetree: {exc}\n")
        sys.exit(EXIT_ERROR)

    target = args.output_file or (default_filename() if args.save else None)
    if target:
        try:
            Path(target).write_text(output, encoding="utf-8", newline="")
        except OSError as exc:
            sys.stderr.write(f"filetree: cannot write to '{target}': {exc}\n")
            sys.exit(EXIT_ERROR)
        logger.info("Saved file tree to %s", target)
    else:
        sys.stdout.write(output)

    if not args.quiet:
        sys.stderr.write(
            f"Scanned {result.node_count} items from: {result.root_path}\n"
        )
