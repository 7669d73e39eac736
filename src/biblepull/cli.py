"""Command-line interface for biblepull."""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Verify core dependencies
try:
    import bs4  # noqa: F401
    import html2text  # noqa: F401
    import pydantic  # noqa: F401
    import pyperclip  # noqa: F401
    import requests  # noqa: F401
    import rich  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nBiblepull requires all core dependencies to be installed.", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pipx users: pipx reinstall biblepull --force", file=sys.stderr)
    print("  2. For pip users: pip install --upgrade --force-reinstall biblepull", file=sys.stderr)
    print("  3. For development: pip install -e .[dev]", file=sys.stderr)
    sys.exit(1)

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.converter import PassageConverter
from .errors import NoPassageFoundError
from .logging_config import setup_logging
from .models.config import DEFAULT_VERSION, PassageOptions
from .models.events import ConversionEvent
from .sinks import ClipboardSink, ConsoleSink


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="biblepull",
        usage="%(prog)s [options] reference",
        description="Look up a Bible passage and convert it to Markdown (also copied to the clipboard)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The reference should be enclosed in quotation marks if it contains spaces.

Examples:
  # Look up a passage in the default version
  biblepull "John 3:16-21"

  # Another version, words of Jesus in bold, no footnotes
  biblepull -v ESV -b -f "Matt 5:1-12"

  # Chapters and verses on their own lines
  biblepull -l "Psalm 23"

  # Use a saved page instead of a live lookup
  biblepull -t saved.html "Jude 1"
        """,
    )

    parser.add_argument(
        "reference",
        nargs="?",
        help="Passage reference to look up",
    )

    parser.add_argument(
        "-V",
        "--program-version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-b",
        "--boldwords",
        action="store_true",
        help="Make the words of Jesus be shown in bold",
    )
    parser.add_argument(
        "-c",
        "--copyright",
        action="store_false",
        help="Exclude copyright notice",
    )
    parser.add_argument(
        "-e",
        "--headers",
        action="store_false",
        help="Exclude editorial headers",
    )
    parser.add_argument(
        "-f",
        "--footnotes",
        action="store_false",
        help="Exclude footnotes",
    )
    parser.add_argument(
        "-i",
        "--info",
        action="store_true",
        dest="verbose",
        help="Show information as I work",
    )
    parser.add_argument(
        "-l",
        "--newline",
        action="store_true",
        help="Start chapters and verses on newline with H5 or H6 heading",
    )
    parser.add_argument(
        "-n",
        "--numbering",
        action="store_false",
        help="Exclude verse and chapter numbers",
    )
    parser.add_argument(
        "-r",
        "--crossrefs",
        action="store_false",
        help="Exclude cross-references",
    )
    parser.add_argument(
        "-t",
        "--test",
        type=Path,
        default=None,
        dest="filename",
        metavar="FILENAME",
        help="Pass HTML from FILENAME instead of live lookup. 'reference' must still be given, but will be ignored.",
    )
    parser.add_argument(
        "-v",
        "--version",
        default=DEFAULT_VERSION,
        metavar="VERSION",
        help=f"Select Bible version to lookup (default: {DEFAULT_VERSION})",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to log file (default: console only)",
    )

    return parser


def build_options(args: argparse.Namespace) -> PassageOptions:
    """Build PassageOptions from parsed arguments."""
    return PassageOptions(
        boldwords=args.boldwords,
        copyright=args.copyright,
        headers=args.headers,
        footnotes=args.footnotes,
        crossrefs=args.crossrefs,
        numbering=args.numbering,
        newline=args.newline,
        version=args.version,
        filename=args.filename,
        verbose=args.verbose,
    )


def run_conversion(args: argparse.Namespace) -> int:
    """Convert the requested passage and hand it to the sinks."""
    console = Console(stderr=True)

    try:
        options = build_options(args)
    except ValidationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    setup_logging(
        level="DEBUG" if options.verbose else "WARNING",
        log_file=str(args.log_file) if args.log_file else None,
    )

    def report(event: ConversionEvent) -> None:
        if event.message and not event.is_error:
            console.print(escape(event.message), style="yellow")

    with PassageConverter(options) as converter:
        ctx = converter.convert(args.reference, emit=report if options.verbose else None)

    if ctx.error is not None:
        console.print(f"[red]Error:[/red] {escape(str(ctx.error))}")
        if isinstance(ctx.error, NoPassageFoundError):
            for line in ctx.error.diagnostics():
                console.print(escape(line))
        return 1

    markdown = ctx.markdown or ""
    ConsoleSink().write(markdown)
    ClipboardSink().write(markdown)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.reference or not args.reference.strip():
        Console(stderr=True).print("[red]Error:[/red] you need to supply a reference.")
        parser.print_help(sys.stderr)
        return 1

    return run_conversion(args)


if __name__ == "__main__":
    sys.exit(main())
