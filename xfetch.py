#!/usr/bin/env python3
"""
xfetch - print a short summary of the host: OS, kernel, session, uptime, shell
"""

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from collector import iter_facts
from command_reader import DEFAULT_TIMEOUT
from facts import Fact

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True)

logger = logging.getLogger("xfetch")


def _default_timeout() -> float:
    """Subprocess timeout from $XFETCH_TIMEOUT, or the built-in default."""
    raw = os.environ.get("XFETCH_TIMEOUT", "")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return value


def setup_logging(debug: bool = False):
    """Send diagnostics to stderr so they never interleave with the facts."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=debug)],
        force=True,
    )


def format_fact(fact: Fact) -> Text:
    """One output line; the label is styled, the value is printed verbatim."""
    text = Text()
    if fact.value:
        text.append(f"{fact.name.label}:", style="bold #E95420")
        text.append(f" {fact.value}")
    else:
        text.append(fact.render(), style="dim")
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xfetch",
        description="Print hostname, OS, kernel, session, desktop, window manager, uptime and shell.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  xfetch                  # Print the summary
  xfetch --debug          # Also show which source answered each fact
  xfetch --timeout 1      # Give up on slow utilities after one second
        """,
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=_default_timeout(),
        help=f"seconds to wait for each external command (default {DEFAULT_TIMEOUT:g}, env XFETCH_TIMEOUT)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="log probe diagnostics to stderr"
    )
    return parser


def main(argv=None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    logger.debug(f"Subprocess timeout: {args.timeout:g}s")

    for fact in iter_facts(timeout=args.timeout):
        console.print(format_fact(fact))
    return 0


if __name__ == "__main__":
    sys.exit(main())
