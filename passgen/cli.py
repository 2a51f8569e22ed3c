"""CLI for passgen: generate random passwords from letters, digits and symbols."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DEFAULTS, load_config
from .errors import ConfigError, PasswordGeneratorError
from .generator import generate

logger = logging.getLogger(__name__)

# passwords may contain "[", ":" and other characters rich would otherwise interpret
console = Console(soft_wrap=True, emoji=False, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)

DESCRIPTION = """Generate a random password with advanced options including:
- length specification
- inclusion of symbols and numbers, exclusion of similar characters
- minimum and maximum length constraints
- verbose output and configuration file support"""


def setup_logging(verbose: bool) -> None:
    log = logging.getLogger("passgen")
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="password-generator",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # None means "not given" so config file values are not overridden
    parser.add_argument("--length", "-l", type=int, help=f"Length of the password (default {DEFAULTS['length']})")
    parser.add_argument("--symbols", "-s", action="store_true", default=None, help="Include symbols in the password")
    parser.add_argument("--numbers", "-n", action="store_true", default=None, help="Include numbers in the password (default)")
    parser.add_argument("--no-numbers", dest="numbers", action="store_false", default=None, help="Do not include numbers")
    parser.add_argument(
        "--exclude-similar", "-x", action="store_true", default=None,
        help="Exclude similar characters (like 1, l, I, 0, O)",
    )
    parser.add_argument("--min-length", type=int, help=f"Minimum length of the password (default {DEFAULTS['min_length']})")
    parser.add_argument("--max-length", type=int, help=f"Maximum length of the password (default {DEFAULTS['max_length']})")
    parser.add_argument("--config", "-c", type=str, help="Path to a configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", default=None, help="Verbose output")
    parser.add_argument("--count", type=int, default=1, help="How many passwords to generate")
    return parser


def resolve_options(args: argparse.Namespace, cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay the flags that were actually given on top of the loaded settings."""
    opts = dict(cfg)
    for key in DEFAULTS:
        value = getattr(args, key, None)
        if value is not None:
            opts[key] = value
    return opts


def print_options(opts: Dict[str, Any]) -> None:
    table = Table(title="Generating password with the following options", show_header=False)
    table.add_column("Option", style="bold cyan")
    table.add_column("Value")
    table.add_row("Length", str(opts["length"]))
    table.add_row("Include Symbols", str(opts["symbols"]))
    table.add_row("Include Numbers", str(opts["numbers"]))
    table.add_row("Exclude Similar Characters", str(opts["exclude_similar"]))
    table.add_row("Min Length", str(opts["min_length"]))
    table.add_row("Max Length", str(opts["max_length"]))
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")

    setup_logging(bool(args.verbose))
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        err_console.print(f"[red]Error loading configuration:[/red] {escape(str(e))}")
        return 1

    opts = resolve_options(args, cfg)
    if opts["verbose"]:
        setup_logging(True)
        print_options(opts)

    try:
        passwords = [
            generate(
                opts["length"],
                include_symbols=opts["symbols"],
                include_digits=opts["numbers"],
                exclude_similar=opts["exclude_similar"],
                min_length=opts["min_length"],
                max_length=opts["max_length"],
            )
            for _ in range(args.count)
        ]
    except PasswordGeneratorError as e:
        logger.debug("generation failed", exc_info=True)
        err_console.print(f"[red]Error generating password:[/red] {escape(str(e))}")
        return 1

    for pw in passwords:
        console.print(f"Generated password: {pw}", markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
