"""Remote List CLI - fetch, cache and query a line-delimited remote list."""

import argparse
import logging
from datetime import timedelta
from pathlib import Path
from urllib.parse import urlparse

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from remote_list.cache import DEFAULT_CACHE_DIR, DEFAULT_MAX_AGE, DEFAULT_TIMEOUT
from remote_list.errors import RemoteListError
from remote_list.exporter import export_records
from remote_list.remote_list import RemoteList

console = Console()

DEFAULT_CACHE_NAME = "list.txt"


def default_cache_path(url: str, cache_dir: Path = DEFAULT_CACHE_DIR) -> Path:
    """Derive a cache file path from the last path segment of *url*."""
    try:
        name = Path(urlparse(url).path).name or DEFAULT_CACHE_NAME
    except ValueError:
        name = DEFAULT_CACHE_NAME
    return cache_dir / name


def _configure_logging(verbose: bool, output_console: Console) -> None:
    log = logging.getLogger("remote_list")
    handler = RichHandler(console=output_console, show_path=False, log_time_format="[%X]")
    log.handlers[:] = [handler]
    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    log.propagate = False


def display_checks(
    checks: list[tuple[str, str, bool]],
    output_console: Console | None = None,
) -> None:
    """Display has/prefix/suffix checks as a table.

    Args:
        checks: List of (kind, term, matched) tuples.
        output_console: Optional Console for output (used in testing).
    """
    out = output_console or console
    table = Table(title="Checks", show_lines=False)
    table.add_column("Check", style="bold")
    table.add_column("Term")
    table.add_column("Result")

    for kind, term, matched in checks:
        result = Text("match", style="bold green") if matched else Text("no match", style="red")
        table.add_row(kind, Text(term), result)

    out.print(table)


def display_records(
    records: list[str],
    title: str,
    output_console: Console | None = None,
) -> None:
    """Display records in a single-column table followed by a count."""
    out = output_console or console
    table = Table(title=Text(title), show_lines=False)
    table.add_column("Record", style="bold")
    for record in records:
        table.add_row(Text(record))
    out.print(table)
    out.print(Text(f"Total: {len(records):,}", style="bold"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch a line-delimited list, cache it locally and query it."
    )
    parser.add_argument("url", help="Remote list URL")
    parser.add_argument(
        "--cache",
        metavar="PATH",
        type=Path,
        help=f"Local cache file (default: {DEFAULT_CACHE_DIR}/<url file name>)",
    )
    parser.add_argument(
        "--max-age",
        metavar="HOURS",
        type=float,
        default=DEFAULT_MAX_AGE.total_seconds() / 3600,
        help="Re-download when the cache is at least this old (default: 24)",
    )
    parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument("--has", metavar="TERM", action="append", default=[], help="Exact match check")
    parser.add_argument("--prefix", metavar="TERM", action="append", default=[], help="Prefix match check")
    parser.add_argument("--suffix", metavar="TERM", action="append", default=[], help="Suffix match check")
    parser.add_argument("--search", metavar="TERM", help="Show records containing TERM")
    parser.add_argument("--list", action="store_true", help="Show all records")
    parser.add_argument(
        "--add",
        metavar="VALUE",
        action="append",
        default=[],
        help="Add a record in memory before running queries (not saved)",
    )
    parser.add_argument(
        "--output",
        metavar="FILE",
        help="Export searched or listed records (.txt, .json, .jsonl, .csv)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None, output_console: Console | None = None) -> None:
    out = output_console or console
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output and args.search is None and not args.list:
        parser.error("--output requires --search or --list")

    _configure_logging(args.verbose, out)

    cache_path = args.cache or default_cache_path(args.url)
    try:
        remote = RemoteList(
            cache_path,
            args.url,
            timedelta(hours=args.max_age),
            timeout=args.timeout,
        )
    except RemoteListError as e:
        out.print(Text.assemble(("Error: ", "bold red"), str(e)))
        raise SystemExit(1) from e

    for value in args.add:
        remote.add(value)

    out.print(f"Loaded {len(remote):,} records from {cache_path}", markup=False, highlight=False)

    checks = (
        [("has", t, remote.has(t)) for t in args.has]
        + [("prefix", t, remote.has_prefix(t)) for t in args.prefix]
        + [("suffix", t, remote.has_suffix(t)) for t in args.suffix]
    )
    if checks:
        display_checks(checks, out)

    records: list[str] | None = None
    if args.search is not None:
        records = remote.search(args.search)
        display_records(records, f"Records matching {args.search!r}", out)
    elif args.list:
        records = remote.list()
        display_records(records, "All records", out)

    if args.output and records is not None:
        export_records(records, args.output)
        out.print(f"Records exported to {args.output}", markup=False, highlight=False)


if __name__ == "__main__":
    main()
