"""
Command-line frontend.

Usage:
  storesearch search "query" [-c music] [--backend httpx] [--json]
  storesearch init-config [PATH]
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from storesearch import __version__
from storesearch.infra.config import ConfigAdapter, copy_default_config, load_config
from storesearch.infra.config.adapter import SUPPORTED_BACKENDS
from storesearch.infra.logger import setup_logging
from storesearch.infra.paths import DEFAULT_CONFIG_FILENAME
from storesearch.protocols import SearchUI
from storesearch.schemas import (
    Category,
    NoResults,
    Results,
    SearchConfig,
    SearchResult,
    SearchState,
)
from storesearch.search import Search

logger = logging.getLogger(__name__)


class ConsoleUI:
    """:class:`SearchUI` that renders pipeline output to a text stream."""

    def __init__(self, out: TextIO | None = None, *, as_json: bool = False) -> None:
        self._out = out or sys.stdout
        self._as_json = as_json

    def on_state(self, state: SearchState) -> None:
        logger.debug("State: %s", type(state).__name__)

    def on_results(self, results: list[SearchResult]) -> None:
        if self._as_json:
            rows = [dataclasses.asdict(r) for r in results]
            self._out.write(json.dumps(rows, ensure_ascii=False, indent=2) + "\n")
            return

        if not results:
            self._out.write("Nothing Found\n")
            return

        for r in results:
            self._out.write(
                f"{r.name}\t{r.artist_display}\t{r.kind_display}\t{r.price_display}\n"
            )

    def on_error(self, message: str) -> None:
        sys.stderr.write(f"Whoops... {message}\n")


def _add_common_options(parser: argparse.ArgumentParser, default: Any = None) -> None:
    parser.add_argument(
        "--config", type=Path, default=default, help="path to settings.toml/json"
    )
    parser.add_argument(
        "--log-level", default=default, help="override the configured log level"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storesearch",
        description="Search the iTunes store catalog.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    _add_common_options(parser)

    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="run a single search")
    search.add_argument("term", help="text to search for")
    search.add_argument(
        "-c",
        "--category",
        default="all",
        choices=[c.name.lower() for c in Category],
        help="catalog sub-type (default: all)",
    )
    search.add_argument(
        "--backend",
        choices=SUPPORTED_BACKENDS,
        help="HTTP backend (default: from config, else aiohttp)",
    )
    search.add_argument("--json", action="store_true", help="print results as JSON")
    # SUPPRESS keeps values given before the subcommand.
    _add_common_options(search, default=argparse.SUPPRESS)

    init = sub.add_parser("init-config", help="write the sample settings file")
    init.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILENAME),
        help=f"target file (default: ./{DEFAULT_CONFIG_FILENAME})",
    )
    init.add_argument("--force", action="store_true", help="overwrite existing file")

    return parser


def load_adapter(config_path: Path | None) -> ConfigAdapter:
    """Loads configuration, falling back to defaults when no file exists.

    An explicit ``config_path`` that cannot be found is still an error.
    """
    try:
        return ConfigAdapter(load_config(config_path))
    except FileNotFoundError:
        if config_path is not None:
            raise
        return ConfigAdapter({})


async def run_search(
    term: str,
    category: Category,
    config: SearchConfig,
    ui: SearchUI,
) -> bool:
    """Runs one search through the pipeline and renders its outcome."""
    async with Search(config) as search:
        search.add_listener(ui.on_state)
        ok = await search.search(term, category)
        state = search.state

    if not ok:
        ui.on_error("There was an error accessing the iTunes Store. Please try again.")
        return False

    if isinstance(state, Results):
        ui.on_results(list(state.results))
    elif isinstance(state, NoResults):
        ui.on_results([])
    return True


def _cmd_search(args: argparse.Namespace, adapter: ConfigAdapter) -> int:
    if not args.term:
        raise ValueError("Search term must not be empty")

    config = adapter.get_search_config()
    if args.backend:
        config.backend = args.backend

    ui = ConsoleUI(as_json=args.json)
    ok = asyncio.run(
        run_search(args.term, Category.from_name(args.category), config, ui)
    )
    return 0 if ok else 1


def _cmd_init_config(args: argparse.Namespace) -> int:
    target: Path = args.path
    if target.exists() and not args.force:
        sys.stderr.write(f"{target} already exists (use --force to overwrite)\n")
        return 1
    copy_default_config(target)
    sys.stdout.write(f"Wrote {target}\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "init-config":
        return _cmd_init_config(args)

    try:
        adapter = load_adapter(args.config)
        setup_logging(args.log_level or adapter.get_log_level(), adapter.get_log_dir())
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    try:
        return _cmd_search(args, adapter)
    except ValueError as e:
        logger.error("%s", e)
        return 1
