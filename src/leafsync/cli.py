"""Command-line interface for leafsync."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from rich.console import Console
from rich.table import Table

from leafsync.config import load_config, load_panels
from leafsync.contracts.config import LatticeOptions
from leafsync.contracts.exceptions import ConfigError, RenderError
from leafsync.contracts.panel import HtmlWidget
from leafsync.view import LatticeView, build_options, compose


def _package_version() -> str:
    try:
        return version("leafsync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="leafsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Compose panel HTML files into one page")
    render_parser.add_argument("--config", required=True, help="Path to lattice config JSON")
    render_parser.add_argument("--output", help="Override the output path from the config")
    render_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    plan_parser = subparsers.add_parser("plan", help="Show layout and link commands for N panels")
    plan_parser.add_argument("--panels", type=int, required=True, help="Number of panels")
    plan_parser.add_argument("--ncol", type=int, default=2, help="Grid column count")
    plan_parser.add_argument("--sync", default="all", help="'all', 'none' or a JSON list of index groups")
    plan_parser.add_argument("--sync-cursor", action="store_true", help="Share cursor position")
    plan_parser.add_argument("--initial-sync", action="store_true", help="Align views when linking")
    plan_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _parse_sync(raw: str) -> Any:
    if raw in {"all", "none"}:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"--sync must be 'all', 'none' or a JSON list of index groups: {raw}") from exc


def _run_render(args: argparse.Namespace, console: Console) -> None:
    config = load_config(args.config)
    view = compose(
        tuple(load_panels(config)),
        config.options,
        binding=config.binding,
        container_selector=config.container_selector,
        dependency_src=config.dependency_src,
        title=config.title,
    )
    output = view.save(args.output or config.output)
    console.print(
        f"leafsync - wrote {len(view.panels)} panel(s), {len(view.commands)} link(s) to {output}", soft_wrap=True
    )


def _run_plan(args: argparse.Namespace, console: Console) -> None:
    options = build_options(
        ncol=args.ncol,
        sync=_parse_sync(args.sync),
        sync_cursor=args.sync_cursor,
        no_initial_sync=not args.initial_sync,
    )
    if args.panels < 0:
        raise ConfigError(f"--panels must not be negative, got {args.panels}")
    widgets = tuple(HtmlWidget(html="", element_id=f"panel-{index}") for index in range(args.panels))
    view = compose(widgets, options)
    console.print(_format_plan(view, options))


def _format_plan(view: LatticeView, options: LatticeOptions) -> Table:
    layout = view.layout
    table = Table(title=f"{layout.panel_count} panel(s), {layout.ncol} column(s), width {layout.width_percent}%")
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("syncCursor")
    table.add_column("noInitialSync")
    for command in view.commands:
        table.add_row(
            command.source_id,
            command.target_id,
            str(command.sync_cursor).lower(),
            str(command.no_initial_sync).lower(),
        )
    if not view.commands:
        table.caption = f"no links (sync={options.sync!r})"
    return table


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    console = Console()
    try:
        if args.command == "render":
            _run_render(args, console)
        else:
            _run_plan(args, console)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except RenderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
