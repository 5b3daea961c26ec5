"""Command-line interface for inspecting how resource names resolve."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, TypeVar

import click
from rich.console import Console
from rich.table import Table

from resource_fixtures.config import DEFAULT_ENCODING, ResourceSettings
from resource_fixtures.errors import ResourceUnavailableError
from resource_fixtures.naming import Anchor, namespace_path
from resource_fixtures.reader import ResourceReader
from resource_fixtures.resolver import ClasspathResolver

console = Console()
error_console = Console(stderr=True)

F = TypeVar("F", bound=Callable[..., Any])

# Anchor for names given without --anchor: no package prefix, no own root.
TOP_LEVEL_ANCHOR = ModuleType("resource_fixtures_cli")


def _import_anchor(spec: str) -> Anchor:
    """Import ``module`` or ``module:Class`` (nested classes with dots)."""
    module_name, _, qualname = spec.partition(":")
    module = importlib.import_module(module_name)
    if not qualname:
        return module

    anchor: object = module
    for part in qualname.split("."):
        anchor = getattr(anchor, part)
    if not isinstance(anchor, type):
        raise TypeError(f"{qualname} is not a class")
    return anchor


def _build_reader(
    anchor_spec: str | None,
    roots: tuple[Path, ...],
    sys_path: bool,
    encoding: str,
) -> ResourceReader:
    try:
        anchor = _import_anchor(anchor_spec) if anchor_spec else TOP_LEVEL_ANCHOR
    except (ImportError, AttributeError, TypeError) as exc:
        error_console.print(f"[red]Error:[/red] Cannot load anchor {anchor_spec}: {exc}")
        sys.exit(1)

    try:
        settings = ResourceSettings(
            encoding=encoding, extra_roots=roots, include_sys_path=sys_path
        )
    except ValueError as exc:
        error_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    if anchor is TOP_LEVEL_ANCHOR:
        search = list(roots) or [Path.cwd()]
        if sys_path:
            search.extend(Path(entry or ".") for entry in sys.path)
        return ResourceReader(anchor, ClasspathResolver(search), settings)
    return ResourceReader(anchor, settings=settings)


def _anchor_options(func: F) -> F:
    func = click.option(
        "--sys-path/--no-sys-path",
        default=False,
        help="Also search sys.path entries.",
    )(func)
    func = click.option(
        "--root",
        "-r",
        "roots",
        multiple=True,
        type=click.Path(exists=True, path_type=Path),
        help="Directory or zip archive to search (repeatable).",
    )(func)
    func = click.option(
        "--anchor",
        "-a",
        default=None,
        help="Anchor as module or module:Class; relative names resolve in its package.",
    )(func)
    return func


@click.group()
def main() -> None:
    """Resolve and read test fixture resources."""


@main.command()
@click.argument("name")
@_anchor_options
def resolve(name: str, anchor: str | None, roots: tuple[Path, ...], sys_path: bool) -> None:
    """Show where NAME resolves to."""
    reader = _build_reader(anchor, roots, sys_path, DEFAULT_ENCODING)
    result = reader.lookup(name)

    table = Table(title="Resource resolution")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Name", name)
    table.add_row("Namespace", namespace_path(reader.anchor) or "(top level)")
    table.add_row("Absolute name", reader.resolve_name(name))
    if result.ok:
        table.add_row("Location", str(result.location))
        table.add_row("Status", "[green]found[/green]")
    else:
        table.add_row("Status", "[red]not found[/red]")
    console.print(table)

    if not result.ok:
        sys.exit(1)


@main.command()
@click.argument("name")
@_anchor_options
@click.option("--encoding", "-e", default=DEFAULT_ENCODING, show_default=True)
def cat(
    name: str,
    anchor: str | None,
    roots: tuple[Path, ...],
    sys_path: bool,
    encoding: str,
) -> None:
    """Print the decoded contents of NAME."""
    reader = _build_reader(anchor, roots, sys_path, encoding)
    try:
        text = reader.to_string(name)
    except (ResourceUnavailableError, UnicodeDecodeError) as exc:
        error_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    console.print(text, end="", markup=False, highlight=False, soft_wrap=True)


@main.command()
@click.argument("name")
@_anchor_options
@click.option("--encoding", "-e", default=DEFAULT_ENCODING, show_default=True)
def lines(
    name: str,
    anchor: str | None,
    roots: tuple[Path, ...],
    sys_path: bool,
    encoding: str,
) -> None:
    """Print the lines of NAME with line numbers."""
    reader = _build_reader(anchor, roots, sys_path, encoding)
    try:
        with reader.as_stream(name) as stream:
            for number, line in enumerate(stream, 1):
                console.print(
                    f"{number:>5} {line}", markup=False, highlight=False, soft_wrap=True
                )
    except (ResourceUnavailableError, UnicodeDecodeError) as exc:
        error_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
