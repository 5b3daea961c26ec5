"""Resource name resolution relative to an anchor class or module.

An anchor plays the part of a class loader: relative resource names are
looked up in the package that defines the anchor, absolute names (leading
``/``) are looked up from the top of every search root.

Example:
    # tests/util/test_parser.py defines TestParser
    resolve_resource_name("input.txt", TestParser)   # "tests/util/input.txt"
    resolve_resource_name("/input.txt", TestParser)  # "input.txt"
"""

from __future__ import annotations

import sys
from pathlib import Path
from types import ModuleType
from typing import Union

Anchor = Union[type, ModuleType]

SEPARATOR = "/"


def _anchor_module_name(anchor: Anchor) -> str:
    if isinstance(anchor, ModuleType):
        return anchor.__name__
    return anchor.__module__


def _anchor_module(anchor: Anchor) -> ModuleType | None:
    if isinstance(anchor, ModuleType):
        return anchor
    return sys.modules.get(anchor.__module__)


def namespace_path(anchor: Anchor) -> str:
    """Get the slash-separated package path of an anchor."""
    module_name = _anchor_module_name(anchor)
    module = _anchor_module(anchor)

    if module is not None and hasattr(module, "__path__"):
        package = module_name
    else:
        package = module_name.rpartition(".")[0]

    if package == "__main__":
        return ""
    return package.replace(".", SEPARATOR)


def resolve_resource_name(name: str, anchor: Anchor) -> str:
    """Build the absolute resource name for ``name`` as seen from ``anchor``."""
    if name.startswith(SEPARATOR):
        return name[len(SEPARATOR):]

    prefix = namespace_path(anchor)
    if not prefix:
        return name
    return f"{prefix}{SEPARATOR}{name}"


def anchor_root(anchor: Anchor) -> Path | None:
    """Get the import root (directory or zip archive) the anchor came from."""
    module = _anchor_module(anchor)
    if module is None:
        return None

    # zipimport exposes the archive path on the loader
    archive = getattr(getattr(module, "__loader__", None), "archive", None)
    if archive:
        return Path(archive)

    module_file = getattr(module, "__file__", None)
    if not module_file:
        return None

    root = Path(module_file).resolve().parent
    prefix = namespace_path(anchor)
    for _ in prefix.split(SEPARATOR) if prefix else ():
        root = root.parent
    return root
