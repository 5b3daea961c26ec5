"""Resolvers map absolute resource names to concrete locations."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from resource_fixtures.locations import ResourceLocation, ResourceRoot
from resource_fixtures.naming import Anchor, anchor_root

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    """Callable mapping an absolute resource name to its location."""

    def __call__(self, name: str) -> ResourceLocation | None: ...


class ClasspathResolver:
    """Search an ordered list of roots; the first root holding the name wins."""

    def __init__(self, roots: Iterable[str | Path | ResourceRoot]):
        self._roots: list[ResourceRoot] = []
        for root in roots:
            entry = root if isinstance(root, ResourceRoot) else ResourceRoot(root)
            if entry not in self._roots:
                self._roots.append(entry)

    @classmethod
    def for_anchor(
        cls,
        anchor: Anchor,
        extra_roots: Iterable[str | Path] = (),
        include_sys_path: bool = True,
    ) -> ClasspathResolver:
        """Build the default search path for an anchor.

        The anchor's own import root is searched first, then ``extra_roots``,
        then every ``sys.path`` entry.
        """
        roots: list[str | Path] = []
        own_root = anchor_root(anchor)
        if own_root is not None:
            roots.append(own_root)
        roots.extend(extra_roots)
        if include_sys_path:
            # An empty entry stands for the current directory.
            roots.extend(Path(entry or ".") for entry in sys.path)
        return cls(roots)

    @property
    def roots(self) -> list[ResourceRoot]:
        return list(self._roots)

    def __call__(self, name: str) -> ResourceLocation | None:
        for root in self._roots:
            location = root.locate(name)
            if location is not None:
                logger.debug("Resolved resource %s in %s", name, root.path)
                return location
        logger.debug("Resource %s not found in %d roots", name, len(self._roots))
        return None

    def __repr__(self) -> str:
        return f"ClasspathResolver({[str(r.path) for r in self._roots]!r})"


def mapping_resolver(mapping: Mapping[str, str | Path]) -> Resolver:
    """Create a resolver over an explicit ``{absolute name: file}`` mapping.

    Useful when build tooling already knows where each fixture was bundled.
    Keys may be given with or without a leading slash.
    """
    files = {key.lstrip("/"): Path(value) for key, value in mapping.items()}

    def resolve(name: str) -> ResourceLocation | None:
        path = files.get(name)
        if path is None or not path.exists():
            logger.debug("Resource %s not in mapping", name)
            return None
        return ResourceLocation(name=path.name, root=path.parent)

    return resolve
