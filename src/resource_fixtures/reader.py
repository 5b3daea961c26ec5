"""Read fixture resources relative to an anchor class or module."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from resource_fixtures.config import ResourceSettings
from resource_fixtures.errors import (
    ResourceErrorReason,
    ResourceResult,
    ResourceUnavailableError,
)
from resource_fixtures.lines import LineStream, open_line_stream, text_lines
from resource_fixtures.naming import Anchor, resolve_resource_name
from resource_fixtures.resolver import ClasspathResolver, Resolver

logger = logging.getLogger(__name__)


class ResourceReader:
    """Locates resources for an anchor and returns their contents.

    Resource names follow class loader rules: a name starting with ``/`` is
    absolute, any other name is relative to the anchor's package.

    Every read fails with ``ResourceUnavailableError`` (an ``AssertionError``)
    when the resource is missing or unreadable. Use ``lookup`` to branch on a
    missing resource instead.

    Example:
        reader = ResourceReader(TestParser)
        data = reader.read_all_bytes("input.bin")
        text = reader.to_string("/shared/config.json")

        with reader.as_stream("records.txt") as lines:
            for line in lines:
                ...
    """

    def __init__(
        self,
        anchor: Anchor,
        resolver: Resolver | None = None,
        settings: ResourceSettings | None = None,
    ):
        self._anchor = anchor
        self._settings = settings or ResourceSettings()
        if resolver is None:
            resolver = ClasspathResolver.for_anchor(
                anchor,
                extra_roots=self._settings.extra_roots,
                include_sys_path=self._settings.include_sys_path,
            )
        self._resolver = resolver

    @property
    def anchor(self) -> Anchor:
        return self._anchor

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def encoding(self) -> str:
        return self._settings.encoding

    def resolve_name(self, name: str) -> str:
        """Get the absolute resource name for ``name``."""
        return resolve_resource_name(name, self._anchor)

    def lookup(self, name: str) -> ResourceResult:
        """Locate a resource without raising when it is missing."""
        absolute = self.resolve_name(name)
        location = self._resolver(absolute) if absolute else None
        if location is None:
            logger.debug("Can't find resource %s (resolved to %r)", name, absolute)
            return ResourceResult.missing(name, detail=f"looked up as {absolute!r}")
        return ResourceResult.found(name, location)

    def _file_path(self, name: str) -> Path:
        location = self.lookup(name).unwrap()
        if location.archive:
            raise ResourceUnavailableError(
                name, ResourceErrorReason.NOT_A_FILE, location.uri
            )
        return location.as_path()

    def read_all_bytes(self, name: str) -> bytes:
        """Read the whole resource as bytes."""
        path = self._file_path(name)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ResourceUnavailableError(
                name, ResourceErrorReason.UNREADABLE, str(exc)
            ) from exc

    def to_string(self, name: str, encoding: str | None = None) -> str:
        """Read the whole resource as text.

        Decoding errors are not wrapped: a ``UnicodeDecodeError`` propagates.
        """
        return self.read_all_bytes(name).decode(encoding or self.encoding)

    def as_stream(self, name: str, encoding: str | None = None) -> LineStream:
        """Open the resource as a lazy stream of lines. The caller closes it."""
        path = self._file_path(name)
        try:
            binary = path.open("rb")
        except OSError as exc:
            raise ResourceUnavailableError(
                name, ResourceErrorReason.UNREADABLE, str(exc)
            ) from exc
        try:
            return open_line_stream(binary, encoding or self.encoding)
        except BaseException:
            binary.close()
            raise

    def as_input_stream(self, name: str) -> BinaryIO:
        """Open the resource as a binary stream. The caller closes it.

        Unlike the other reads this does not need a filesystem path, so it
        also works for resources inside zip archives.
        """
        location = self.lookup(name).unwrap()
        try:
            return location.open()
        except OSError as exc:
            raise ResourceUnavailableError(
                name, ResourceErrorReason.UNREADABLE, str(exc)
            ) from exc

    @staticmethod
    def get_text_lines_as_stream(text: str) -> LineStream:
        """Split an in-memory string using the same rules as ``as_stream``."""
        return text_lines(text)

    def __repr__(self) -> str:
        anchor = getattr(self._anchor, "__qualname__", None) or self._anchor.__name__
        return f"ResourceReader({anchor!r}, encoding={self.encoding!r})"
