"""Search roots and resolved resource locations."""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from resource_fixtures.errors import ResourceErrorReason, ResourceUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceLocation:
    """A resource found under a search root.

    Attributes:
        name: Resource name relative to ``root`` (no leading slash).
        root: Directory or zip archive the resource was found in.
        archive: True if ``root`` is a zip archive.
    """

    name: str
    root: Path
    archive: bool = False

    @property
    def uri(self) -> str:
        if self.archive:
            return f"zip:{self.root.as_posix()}!/{self.name}"
        return (self.root / self.name).absolute().as_uri()

    def as_path(self) -> Path:
        """Get the resource as a filesystem path.

        Raises:
            ResourceUnavailableError: If the resource lives inside an archive.
        """
        if self.archive:
            raise ResourceUnavailableError(
                self.name, ResourceErrorReason.NOT_A_FILE, self.uri
            )
        return self.root / self.name

    def open(self) -> BinaryIO:
        """Open the resource for binary reading. The caller closes the stream."""
        if not self.archive:
            return self.as_path().open("rb")

        archive = zipfile.ZipFile(self.root, "r")
        try:
            # The entry keeps the archive file alive until it is closed.
            return archive.open(self.name, "r")  # type: ignore[return-value]
        except KeyError as exc:
            # Only a directory entry ("name/") matched.
            raise IsADirectoryError(f"{self.uri} is a directory entry") from exc
        finally:
            archive.close()

    def __str__(self) -> str:
        return self.uri


class ResourceRoot:
    """One entry of the resource search path: a directory or a zip archive."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._archive = zipfile.is_zipfile(self._path) if self._path.is_file() else False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_archive(self) -> bool:
        return self._archive

    def locate(self, name: str) -> ResourceLocation | None:
        """Find an absolute resource name under this root."""
        if not name:
            return None

        if self._archive:
            return self._locate_in_archive(name)

        if not self._path.is_dir():
            return None
        if (self._path / name).exists():
            return ResourceLocation(name=name, root=self._path)
        return None

    def _locate_in_archive(self, name: str) -> ResourceLocation | None:
        try:
            with zipfile.ZipFile(self._path, "r") as archive:
                names = set(archive.namelist())
        except (OSError, zipfile.BadZipFile) as exc:
            logger.debug("Skipping unreadable archive %s: %s", self._path, exc)
            return None

        if name in names or f"{name}/" in names:
            return ResourceLocation(name=name, root=self._path, archive=True)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceRoot):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        kind = "archive" if self._archive else "directory"
        return f"ResourceRoot({str(self._path)!r}, {kind})"
