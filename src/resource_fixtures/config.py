"""Settings for resource lookup, optionally read from pytest ini options."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pytest

DEFAULT_ENCODING = "utf-8"

ROOTS_INI = "resource_roots"
ENCODING_INI = "resource_encoding"


@dataclass(frozen=True)
class ResourceSettings:
    """How resources are searched and decoded.

    Attributes:
        encoding: Default text encoding for string and line reads.
        extra_roots: Search roots consulted after the anchor's own root.
        include_sys_path: Also search every ``sys.path`` entry.
    """

    encoding: str = DEFAULT_ENCODING
    extra_roots: tuple[Path, ...] = field(default_factory=tuple)
    include_sys_path: bool = True

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown resource encoding: {self.encoding!r}") from exc
        object.__setattr__(self, "extra_roots", tuple(Path(p) for p in self.extra_roots))

    @classmethod
    def from_pytest_config(cls, config: pytest.Config) -> ResourceSettings:
        """Read ``resource_roots`` and ``resource_encoding`` from the ini file.

        Relative roots are taken relative to the pytest rootdir.
        """
        rootdir = Path(config.rootpath)
        roots = []
        for entry in config.getini(ROOTS_INI) or []:
            path = Path(entry)
            roots.append(path if path.is_absolute() else rootdir / path)

        encoding = config.getini(ENCODING_INI) or DEFAULT_ENCODING
        return cls(encoding=encoding, extra_roots=tuple(roots))
