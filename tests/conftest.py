"""pytest configuration and fixtures for resource_fixtures tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from resource_fixtures import ClasspathResolver, ResourceReader
from tests.fixture_loader import make_anchor, write_archive, write_tree

pytest_plugins = ["resource_fixtures.plugin"]

SAMPLE_FILES: dict[str, bytes | str] = {
    "pkg/sub/hello.txt": "Hello from pkg.sub\n",
    "pkg/sub/lines.txt": b"one\r\ntwo\rthree\nfour\n",
    "pkg/sub/latin1.txt": "Grüße\n".encode("latin-1"),
    "pkg/other/hello.txt": "Hello from pkg.other\n",
    "shared/settings.json": '{"debug": true}\n',
}


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """Directory root holding the sample resources."""
    return write_tree(tmp_path / "root", SAMPLE_FILES)


@pytest.fixture
def resource_archive(tmp_path: Path) -> Path:
    """Zip archive root holding the sample resources."""
    return write_archive(tmp_path / "resources.zip", SAMPLE_FILES)


@pytest.fixture
def sub_anchor() -> type:
    """Anchor class living in the ``pkg.sub`` package."""
    return make_anchor("pkg.sub.test_module", "TestSub")


@pytest.fixture
def other_anchor() -> type:
    """Anchor class living in the ``pkg.other`` package."""
    return make_anchor("pkg.other.test_module", "TestOther")


@pytest.fixture
def reader(resource_root: Path, sub_anchor: type) -> ResourceReader:
    """Reader over the sample directory tree, anchored in ``pkg.sub``."""
    return ResourceReader(sub_anchor, ClasspathResolver([resource_root]))


@pytest.fixture
def archive_reader(resource_archive: Path, sub_anchor: type) -> ResourceReader:
    """Reader over the sample zip archive, anchored in ``pkg.sub``."""
    return ResourceReader(sub_anchor, ClasspathResolver([resource_archive]))
