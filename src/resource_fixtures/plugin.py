"""pytest plugin providing resource fixtures.

Loaded automatically through the ``pytest11`` entry point.

Configuration (pytest.ini / pyproject.toml):
    [tool.pytest.ini_options]
    resource_roots = ["tests/shared-data"]
    resource_encoding = "utf-8"

Usage in tests:
    def test_parse(resources):
        text = resources.to_string("input.txt")

    def test_lines(resource_text_lines):
        assert resource_text_lines("input.txt")[0] == "header"
"""

from __future__ import annotations

from typing import Callable

import pytest

from resource_fixtures.config import ENCODING_INI, ROOTS_INI, ResourceSettings
from resource_fixtures.reader import ResourceReader


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        ROOTS_INI,
        type="linelist",
        default=[],
        help="Extra directories or zip archives searched for test resources.",
    )
    parser.addini(
        ENCODING_INI,
        default="",
        help="Default text encoding for test resources (utf-8).",
    )


@pytest.fixture(scope="session")
def resource_settings(pytestconfig: pytest.Config) -> ResourceSettings:
    """Resource settings read from the ini file."""
    return ResourceSettings.from_pytest_config(pytestconfig)


@pytest.fixture
def resources(
    request: pytest.FixtureRequest, resource_settings: ResourceSettings
) -> ResourceReader:
    """Reader anchored at the requesting test class, or its module."""
    anchor = request.cls if request.cls is not None else request.module
    return ResourceReader(anchor, settings=resource_settings)


@pytest.fixture
def resource_text_lines(
    resources: ResourceReader,
) -> Callable[..., list[str]]:
    """Helper returning all lines of a resource as a list."""

    def _read(name: str, encoding: str | None = None) -> list[str]:
        with resources.as_stream(name, encoding) as lines:
            return list(lines)

    return _read
