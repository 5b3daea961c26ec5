"""Resource Fixtures - read test fixture files bundled next to test code.

Resource names are resolved like class loader resources: relative to the
package of an anchor class (usually the test class), or absolute when they
start with ``/``.

Example:
    from resource_fixtures import ResourceTest

    class TestParser(ResourceTest):
        def test_parse(self) -> None:
            data = self.read_all_bytes("input.bin")
            text = self.to_string("/shared/settings.json")

            with self.as_stream("records.txt") as lines:
                header = next(lines)

    # Without subclassing
    from resource_fixtures import ResourceReader

    reader = ResourceReader(TestParser)
    result = reader.lookup("optional.txt")
    if result.ok:
        print(result.location)
"""

import logging

from resource_fixtures.config import ResourceSettings
from resource_fixtures.errors import (
    ResourceErrorReason,
    ResourceResult,
    ResourceUnavailableError,
)
from resource_fixtures.lines import LineStream, open_line_stream, text_lines
from resource_fixtures.locations import ResourceLocation, ResourceRoot
from resource_fixtures.naming import namespace_path, resolve_resource_name
from resource_fixtures.reader import ResourceReader
from resource_fixtures.resolver import ClasspathResolver, Resolver, mapping_resolver
from resource_fixtures.testing import ResourceTest

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Main API
    "ResourceTest",
    "ResourceReader",
    "ResourceSettings",
    # Results and errors
    "ResourceResult",
    "ResourceUnavailableError",
    "ResourceErrorReason",
    # Resolution
    "Resolver",
    "ClasspathResolver",
    "mapping_resolver",
    "ResourceLocation",
    "ResourceRoot",
    "namespace_path",
    "resolve_resource_name",
    # Line streams
    "LineStream",
    "open_line_stream",
    "text_lines",
]
