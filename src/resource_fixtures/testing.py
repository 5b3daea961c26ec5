"""Base class for tests that read resource files bundled next to them.

Example:
    # tests/parser/test_parser.py, fixtures in tests/parser/
    from resource_fixtures import ResourceTest

    class TestParser(ResourceTest):
        def test_parse(self) -> None:
            text = self.to_string("simple.txt")
            ...

        def test_records(self) -> None:
            with self.as_stream("records.csv") as lines:
                assert next(lines) == "id,name"
"""

from __future__ import annotations

from abc import ABC
from typing import BinaryIO, ClassVar

from resource_fixtures.lines import LineStream
from resource_fixtures.naming import Anchor
from resource_fixtures.reader import ResourceReader
from resource_fixtures.resolver import Resolver


class ResourceTest(ABC):
    """Mixin giving test classes access to their resource files.

    Relative names are resolved in the package of the class returned by
    ``get_test_resource_class``; names starting with ``/`` are absolute.
    A missing or unreadable resource fails the test with
    ``ResourceUnavailableError``.

    Attributes:
        resource_anchor: Class or module anchoring relative names. Defaults
            to the concrete test class.
        resource_resolver: Resolver used instead of the default search path.
    """

    resource_anchor: ClassVar[Anchor | None] = None
    resource_resolver: ClassVar[Resolver | None] = None

    def get_test_resource_class(self) -> Anchor:
        """Return the class (or module) used to resolve resource names.

        Override when a shared base class should read its resources relative
        to a different location.
        """
        if self.resource_anchor is not None:
            return self.resource_anchor
        return type(self)

    def get_resource_reader(self) -> ResourceReader:
        return ResourceReader(
            self.get_test_resource_class(), resolver=_class_resolver(type(self))
        )

    def read_all_bytes(self, file_name: str) -> bytes:
        """Read the contents of the resource as bytes."""
        return self.get_resource_reader().read_all_bytes(file_name)

    def to_string(self, file_name: str, encoding: str = "utf-8") -> str:
        """Read the contents of the resource as a decoded string."""
        return self.get_resource_reader().to_string(file_name, encoding)

    def as_stream(self, file_name: str, encoding: str = "utf-8") -> LineStream:
        """Read the lines of the resource lazily. Close the returned stream."""
        return self.get_resource_reader().as_stream(file_name, encoding)

    def as_input_stream(self, file_name: str) -> BinaryIO:
        """Open the resource as a binary stream. Close the returned stream."""
        return self.get_resource_reader().as_input_stream(file_name)

    def get_text_lines_as_stream(self, text: str) -> LineStream:
        """Return the lines of ``text`` as a stream."""
        return ResourceReader.get_text_lines_as_stream(text)


def _class_resolver(cls: type) -> Resolver | None:
    # Plain functions stored on a class become methods on lookup, so read
    # the raw attribute from the defining class.
    for klass in cls.__mro__:
        if "resource_resolver" in klass.__dict__:
            return klass.__dict__["resource_resolver"]
    return None
