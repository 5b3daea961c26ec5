"""Error types and lookup results for fixture resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resource_fixtures.locations import ResourceLocation


class ResourceErrorReason(Enum):
    """Why a resource could not be provided."""

    NOT_FOUND = "Can't find resource"
    UNREADABLE = "Can't read resource"
    NOT_A_FILE = "Can't convert resource to a file path"


class ResourceUnavailableError(AssertionError):
    """Raised when a fixture resource cannot be located, opened or read.

    A missing fixture means the test environment is broken, so this is an
    ``AssertionError``: test runners report it as a failed test.
    """

    def __init__(
        self,
        name: str,
        reason: ResourceErrorReason = ResourceErrorReason.NOT_FOUND,
        detail: str = "",
    ):
        message = f"{reason.value} {name}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.name = name
        self.reason = reason
        self.detail = detail


@dataclass(frozen=True)
class ResourceResult:
    """Tagged outcome of a resource lookup."""

    name: str
    location: ResourceLocation | None = None
    error: ResourceUnavailableError | None = None

    def __post_init__(self) -> None:
        if (self.location is None) == (self.error is None):
            raise ValueError("ResourceResult needs exactly one of location or error")

    @classmethod
    def found(cls, name: str, location: ResourceLocation) -> ResourceResult:
        return cls(name=name, location=location)

    @classmethod
    def missing(cls, name: str, detail: str = "") -> ResourceResult:
        return cls(
            name=name,
            error=ResourceUnavailableError(name, ResourceErrorReason.NOT_FOUND, detail),
        )

    @property
    def ok(self) -> bool:
        return self.location is not None

    def unwrap(self) -> ResourceLocation:
        """Return the location or raise the stored error."""
        if self.location is None:
            assert self.error is not None
            raise self.error
        return self.location
