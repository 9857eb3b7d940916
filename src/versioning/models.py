"""Data models for package coordinates and version checks."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from .ranges import VersionRange


class Ecosystem(Enum):
    """Enum for supported ecosystems."""
    MAVEN = "maven"
    CARGO = "cargo"
    NPM = "npm"
    GO = "go"


@dataclass(frozen=True)
class MavenCoordinates:
    """Maven ``groupId:artifactId``."""
    ecosystem: ClassVar[Ecosystem] = Ecosystem.MAVEN
    group_id: str
    artifact_id: str

    @property
    def package_slug(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class CargoCoordinates:
    """A crates.io package name."""
    ecosystem: ClassVar[Ecosystem] = Ecosystem.CARGO
    package: str

    @property
    def package_slug(self) -> str:
        return self.package


@dataclass(frozen=True)
class NpmCoordinates:
    """An npm package, optionally scoped (``@scope/package``)."""
    ecosystem: ClassVar[Ecosystem] = Ecosystem.NPM
    package: str
    scope: Optional[str] = None

    @property
    def package_slug(self) -> str:
        if self.scope is None:
            return self.package
        return f"@{self.scope}/{self.package}"


@dataclass(frozen=True)
class GoUserCoordinates:
    """A Go module hosted at ``github.com/<user>/<module>``."""
    ecosystem: ClassVar[Ecosystem] = Ecosystem.GO
    user: str
    module: str

    @property
    def package_slug(self) -> str:
        return f"github.com/{self.user}/{self.module}"


@dataclass(frozen=True)
class GoPathCoordinates:
    """A Go module given by its full import path."""
    ecosystem: ClassVar[Ecosystem] = Ecosystem.GO
    full_path: str

    @property
    def package_slug(self) -> str:
        return self.full_path


Coordinates = Union[
    MavenCoordinates,
    CargoCoordinates,
    NpmCoordinates,
    GoUserCoordinates,
    GoPathCoordinates,
]

# Stable key for version lookups: (ecosystem slug, canonical package form).
LookupKey = Tuple[str, str]


def lookup_key(coordinates: Coordinates) -> LookupKey:
    """Return the ``(ecosystem_slug, package_slug)`` pair for ``coordinates``."""
    if isinstance(coordinates, MavenCoordinates):
        return Ecosystem.MAVEN.value, coordinates.package_slug
    if isinstance(coordinates, CargoCoordinates):
        return Ecosystem.CARGO.value, coordinates.package_slug
    if isinstance(coordinates, NpmCoordinates):
        return Ecosystem.NPM.value, coordinates.package_slug
    if isinstance(coordinates, (GoUserCoordinates, GoPathCoordinates)):
        return Ecosystem.GO.value, coordinates.package_slug
    raise TypeError(f"Unsupported coordinates: {coordinates!r}")


@dataclass(frozen=True)
class VersionCheck:
    """Parsed check: what to look up and the ordered ranges to bucket by."""
    coordinates: Coordinates
    ranges: Tuple[VersionRange, ...] = ()

    @property
    def display_name(self) -> str:
        ecosystem, package = lookup_key(self.coordinates)
        return f"{ecosystem}:{package}"
