"""Token parsing for version checks.

A check token is a colon separated list: an ecosystem keyword, the package
coordinates in that ecosystem's syntax, then zero or more version ranges.

    maven:org.neo4j:neo4j:^4
    npm:@babel/core:~7.23
    go:golang.org/x/net
    org.neo4j:neo4j:4.x        (no keyword: Maven groupId:artifactId)
"""

import logging
from typing import Callable, List, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from .errors import InvalidRangeError, MissingFieldError
from .models import (
    CargoCoordinates,
    Coordinates,
    GoPathCoordinates,
    GoUserCoordinates,
    MavenCoordinates,
    NpmCoordinates,
    VersionCheck,
)
from .ranges import ANY_VERSION, VersionRange, is_valid_range, parse_range

logger = logging.getLogger(__name__)


class _Segments:
    """Forward-only cursor over the trimmed segments of one token."""

    def __init__(self, token: str):
        self._items = [part.strip() for part in token.split(":")]
        self._pos = 0

    def next(self) -> Optional[str]:
        if self._pos >= len(self._items):
            return None
        item = self._items[self._pos]
        self._pos += 1
        return item

    def peek(self) -> Optional[str]:
        if self._pos >= len(self._items):
            return None
        return self._items[self._pos]

    def rest(self) -> List[str]:
        items = self._items[self._pos:]
        self._pos = len(self._items)
        return items


def _required(value: Optional[str], field: str, token: str) -> str:
    if not value:
        raise MissingFieldError(field, token)
    return value


def _split_scoped(value: str, token: str) -> NpmCoordinates:
    scope, package = value.split("/", 1)
    return NpmCoordinates(
        scope=_required(scope, "scope", token),
        package=_required(package, "package", token),
    )


def _split_npm_scope(
    token: str,
    upcoming: Optional[str],
    range_check: Callable[[str], bool],
) -> Tuple[NpmCoordinates, bool]:
    """Resolve ``npm:<token>:<upcoming>`` where ``token`` has no ``/``.

    ``upcoming`` names the package (and ``token`` the scope) only when it is
    non-empty and not a version range. Returns the coordinates and whether
    ``upcoming`` was consumed.
    """
    if upcoming and not range_check(upcoming):
        return NpmCoordinates(scope=token, package=upcoming), True
    return NpmCoordinates(package=token), False


def _parse_npm(segments: _Segments, token: str) -> NpmCoordinates:
    first = _required(segments.next(), "package", token)

    if first.startswith("@"):
        scope = _required(first.lstrip("@"), "scope", token)
        if "/" in scope:
            return _split_scoped(scope, token)
        package = _required(segments.next(), "package", token)
        return NpmCoordinates(scope=scope, package=package)

    if "/" in first:
        return _split_scoped(first, token)

    coordinates, consumed = _split_npm_scope(first, segments.peek(), is_valid_range)
    if consumed:
        segments.next()
    return coordinates


def _parse_go(segments: _Segments, token: str) -> Coordinates:
    first = _required(segments.next(), "user", token)
    if "/" in first:
        return GoPathCoordinates(full_path=first)
    module = _required(segments.next(), "module", token)
    return GoUserCoordinates(user=first, module=module)


def _parse_cargo(segments: _Segments, token: str) -> CargoCoordinates:
    package = segments.next()
    if package == "":
        # tolerate one stray empty segment, e.g. "cargo::serde"
        package = segments.next()
    return CargoCoordinates(package=_required(package, "package", token))


def _parse_maven(group_id: Optional[str], segments: _Segments, token: str) -> MavenCoordinates:
    group_id = _required(group_id, "group_id", token)
    artifact_id = _required(segments.next(), "artifact_id", token)
    return MavenCoordinates(group_id=group_id, artifact_id=artifact_id)


def _parse_coordinates(segments: _Segments, token: str) -> Coordinates:
    keyword = segments.next()
    if keyword == "maven":
        return _parse_maven(segments.next(), segments, token)
    if keyword == "cargo":
        return _parse_cargo(segments, token)
    if keyword == "npm":
        return _parse_npm(segments, token)
    if keyword == "go":
        return _parse_go(segments, token)
    if keyword == "github.com":
        user = _required(segments.next(), "user", token)
        module = _required(segments.next(), "module", token)
        return GoUserCoordinates(user=user, module=module)
    # No ecosystem keyword: read as Maven groupId:artifactId
    return _parse_maven(keyword, segments, token)


def parse_range_segment(segment: str, token: str) -> VersionRange:
    """Parse one version qualifier of ``token``; empty means any version."""
    if not segment:
        return ANY_VERSION
    try:
        return parse_range(segment)
    except ValueError as e:
        raise InvalidRangeError(segment, token, e) from e


def parse_check(token: str) -> VersionCheck:
    """Parse a check token into a VersionCheck.

    Args:
        token: Raw token as typed by the user.

    Returns:
        VersionCheck with the coordinates and the version ranges in input order.

    Raises:
        MissingFieldError: a required coordinate segment is absent or empty.
        InvalidRangeError: a version qualifier is not a valid range.
    """
    segments = _Segments(token)
    coordinates = _parse_coordinates(segments, token)
    ranges = tuple(parse_range_segment(segment, token) for segment in segments.rest())

    if is_debug_enabled(logger):
        logger.debug(
            "Parsed check token",
            extra=extra_context(
                event="decision",
                component="parser",
                action="parse_check",
                coordinates=repr(coordinates),
                ranges=[str(r) for r in ranges],
            ),
        )
    return VersionCheck(coordinates=coordinates, ranges=ranges)
