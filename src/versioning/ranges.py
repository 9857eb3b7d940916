"""Semantic version ranges backed by semantic_version's npm range grammar."""

from __future__ import annotations

from dataclasses import dataclass, field

import semantic_version


@dataclass(frozen=True)
class VersionRange:
    """A parsed npm-style range, compared and displayed by its raw text."""

    raw: str
    spec: semantic_version.NpmSpec = field(compare=False, repr=False)

    def matches(self, version: semantic_version.Version) -> bool:
        """Return True if ``version`` satisfies this range.

        Pre-release versions only match when a bound of the range names the
        same major.minor.patch with a pre-release tag (npm semantics).
        """
        return self.spec.match(version)

    def __str__(self) -> str:
        return self.raw


def parse_range(text: str) -> VersionRange:
    """Parse ``text`` into a VersionRange.

    Raises:
        ValueError: if semantic_version rejects the expression.
    """
    return VersionRange(raw=text, spec=semantic_version.NpmSpec(text))


def is_valid_range(text: str) -> bool:
    """Return True if ``text`` parses as a version range."""
    try:
        semantic_version.NpmSpec(text)
    except ValueError:
        return False
    return True


ANY_VERSION = parse_range("*")
