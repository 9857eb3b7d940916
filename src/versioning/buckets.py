"""Exclusive per-range selection of the latest published version.

Every published version is claimed by the first range it satisfies, in the
order the ranges were given, and each range keeps only the highest version it
claimed. A version claimed by an earlier range is never seen by a later one,
so ranges should be listed from most to least restrictive.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import semantic_version

from common.logging_utils import extra_context, is_debug_enabled
from .ranges import ANY_VERSION, VersionRange

logger = logging.getLogger(__name__)

BucketResult = List[Tuple[VersionRange, Optional[str]]]


def _strip_pre_release_zeros(text: str) -> str:
    """Turn "1.0.0-rc.01" into "1.0.0-rc.1"; semver forbids the leading zero."""
    core, sep, rest = text.partition("-")
    if not sep:
        return text
    pre_release, plus, build = rest.partition("+")
    parts = [str(int(p)) if p.isdigit() else p for p in pre_release.split(".")]
    return f"{core}-{'.'.join(parts)}{plus}{build}"


def parse_lenient(text: str) -> Optional[semantic_version.Version]:
    """Parse a published version string, tolerating missing components.

    "1.337" reads as 1.337.0, "v2" as 2.0.0 and "1.0.0-rc.01" as
    1.0.0-rc.1. Returns None for strings that are not versions at all.
    """
    candidate = text.strip()
    if candidate[:1] in ("v", "V"):
        candidate = candidate[1:]
    if not candidate:
        return None
    try:
        return semantic_version.Version.coerce(_strip_pre_release_zeros(candidate))
    except ValueError:
        return None


def _first_match(ranges: Sequence[VersionRange], version: semantic_version.Version) -> Optional[int]:
    for index, version_range in enumerate(ranges):
        if version_range.matches(version):
            return index
    return None


def select_latest(
    ranges: Sequence[VersionRange],
    versions: Iterable[str],
    include_pre_release: bool = False,
) -> BucketResult:
    """Pick the latest version per range.

    Args:
        ranges: Ordered version ranges. Empty means a single "any version" range.
        versions: Published version strings; unparsable entries are ignored.
        include_pre_release: Match pre-releases by their release core, so
            1.1.0-alpha01 counts as 1.1.0 for matching but is reported as is.

    Returns:
        One (range, latest version string or None) pair per range, in order.
    """
    ranges = list(ranges) or [ANY_VERSION]
    best: List[Optional[semantic_version.Version]] = [None] * len(ranges)
    best_text: List[Optional[str]] = [None] * len(ranges)
    skipped = 0

    for text in versions:
        parsed = parse_lenient(text)
        if parsed is None:
            skipped += 1
            continue

        candidate = parsed.truncate() if include_pre_release else parsed
        slot = _first_match(ranges, candidate)
        if slot is None:
            continue

        current = best[slot]
        if current is None or parsed > current:
            best[slot] = parsed
            best_text[slot] = text

    if is_debug_enabled(logger):
        logger.debug(
            "Selected latest versions",
            extra=extra_context(
                event="decision",
                component="buckets",
                action="select_latest",
                ranges=[str(r) for r in ranges],
                selected=best_text,
                skipped=skipped,
                include_pre_release=include_pre_release,
            ),
        )
    return list(zip(ranges, best_text))
