"""Offline supply of published version strings.

A versions document maps lookup keys written ``<ecosystem>:<package>`` to
either a plain list of version strings or a deps.dev style payload::

    maven:org.neo4j:neo4j: ["4.2.6", "4.3.0-alpha01"]
    npm:@babel/core:
      versions:
        - version: 7.23.0
        - version: 7.24.1

Keys are split on the first colon only, so Maven keys keep their
``groupId:artifactId`` form.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

import yaml

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from .errors import VersionsSourceError
from .models import LookupKey, VersionCheck, lookup_key

logger = logging.getLogger(__name__)


def versions_from_payload(payload: Any) -> List[str]:
    """Extract version strings from a ``{"versions": [{"version": ...}]}`` payload.

    A payload without a ``versions`` list yields no versions; entries without
    a string ``version`` are skipped.
    """
    if not isinstance(payload, dict):
        return []
    entries = payload.get("versions")
    if not isinstance(entries, list):
        return []
    result = []
    for entry in entries:
        if isinstance(entry, dict) and isinstance(entry.get("version"), str):
            result.append(entry["version"])
    return result


def _split_key(key: str) -> LookupKey:
    ecosystem, sep, package = key.partition(Constants.LOOKUP_KEY_SEPARATOR)
    if not sep or not ecosystem.strip() or not package.strip():
        raise VersionsSourceError(f"Invalid versions key '{key}', expected <ecosystem>:<package>")
    return ecosystem.strip(), package.strip()


def _versions_from_value(key: str, value: Any) -> List[str]:
    if isinstance(value, list):
        # unquoted YAML numbers arrive as int/float and "1.10" would read as 1.1
        for v in value:
            if not isinstance(v, str):
                raise VersionsSourceError(
                    f"Version {v!r} for '{key}' is not a string; quote versions in the document"
                )
        return list(value)
    if isinstance(value, dict):
        return versions_from_payload(value)
    raise VersionsSourceError(f"Versions for '{key}' must be a list or a payload mapping")


class VersionsFile:
    """Published versions per lookup key, loaded from a YAML or JSON document."""

    def __init__(self, entries: Dict[LookupKey, List[str]]):
        self._entries = entries

    @classmethod
    def from_mapping(cls, data: Any) -> "VersionsFile":
        """Build from an already-decoded document."""
        if data is None:
            return cls({})
        if not isinstance(data, dict):
            raise VersionsSourceError("Versions document must be a mapping of <ecosystem>:<package> keys")
        entries: Dict[LookupKey, List[str]] = {}
        for key, value in data.items():
            entries[_split_key(str(key))] = _versions_from_value(str(key), value)
        return cls(entries)

    @classmethod
    def load(cls, path: str) -> "VersionsFile":
        """Read a versions document from ``path``.

        JSON is a subset of YAML, so both are read with yaml.safe_load.

        Raises:
            VersionsSourceError: if the file is missing, unreadable or malformed.
        """
        if not os.path.isfile(path):
            raise VersionsSourceError(f"Versions file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError) as e:
            raise VersionsSourceError(f"Failed to read versions file {path}: {e}") from e
        source = cls.from_mapping(data)
        if is_debug_enabled(logger):
            logger.debug(
                "Loaded versions file",
                extra=extra_context(
                    event="file_load",
                    component="sources",
                    action="load",
                    target=path,
                    count=len(source),
                ),
            )
        return source

    def __len__(self) -> int:
        return len(self._entries)

    def versions_for(self, check: VersionCheck) -> List[str]:
        """Return the published versions for ``check``; empty when unknown."""
        key = lookup_key(check.coordinates)
        versions = self._entries.get(key)
        if versions is None:
            logger.warning("No versions known for %s", check.display_name)
            return []
        return list(versions)
