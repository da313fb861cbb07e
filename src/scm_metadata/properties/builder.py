"""Build the property mapping from repository metadata."""

import logging
from collections.abc import Iterable, Mapping

import structlog

from scm_metadata.core.models.metadata import RemoteMetadata
from scm_metadata.core.models.notation import PathPropertiesNotation
from scm_metadata.properties.naming import PropertyNameCalculator
from scm_metadata.scm.segments import negative_index, segment_at

logger = structlog.get_logger(__name__)

SEGMENT_KEY = "remote.path.segment"


def short_revision(revision: str, length: int) -> str:
    """Return at most ``length`` leading characters of ``revision``."""
    if length < 0:
        raise ValueError(f"short revision length must not be negative: {length}")
    return revision[:length]


def segment_keys(index: int, notations: Iterable[PathPropertiesNotation]) -> list[str]:
    """Segment property keys for ``index`` in each selected notation."""
    keys = []
    if PathPropertiesNotation.PROPERTY in notations:
        keys.append(f"{SEGMENT_KEY}.{index}")
    if PathPropertiesNotation.ARRAY in notations:
        keys.append(f"{SEGMENT_KEY}[{index}]")
    return keys


def sorted_properties(properties: Mapping[str, str]) -> list[tuple[str, str]]:
    """Entries ordered case-insensitively by key, for listings."""
    return sorted(properties.items(), key=lambda item: (item[0].lower(), item[0]))


def build_properties(
    metadata: RemoteMetadata,
    short_revision_length: int,
    notations: Iterable[PathPropertiesNotation],
    namer: PropertyNameCalculator,
) -> dict[str, str]:
    """Compute the named properties for a checkout.

    Revision, short revision, branch and dirty flag are always present.
    Remote path segments are emitted under both their positive and
    negative index for every selected notation. When renaming maps two
    keys onto one name the later one wins.
    """
    notations = frozenset(notations)
    out: dict[str, str] = {}

    def put(key: str, value: str) -> None:
        out[namer.name(key)] = value

    put("revision", metadata.revision)
    put("revision.short", short_revision(metadata.revision, short_revision_length))
    put("branch", metadata.branch)
    put("dirty", "true" if metadata.uncommitted_changes_present else "false")

    segments = metadata.remote_path_segments
    for position in range(len(segments)):
        for index in (position, negative_index(segments, position)):
            value = segment_at(segments, index)
            for key in segment_keys(index, notations):
                put(key, value)

    if logger.is_enabled_for(logging.DEBUG):
        for name, value in sorted_properties(out):
            logger.debug("Calculated property", name=name, value=value)

    return out
