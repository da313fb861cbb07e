"""Split remote paths into segments and address them by index."""

from collections.abc import Sequence

from scm_metadata.scm.remote_path import extract_path
from scm_metadata.utils.text import is_blank


def chunk_path(path: str | None) -> list[str]:
    """Split ``path`` on ``/``, dropping blank segments."""
    if is_blank(path):
        return []
    return [part for part in path.split("/") if not is_blank(part)]


def segment_at(segments: Sequence[str], index: int) -> str:
    """Return the segment at a positive or negative logical index.

    ``0`` is the first segment and ``-1`` the last one.

    Raises:
        IndexError: If ``index`` is outside ``[-len(segments), len(segments))``.
    """
    size = len(segments)
    if not -size <= index < size:
        raise IndexError(f"segment index {index} out of range for {size} segments")
    return segments[index if index >= 0 else size + index]


def negative_index(segments: Sequence[str], position: int) -> int:
    """Map a position onto the negative index addressing the same segment."""
    position_from_end = len(segments) - 1 - position
    return -1 - position_from_end


def remote_path_segments(url: str | None) -> list[str]:
    """Path segments of a provider specific remote URL."""
    if is_blank(url):
        return []
    return chunk_path(extract_path(url))
