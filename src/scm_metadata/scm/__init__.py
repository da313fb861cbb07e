"""Connection string and remote path handling."""

from scm_metadata.scm.connection import find_delimiter, parse_connection_url
from scm_metadata.scm.remote_path import extract_path, is_scp_like, strip_git_suffix
from scm_metadata.scm.segments import (
    chunk_path,
    negative_index,
    remote_path_segments,
    segment_at,
)

__all__ = [
    "parse_connection_url",
    "find_delimiter",
    "extract_path",
    "is_scp_like",
    "strip_git_suffix",
    "chunk_path",
    "segment_at",
    "negative_index",
    "remote_path_segments",
]
