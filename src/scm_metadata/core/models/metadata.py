"""Repository metadata model."""

from pydantic import BaseModel, ConfigDict


class RemoteMetadata(BaseModel):
    """State of a checkout as reported by a repository inspector."""

    model_config = ConfigDict(frozen=True)

    branch: str
    revision: str
    uncommitted_changes_present: bool
    remote_path_segments: tuple[str, ...]
