"""Connection string model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

SCM_PREFIX = "scm:"


class ConnectionUrl(BaseModel):
    """A parsed ``scm:<provider><delimiter><specific_part>`` connection string."""

    model_config = ConfigDict(frozen=True)

    provider: str
    delimiter: Literal[":", "|"]
    specific_part: str

    def to_string(self) -> str:
        return f"{SCM_PREFIX}{self.provider}{self.delimiter}{self.specific_part}"

    def __str__(self) -> str:
        return self.to_string()
