"""Remote path segment notations."""

from enum import Enum

from scm_metadata.core.exceptions import InvalidNotationError
from scm_metadata.utils.text import is_blank


class PathPropertiesNotation(str, Enum):
    """Naming style for remote path segment properties."""

    NONE = "NONE"
    ARRAY = "ARRAY"
    PROPERTY = "PROPERTY"

    @classmethod
    def legal_values(cls) -> str:
        return ", ".join(member.value for member in cls)


def parse_notations(value: str | None) -> frozenset[PathPropertiesNotation]:
    """Parse a comma-separated notation list.

    Tokens are trimmed and matched case-insensitively. Blank input selects
    no notation at all.

    Raises:
        InvalidNotationError: If a token is not a known notation.
    """
    if is_blank(value):
        return frozenset()

    out = set()
    for part in value.split(","):
        try:
            out.add(PathPropertiesNotation(part.strip().upper()))
        except ValueError:
            raise InvalidNotationError(
                f'Illegal value "{part}" in input string "{value}". '
                f"Legal values: {PathPropertiesNotation.legal_values()}",
                token=part,
                value=value,
            ) from None

    return frozenset(out)
