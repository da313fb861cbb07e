"""Parser for ``scm:`` connection strings."""

from scm_metadata.core.exceptions import MalformedConnectionStringError
from scm_metadata.core.models.connection import SCM_PREFIX, ConnectionUrl

REQUIRED_FORMAT = "scm:<scm_provider><delimiter><provider_specific_part>"

DELIMITERS = (":", "|")


def find_delimiter(value: str, start: int = 0) -> int:
    """Return the index of the first ``:`` or ``|`` at or after ``start``.

    Whichever character occurs first wins, so a provider or path may
    contain the other one later on. Returns -1 if neither is present.
    """
    found = [index for index in (value.find(d, start) for d in DELIMITERS) if index >= 0]
    return min(found) if found else -1


def parse_connection_url(value: str | None) -> ConnectionUrl:
    """Parse a connection string into provider, delimiter and specific part.

    The complete format is ``scm:<scm_provider><delimiter><provider_specific_part>``,
    where the delimiter is either ``:`` or ``|``. The provider may be empty.

    Raises:
        MalformedConnectionStringError: If the value is None, does not start
            with ``scm:`` or contains no delimiter after the prefix.
    """
    if value is None:
        raise MalformedConnectionStringError("SCM connection string is missing")

    if not value.startswith(SCM_PREFIX):
        raise MalformedConnectionStringError(
            f'SCM connection string is malformed, does not start with "{SCM_PREFIX}"',
            connection=value,
        )

    index = find_delimiter(value, len(SCM_PREFIX))
    if index < 0:
        raise MalformedConnectionStringError(
            f'SCM connection string is malformed, does not adhere to format "{REQUIRED_FORMAT}"',
            connection=value,
        )

    return ConnectionUrl(
        provider=value[len(SCM_PREFIX):index],
        delimiter=value[index],
        specific_part=value[index + 1:],
    )
