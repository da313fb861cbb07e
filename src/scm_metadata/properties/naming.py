"""Property name calculation."""

from collections.abc import Mapping

from scm_metadata.utils.text import is_blank


def calculate_property_name(prefix: str | None, rename: Mapping[str, str] | None, key: str) -> str:
    """Apply the prefix, then the rename overlay, to a computed key.

    No separator is inserted: a dotted namespace needs the trailing dot in
    the prefix itself. Rename entries are matched against the prefixed name.
    """
    calculated = key if is_blank(prefix) else f"{prefix}{key}"

    if rename and calculated in rename:
        return rename[calculated]

    return calculated


class PropertyNameCalculator:
    """Binds a prefix and rename overlay for repeated name calculation."""

    def __init__(self, prefix: str | None = None, rename: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix
        self._rename = dict(rename or {})

    def name(self, key: str) -> str:
        return calculate_property_name(self._prefix, self._rename, key)
