"""String helpers."""


def is_blank(value: str | None) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()
