"""Tests for string helpers."""

import pytest

from scm_metadata.utils.text import is_blank


@pytest.mark.unit
class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n"])
    def test_blank(self, value: str | None) -> None:
        assert is_blank(value) is True

    @pytest.mark.parametrize("value", ["a", " a ", "/"])
    def test_not_blank(self, value: str) -> None:
        assert is_blank(value) is False
