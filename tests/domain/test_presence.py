"""Tests for the presence rule."""

from __future__ import annotations

import pytest

from envoverview.domain.presence import presence


class TestPresence:
    @pytest.mark.parametrize("value", ["x", "dev.example.com", "  padded  "])
    def test_non_blank_is_present(self, value: str) -> None:
        assert presence(value) is True

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n"])
    def test_blank_or_none_is_absent(self, value: str | None) -> None:
        assert presence(value) is False
