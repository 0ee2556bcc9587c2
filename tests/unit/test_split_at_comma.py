"""Tests for comma-separated parameter splitting."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pathtext.splitter import split_at_comma
from tests.strategies import comma_free_text, plain_fields

pytestmark = pytest.mark.unit


class TestSplitAtComma:
    def test_two_fields(self) -> None:
        assert split_at_comma("a,b") == ["a", "b"]

    def test_escaped_comma_stays_in_field(self) -> None:
        assert split_at_comma("a,b\\,c") == ["a", "b,c"]

    def test_empty_input(self) -> None:
        assert split_at_comma("") == []

    def test_trailing_comma_dropped(self) -> None:
        assert split_at_comma("a,") == ["a"]

    def test_empty_fields_in_the_middle_are_kept(self) -> None:
        assert split_at_comma("a,,b") == ["a", "", "b"]

    def test_leading_comma_gives_empty_first_field(self) -> None:
        assert split_at_comma(",a") == ["", "a"]

    def test_lone_comma(self) -> None:
        assert split_at_comma(",") == [""]

    def test_escaped_comma_at_start_of_field(self) -> None:
        assert split_at_comma("\\,a,b") == [",a", "b"]

    def test_trailing_escaped_comma(self) -> None:
        assert split_at_comma("a\\,") == ["a,"]

    def test_backslash_before_other_character_kept(self) -> None:
        assert split_at_comma("C:\\dir,x") == ["C:\\dir", "x"]

    def test_trailing_backslash_kept(self) -> None:
        assert split_at_comma("a\\") == ["a\\"]

    def test_double_backslash_still_escapes_comma(self) -> None:
        """Only the single previous character decides whether a comma is escaped."""
        assert split_at_comma("a\\\\,b") == ["a\\,b"]

    def test_font_description(self) -> None:
        assert split_at_comma("Monospace\\,Bold,DejaVu Sans Mono,12") == [
            "Monospace,Bold",
            "DejaVu Sans Mono",
            "12",
        ]


class TestSplitAtCommaProperties:
    @given(comma_free_text)
    def test_text_without_commas_is_one_field(self, text: str) -> None:
        assert split_at_comma(text) == ([text] if text else [])

    @given(st.lists(plain_fields, min_size=1, max_size=8))
    def test_join_then_split_round_trip(self, fields: list[str]) -> None:
        assert split_at_comma(",".join(fields)) == fields

    @given(st.lists(plain_fields, min_size=1, max_size=8))
    def test_escaped_commas_join_into_one_field(self, fields: list[str]) -> None:
        assert split_at_comma("\\,".join(fields)) == [",".join(fields)]

    @given(st.text(max_size=60))
    def test_never_longer_than_comma_count_plus_one(self, text: str) -> None:
        assert len(split_at_comma(text)) <= text.count(",") + 1
