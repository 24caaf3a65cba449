"""Tests for explicit and interactive font selection."""

from unittest.mock import patch

import click
import pytest

from nerdfonts.fonts.selector import (
    find_font,
    parse_selection,
    prompt_line,
    select_by_names,
    select_interactively,
)


class TestExplicitSelection:
    """Test selection by name fragments."""

    def test_fragment_matches_single_font(self, catalog):
        selected = select_by_names(["hack"], catalog)
        assert [f.name for f in selected] == ["Hack Nerd Font"]

    def test_match_is_case_insensitive(self, catalog):
        assert select_by_names(["JETBRAINS"], catalog)[0].name == "JetBrainsMono Nerd Font"

    def test_first_match_wins(self, catalog):
        # every entry contains "Nerd Font"
        assert find_font("nerd font", catalog) == catalog[0]

    def test_unmatched_fragment_is_dropped(self, catalog):
        assert select_by_names(["comic-sans"], catalog) == []

    def test_partial_match(self, catalog):
        selected = select_by_names(["fira", "nope", "meslo"], catalog)
        assert [f.name for f in selected] == ["FiraCode Nerd Font", "Meslo Nerd Font"]

    def test_duplicates_are_kept(self, catalog):
        selected = select_by_names(["hack", "Hack Nerd"], catalog)
        assert len(selected) == 2
        assert selected[0] == selected[1]


class TestInteractiveSelection:
    """Test parsing of interactive selection input."""

    @pytest.mark.parametrize("text", ["all", "ALL", "All", "  all \n"])
    def test_all_selects_catalog(self, catalog, text):
        assert parse_selection(text, catalog) == catalog

    def test_indices_are_one_based(self, catalog):
        assert parse_selection("1,3", catalog) == [catalog[0], catalog[2]]

    def test_order_follows_input(self, catalog):
        assert parse_selection("3, 1", catalog) == [catalog[2], catalog[0]]

    def test_invalid_tokens_are_skipped(self, catalog):
        assert parse_selection("1,99,abc", catalog) == [catalog[0]]

    def test_zero_is_out_of_range(self, catalog):
        assert parse_selection("0", catalog) == []

    def test_empty_input(self, catalog):
        assert parse_selection("", catalog) == []

    def test_repeated_index(self, catalog):
        assert parse_selection("2,2", catalog) == [catalog[1], catalog[1]]

    def test_select_interactively_prints_catalog(self, catalog, capsys):
        selected = select_interactively(catalog, read_line=lambda: "2")

        assert selected == [catalog[1]]
        output = capsys.readouterr().out
        assert "Available Nerd Fonts" in output
        assert "Meslo Nerd Font (1.7 MB)" in output
        assert "'all'" in output


class TestPromptLine:
    """Test reading a line from the user."""

    def test_returns_answer(self):
        with patch("nerdfonts.fonts.selector.click.prompt", return_value="yes") as mock_prompt:
            assert prompt_line("Continue?") == "yes"

        mock_prompt.assert_called_once_with(
            "Continue?", default="", show_default=False, prompt_suffix=" "
        )

    def test_end_of_input_reads_as_empty(self):
        with patch("nerdfonts.fonts.selector.click.prompt", side_effect=click.Abort):
            assert prompt_line("Continue?") == ""
