"""Tests for target path and option value resolution."""

import os

import pytest

from codemedic_core.arguments import (
    TARGET_PATH_ARGUMENT,
    find_argument_value,
    find_option_value,
    resolve_target_path,
)
from codemedic_core.plugin import CommandArgument


class TestResolveTargetPath:
    def test_empty_args_returns_cwd(self):
        """Test empty args fall back to the current directory."""
        assert resolve_target_path([]) == os.getcwd()

    def test_short_flag(self):
        """Test the -p short flag."""
        assert resolve_target_path(["-p", "/path/to/repo"]) == "/path/to/repo"

    def test_long_flag(self):
        """Test the --path long flag."""
        assert resolve_target_path(["--path", "/path/to/repo"]) == "/path/to/repo"

    def test_windows_path_returned_verbatim(self):
        """Test Windows paths are returned as given."""
        assert resolve_target_path(["-p", r"C:\Projects\MyRepo"]) == r"C:\Projects\MyRepo"

    def test_relative_path_not_resolved(self):
        """Test relative paths are not resolved."""
        assert resolve_target_path(["--path", "."]) == "."

    def test_path_with_spaces(self):
        """Test a path containing spaces."""
        assert resolve_target_path(["-p", "/path with spaces/to repo"]) == "/path with spaces/to repo"

    def test_mixed_arguments(self):
        """Test the path flag among other arguments."""
        args = ["--format", "markdown", "-p", "/target/path", "--verbose"]
        assert resolve_target_path(args) == "/target/path"

    def test_short_flag_between_unrelated_flags(self):
        """Test -p between unrelated flags."""
        args = ["--format", "json", "-p", "/some/path", "--output", "file.json"]
        assert resolve_target_path(args) == "/some/path"

    def test_long_flag_between_unrelated_flags(self):
        """Test --path between unrelated flags."""
        args = ["--verbose", "--path", "/some/other/path", "--format", "markdown"]
        assert resolve_target_path(args) == "/some/other/path"

    def test_flag_without_value_returns_cwd(self):
        """Test a trailing -p with no value falls back to cwd."""
        assert resolve_target_path(["-p"]) == os.getcwd()

    def test_trailing_long_flag_returns_cwd(self):
        """Test a trailing --path with no value falls back to cwd."""
        assert resolve_target_path(["--format", "json", "--path"]) == os.getcwd()

    def test_first_match_wins(self):
        """Test the first matching flag wins."""
        assert resolve_target_path(["-p", "/first", "--path", "/second"]) == "/first"

    def test_first_match_wins_long_before_short(self):
        """Test --path before -p wins."""
        assert resolve_target_path(["--path", "/first", "-p", "/second"]) == "/first"

    def test_no_path_flags_returns_cwd(self):
        """Test args without path flags fall back to cwd."""
        args = ["--format", "markdown", "--verbose", "--output", "report.md"]
        assert resolve_target_path(args) == os.getcwd()

    def test_follows_current_directory(self, tmp_path, monkeypatch):
        """Test the fallback tracks the current directory."""
        monkeypatch.chdir(tmp_path)
        assert resolve_target_path(["--format", "json"]) == os.getcwd()

    def test_prefix_match_is_loose(self):
        """Any token starting with -p counts as the short flag."""
        assert resolve_target_path(["-port", "8080"]) == "8080"
        assert resolve_target_path(["--paths", "/x"]) == "/x"

    @pytest.mark.parametrize(
        "args, expected",
        [
            (["-p", "/test/path"], "/test/path"),
            (["--path", "/test/path"], "/test/path"),
            (["-p", "."], "."),
            (["--path", ".."], ".."),
            ([], None),
        ],
    )
    def test_various_inputs(self, args, expected):
        """Test resolution across argument shapes."""
        assert resolve_target_path(args) == (expected or os.getcwd())

    def test_accepts_tuple(self):
        """Test a tuple argument vector."""
        assert resolve_target_path(("-p", "/t")) == "/t"


class TestFindOptionValue:
    def test_no_aliases_returns_none(self):
        """Test lookup with no aliases returns None."""
        assert find_option_value(["-p", "x"]) is None

    def test_short_only(self):
        """Test lookup by short name only."""
        assert find_option_value(["-f", "json"], short_name="f") == "json"

    def test_long_only(self):
        """Test lookup by long name only."""
        assert find_option_value(["--format", "md"], long_name="format") == "md"

    def test_missing_returns_none(self):
        """Test a missing option returns None."""
        assert find_option_value(["--verbose"], "f", "format") is None

    def test_flag_value_can_look_like_a_flag(self):
        """Test the value after a flag is taken verbatim."""
        assert find_option_value(["-f", "--path"], "f", "format") == "--path"


class TestFindArgumentValue:
    def test_uses_argument_aliases(self):
        """Test lookup through a CommandArgument."""
        assert find_argument_value(["--path", "/r"], TARGET_PATH_ARGUMENT) == "/r"

    def test_switch_never_has_value(self):
        """Test switches never return a value."""
        switch = CommandArgument("Verbose", "v", "verbose", has_value=False)
        assert find_argument_value(["-v", "something"], switch) is None
