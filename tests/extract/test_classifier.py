"""Tests for log line classification."""

from datetime import datetime, timezone

import pytest

from extract.classifier import (
    LineKind,
    ParseMode,
    classify_line,
    match_file_stat,
    match_header,
    match_summary,
)


class TestHeaderLines:
    """Header detection in both modes."""

    @pytest.mark.parametrize("mode", list(ParseMode))
    def test_extracts_fields(self, mode):
        """Test that hash, author, timestamp and message are extracted."""
        result = classify_line("abc123|Jane Doe|1700000000|Fix bug", mode)

        assert result.kind is LineKind.HEADER
        assert result.hash == "abc123"
        assert result.author == "Jane Doe"
        assert result.timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert result.message == "Fix bug"

    def test_message_keeps_extra_separators(self):
        """Test that a pipe inside the subject stays part of the message."""
        result = match_header("abc123|Jane|1700000000|feat: a | b")
        assert result.message == "feat: a | b"

    def test_empty_message(self):
        """Test that an empty subject is still a header."""
        result = match_header("abc123|Jane|1700000000|")
        assert result.kind is LineKind.HEADER
        assert result.message == ""

    def test_non_integer_timestamp_is_not_header(self):
        """Test that the epoch field must be an integer."""
        assert match_header("abc123|Jane|yesterday|Fix bug") is None

    def test_pipe_in_author_shifts_timestamp_field(self):
        """Test that an author containing a pipe is not taken as a header."""
        assert match_header("abc123|Jane|Doe|1700000000|Fix bug") is None

    def test_too_few_separators(self):
        """Test that three fields are not enough."""
        assert match_header("abc123|Jane|1700000000") is None

    def test_empty_hash_is_not_header(self):
        """Test that the hash field must not be empty."""
        assert match_header("|Jane|1700000000|Fix bug") is None

    def test_timestamp_with_whitespace_is_not_header(self):
        """Test that the epoch field must be digits only."""
        assert match_header("abc123|Jane| 1700000000|Fix bug") is None

    def test_non_ascii_digits_are_not_integers(self):
        """Test that only ASCII digits count as an integer."""
        assert match_header("abc123|Jane|١٧٠٠٠٠٠٠٠٠|Fix bug") is None

    def test_negative_timestamp(self):
        """Test that pre-1970 commits are headers."""
        result = match_header("abc123|Jane|-86400|Old commit")
        assert result.timestamp == datetime(1969, 12, 31, tzinfo=timezone.utc)

    def test_out_of_range_timestamp_is_not_header(self):
        """Test that an epoch no datetime can hold is treated as content."""
        assert match_header("abc123|Jane|99999999999999999999|Fix bug") is None

    def test_tab_in_message(self):
        """Test that a subject containing a tab is still a header."""
        result = classify_line("abc123|Jane|1700000000|Fix\tbug", ParseMode.NUMSTAT)
        assert result.kind is LineKind.HEADER
        assert result.message == "Fix\tbug"

    def test_surrounding_whitespace_is_ignored(self):
        """Test that lines are stripped before matching."""
        result = classify_line("  abc123|Jane|1700000000|Fix bug \n", ParseMode.NAME_ONLY)
        assert result.kind is LineKind.HEADER
        assert result.message == "Fix bug"


class TestNumstatMode:
    """Classification of numstat output."""

    def test_file_stat_line(self):
        """Test that counts and path are extracted."""
        result = classify_line("3\t1\tfoo.go", ParseMode.NUMSTAT)

        assert result.kind is LineKind.FILE_STAT
        assert result.insertions == 3
        assert result.deletions == 1
        assert result.path == "foo.go"

    def test_binary_file_stat_line(self):
        """Test that git's binary placeholder yields no counts."""
        result = classify_line("-\t-\timage.png", ParseMode.NUMSTAT)

        assert result.kind is LineKind.FILE_STAT
        assert result.insertions is None
        assert result.deletions is None
        assert result.path == "image.png"

    def test_path_with_pipes_is_not_header(self):
        """Test that a path shaped like a header stays a file line."""
        result = classify_line("2\t0\tdocs/a|b|1700000000|c.md", ParseMode.NUMSTAT)

        assert result.kind is LineKind.FILE_STAT
        assert result.path == "docs/a|b|1700000000|c.md"

    def test_rename_path_kept_verbatim(self):
        """Test that rename notation is not interpreted."""
        result = match_file_stat("4\t2\tsrc/{old => new}/main.py")
        assert result.path == "src/{old => new}/main.py"

    def test_missing_path(self):
        """Test that two numeric fields are enough for a file line."""
        result = match_file_stat("3\t1")
        assert result.kind is LineKind.FILE_STAT
        assert result.path == ""

    def test_non_numeric_fields_are_not_file_stat(self):
        """Test that leading fields must be digits or the placeholder."""
        assert match_file_stat("x\t1\tfoo.go") is None
        assert match_file_stat("foo.go") is None

    def test_summary_line(self):
        """Test that the file count is taken from the shortstat line."""
        result = classify_line(
            "2 files changed, 5 insertions(+), 1 deletion(-)", ParseMode.NUMSTAT
        )
        assert result.kind is LineKind.SUMMARY
        assert result.file_count == 2

    def test_summary_line_singular(self):
        """Test the singular form of the shortstat line."""
        assert match_summary("1 file changed, 1 deletion(-)").file_count == 1

    def test_summary_without_leading_integer(self):
        """Test that a "changed" line without a count has no file count."""
        result = match_summary("nothing changed here")
        assert result.kind is LineKind.SUMMARY
        assert result.file_count is None

    def test_header_with_bad_timestamp_falls_through(self):
        """Test that a header-like line with a bad epoch becomes content."""
        result = classify_line("abc|Jane|soon|everything changed", ParseMode.NUMSTAT)
        assert result.kind is LineKind.SUMMARY

    def test_other_lines_are_noise(self):
        """Test that unrecognized lines are ignored."""
        assert classify_line("some stray output", ParseMode.NUMSTAT).kind is LineKind.NOISE

    def test_bare_path_is_noise(self):
        """Test that name-only style paths mean nothing in numstat mode."""
        assert classify_line("src/a.go", ParseMode.NUMSTAT).kind is LineKind.NOISE


class TestNameOnlyMode:
    """Classification of name-only output."""

    def test_path_line(self):
        """Test that an ordinary line is a file path."""
        result = classify_line("src/a.go", ParseMode.NAME_ONLY)
        assert result.kind is LineKind.FILE_PATH
        assert result.path == "src/a.go"

    @pytest.mark.parametrize(
        "line",
        ["commit abc123", "Merge: abc def", "Author: Jane <j@x>", "Date: Mon Jan 1"],
    )
    def test_reserved_prefixes_are_noise(self, line):
        """Test that auxiliary git output is not taken as a path."""
        assert classify_line(line, ParseMode.NAME_ONLY).kind is LineKind.NOISE

    def test_changed_is_just_a_path(self):
        """Test that shortstat wording has no meaning in name-only mode."""
        result = classify_line("2 files changed", ParseMode.NAME_ONLY)
        assert result.kind is LineKind.FILE_PATH

    def test_numstat_shape_is_just_a_path(self):
        """Test that tab-separated lines are paths in name-only mode."""
        result = classify_line("3\t1\tfoo.go", ParseMode.NAME_ONLY)
        assert result.kind is LineKind.FILE_PATH

    def test_header_with_bad_timestamp_is_path(self):
        """Test that a header-like line with a bad epoch is a path."""
        result = classify_line("abc|Jane|soon|Fix", ParseMode.NAME_ONLY)
        assert result.kind is LineKind.FILE_PATH


class TestClassifyLine:
    """Mode handling and blank lines."""

    @pytest.mark.parametrize("line", ["", "   ", "\t", "\r"])
    def test_blank_lines(self, line):
        """Test that whitespace-only lines are blank in every mode."""
        for mode in ParseMode:
            assert classify_line(line, mode).kind is LineKind.BLANK

    def test_mode_accepts_string_value(self):
        """Test that the mode can be given by value."""
        assert classify_line("3\t1\tfoo.go", "numstat").kind is LineKind.FILE_STAT

    def test_unknown_mode_rejected(self):
        """Test that an unknown mode is an error."""
        with pytest.raises(ValueError):
            classify_line("foo", "patch")

    def test_is_pure(self):
        """Test that classifying twice gives equal results."""
        line = "abc123|Jane|1700000000|Fix bug"
        assert classify_line(line, ParseMode.NUMSTAT) == classify_line(line, ParseMode.NUMSTAT)
