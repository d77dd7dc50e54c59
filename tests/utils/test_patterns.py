"""Tests for patterns module."""

import pytest
from indexdate.exceptions import DateParseError, PatternError
from indexdate.utils import patterns


class TestIsStrftime:
    """Tests for is_strftime function."""

    def test_detects_strftime_pattern(self):
        """Patterns containing % are strftime patterns."""
        assert patterns.is_strftime("%Y-%m-%d") is True

    def test_detects_php_pattern(self):
        """Patterns without % are PHP date() patterns."""
        assert patterns.is_strftime("Y-m-d") is False


class TestPhpToStrftime:
    """Tests for php_to_strftime function."""

    def test_translates_wire_format(self):
        """Escaped T and Z should become literals."""
        result = patterns.php_to_strftime(r"Y-m-d\TH:i:s\Z")
        assert result == "%Y-%m-%dT%H:%M:%SZ"

    def test_translates_short_date(self):
        """Two-digit year pattern as used for the ddmmyy setting."""
        assert patterns.php_to_strftime("d-m-y") == "%d-%m-%y"

    def test_translates_names_and_clock(self):
        """Day and month names plus 12-hour clock."""
        result = patterns.php_to_strftime("l, d F Y h:i A")
        assert result == "%A, %d %B %Y %I:%M %p"

    def test_copies_non_letters(self):
        """Separators are copied through."""
        assert patterns.php_to_strftime("d.m.Y / H:i") == "%d.%m.%Y / %H:%M"

    def test_escapes_percent(self):
        """A literal percent sign must not start a directive."""
        assert patterns.php_to_strftime(r"Y\%") == "%Y%%"

    def test_rejects_unsupported_letter(self):
        """Letters without a strftime equivalent raise PatternError."""
        with pytest.raises(PatternError) as exc_info:
            patterns.php_to_strftime("j.n.Y")
        assert exc_info.value.details["character"] == "j"

    def test_unpadded_letters_for_parsing(self):
        """j, n, G and g map to directives strptime reads unpadded."""
        result = patterns.php_to_strftime("j.n.Y G:i g", parsing=True)
        assert result == "%d.%m.%Y %H:%M %I"

    def test_unpadded_letters_rejected_for_rendering(self):
        """Unpadded letters cannot be rendered portably."""
        with pytest.raises(PatternError):
            patterns.php_to_strftime("G:i")

    def test_still_rejects_days_in_month_when_parsing(self):
        """Letters with no strptime counterpart stay unsupported."""
        with pytest.raises(PatternError):
            patterns.php_to_strftime("t.m.Y", parsing=True)

    def test_rejects_unescaped_offset_seconds(self):
        """Unescaped Z is the PHP offset in seconds, not a literal."""
        with pytest.raises(PatternError):
            patterns.php_to_strftime("Y-m-d Z")

    def test_rejects_dangling_escape(self):
        """A trailing backslash is an invalid pattern."""
        with pytest.raises(PatternError):
            patterns.php_to_strftime("Y-m-d\\")

    def test_pattern_error_is_parse_error(self):
        """PatternError should be handled wherever parse errors are."""
        assert issubclass(PatternError, DateParseError)


class TestToStrftime:
    """Tests for to_strftime function."""

    def test_strftime_passes_through(self):
        """strftime patterns are returned unchanged."""
        assert patterns.to_strftime("%d.%m.%Y") == "%d.%m.%Y"

    def test_php_is_translated(self):
        """PHP patterns are translated."""
        assert patterns.to_strftime("d.m.Y") == "%d.%m.%Y"

    def test_parsing_mode_is_separate(self):
        """The same pattern translates for parsing but not for rendering."""
        assert patterns.to_strftime("j.n.Y", parsing=True) == "%d.%m.%Y"
        with pytest.raises(PatternError):
            patterns.to_strftime("j.n.Y")

    def test_empty_pattern(self):
        """Empty pattern stays empty."""
        assert patterns.to_strftime("") == ""
