"""Unit tests for FileNameParser."""

from pathlib import Path

import pytest

from renumber.parser import FileNameParser


@pytest.fixture
def parser() -> FileNameParser:
    return FileNameParser()


class TestParse:
    """Tests for FileNameParser.parse."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("aaaa.jpg", ("aaaa", None, ".jpg")),
            ("aaaa_01", ("aaaa_", 1, None)),
            ("aaaa_1.jpg", ("aaaa_", 1, ".jpg")),
            ("_001", ("_", 1, None)),
            ("photo 12.png", ("photo ", 12, ".png")),
            ("scan-007.tiff", ("scan-", 7, ".tiff")),
            ("a_1.tar.gz", ("a_", 1, ".tar.gz")),
            ("2024_report_3.pdf", ("2024_report_", 3, ".pdf")),
        ],
    )
    def test_decomposition(self, parser, filename, expected):
        """Test splitting filenames into base, number and extension."""
        assert parser.parse(filename) == expected

    def test_pure_numeric_name_has_no_number(self, parser):
        """Test that a name made only of digits is kept whole as the base."""
        assert parser.parse("001") == ("001", None, None)

    def test_numeric_stem_with_extension(self, parser):
        """Test that digits followed by an extension are not split off."""
        assert parser.parse("001.txt") == ("001.txt", None, None)

    def test_name_without_digits(self, parser):
        """Test a plain name with no digits or extension."""
        assert parser.parse("README") == ("README", None, None)

    def test_empty_name(self, parser):
        """Test that the empty string decomposes to an empty base."""
        assert parser.parse("") == ("", None, None)

    def test_digits_inside_base_are_kept(self, parser):
        """Test that only the trailing digit run is parsed as the number."""
        assert parser.parse("v2_draft_10.md") == ("v2_draft_", 10, ".md")

    def test_large_number(self, parser):
        """Test parsing a number wider than a machine word."""
        base, number, extension = parser.parse("x_123456789012345678901234567890")

        assert base == "x_"
        assert number == 123456789012345678901234567890
        assert extension is None

    @pytest.mark.parametrize("base", ["aaaa_", "photo ", "scan-", "img", "_"])
    @pytest.mark.parametrize("number", [0, 1, 9, 42, 1000])
    @pytest.mark.parametrize("extension", [None, ".jpg", ".tar.gz"])
    def test_reparse_of_padded_name(self, parser, base, number, extension):
        """Test that a zero-padded rendering parses back to the same fields."""
        for width in range(len(str(number)), len(str(number)) + 3):
            name = f"{base}{number:0{width}d}{extension or ''}"

            assert parser.parse(name) == (base, number, extension)


class TestParsePath:
    """Tests for FileNameParser.parse_path."""

    def test_builds_entry_from_last_component(self, parser):
        """Test that parse_path uses the filename and keeps the full path."""
        entry = parser.parse_path(Path("/photos/trip/img_04.jpg"))

        assert entry.original_path == Path("/photos/trip/img_04.jpg")
        assert entry.base == "img_"
        assert entry.number == 4
        assert entry.extension == ".jpg"
        assert entry.group_key == "img"
        assert entry.separator == "_"

    def test_custom_pattern(self):
        """Test that a parser can be built with its own pattern."""
        parser = FileNameParser(pattern=r"^(.*?#)(\d+)?(\..+?)?$")

        assert parser.parse("track#3.mp3") == ("track#", 3, ".mp3")
        assert parser.parse("track_3.mp3") == ("track_3.mp3", None, None)
