"""Filename decomposition into base, trailing number and extension."""

import re
from pathlib import Path

from renumber.models.entry import Entry


# Shortest base ending in a non-digit, then an optional digit run, then an optional extension.
# Names made only of digits do not match and are kept whole as the base.
DEFAULT_FILENAME_PATTERN = r"^(.*?\D)(\d+)?(\..+?)?$"


class FileNameParser:
    """Splits filenames into `(base, number, extension)` triples.

    The compiled pattern lives on the instance, so a single parser is built once
    and handed to whatever needs to parse names (see `DirectoryScanner`).
    """

    def __init__(self, pattern: str = DEFAULT_FILENAME_PATTERN) -> None:
        """Initialize the parser.

        Args:
            pattern: Regular expression with three groups: base, digit run and extension.
                Matched against the whole filename using ASCII digit semantics.
        """
        self.pattern = re.compile(pattern, re.ASCII)

    def parse(self, filename: str) -> tuple[str, int | None, str | None]:
        """Decompose a filename.

        Every input has a decomposition. When the pattern does not match (e.g. "001"),
        the whole name is the base and both number and extension are absent.

        Args:
            filename: Filename without directory components.

        Returns:
            Tuple of (base, number, extension).
        """
        match = self.pattern.match(filename)
        if match is None:
            return filename, None, None

        base, digits, extension = match.groups()
        number = int(digits) if digits is not None else None
        return base, number, extension

    def parse_path(self, path: Path) -> Entry:
        """Build an Entry for a file path from its last component."""
        base, number, extension = self.parse(path.name)
        return Entry(original_path=path, base=base, number=number, extension=extension)
