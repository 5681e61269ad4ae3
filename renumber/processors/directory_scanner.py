"""Directory listing of renumbering candidates."""

import os
from pathlib import Path

from renumber.models.entry import Entry
from renumber.parser import FileNameParser


class DirectoryScanner:
    """Lists the regular files of a single directory as parsed Entries."""

    def __init__(self, parser: FileNameParser) -> None:
        self.parser = parser

    def scan(self, directory: Path) -> list[Entry]:
        """Parse every regular file directly inside `directory`.

        Symbolic links, subdirectories and special files are excluded. Entries whose
        file type cannot be determined are skipped.

        Args:
            directory: Directory to list. Not traversed recursively.

        Returns:
            Entries in directory listing order.

        Raises:
            OSError: If the directory cannot be read (missing, not a directory, no permission).
        """
        entries: list[Entry] = []
        with os.scandir(directory) as it:
            for dir_entry in it:
                try:
                    if not dir_entry.is_file(follow_symlinks=False):
                        continue
                except OSError:
                    continue
                entries.append(self.parser.parse_path(Path(directory) / dir_entry.name))
        return entries
