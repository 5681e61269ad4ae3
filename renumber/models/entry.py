"""Parsed file entry data model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


SEPARATORS = ("_", "-", " ")


class Entry(BaseModel):
    """A single file considered for renumbering."""

    model_config = ConfigDict(frozen=True)

    original_path: Path = Field(description="Full path of the file at scan time")
    base: str = Field(description="Filename portion before the trailing number, separator included")
    number: int | None = Field(default=None, ge=0, description="Trailing number, if the filename has one")
    extension: str | None = Field(default=None, description="Extension starting at a literal '.', if any")

    def __str__(self) -> str:
        return f"Entry('{self.file_name}', base='{self.base}', number={self.number}, extension={self.extension!r})"

    @property
    def file_name(self) -> str:
        """Filename without directory components."""
        return self.original_path.name

    @property
    def separator(self) -> str | None:
        """Trailing separator character of the base, if it has one."""
        if self.base and self.base[-1] in SEPARATORS:
            return self.base[-1]
        return None

    @property
    def group_key(self) -> str:
        """Base with a single trailing separator removed."""
        if self.separator is not None:
            return self.base[:-1]
        return self.base

    def target_path(self, width: int, separator: str | None = None, shift: bool = True) -> Path | None:
        """Compute the path this entry should be renamed to.

        Args:
            width: Zero-padding width shared by the entry's group.
            separator: Separator recorded for the group, used to number an unnumbered entry.
            shift: Whether numbers move forward by one, opening position 1.

        Returns:
            The new path, or None when the entry cannot be given a number.
        """
        extension = self.extension or ""
        if self.number is not None:
            number = self.number + 1 if shift else self.number
            name = f"{self.base}{number:0{width}d}{extension}"
        elif separator is not None and shift:
            name = f"{self.base}{separator}{1:0{width}d}{extension}"
        else:
            return None

        return self.original_path.with_name(name)
