"""Rename operation data models."""

from pathlib import Path

from pydantic import BaseModel, Field


class RenameOp(BaseModel):
    """A single file rename operation."""

    source: Path = Field(description="Current path of the file")
    target: Path = Field(description="Path the file is renamed to (same directory)")

    def __str__(self) -> str:
        return f"{self.source.name} -> {self.target.name}"


class RenamePlan(BaseModel):
    """Ordered rename operations for one directory. Execution must follow this order."""

    operations: list[RenameOp] = Field(
        description="Rename operations in execution order",
        default_factory=list,
    )
    files_scanned: int = Field(default=0, ge=0, description="Number of files the plan was computed from")
    group_count: int = Field(default=0, ge=0, description="Number of groups with at least one numbered file")

    def __len__(self) -> int:
        return len(self.operations)

    def to_pairs(self) -> list[tuple[Path, Path]]:
        """Return the plan as (source, target) tuples."""
        return [(op.source, op.target) for op in self.operations]
