"""Rename plan computation for numbered file groups."""

from collections.abc import Iterable
from itertools import groupby

from renumber.models.entry import Entry
from renumber.models.rename import RenameOp, RenamePlan


def digit_width(number: int) -> int:
    """Number of decimal digits in a non-negative integer. Zero has width 1."""
    width = 1
    while number >= 10:
        number //= 10
        width += 1
    return width


def _sort_key(entry: Entry) -> tuple:
    # Group key ascending, then number descending with unnumbered entries last.
    # File name breaks ties so the plan does not depend on directory listing order.
    has_number = entry.number is not None
    return (entry.group_key, not has_number, -(entry.number or 0), entry.file_name)


class RenumberPlanner:
    """Plans renames that shift every numbered file in a group forward by one.

    Files are grouped by `Entry.group_key`. Only groups with at least one numbered
    member are touched. With the shift enabled, an unnumbered member takes the
    freed position 1 using the separator of the group's highest-numbered member.
    """

    def __init__(self, shift: bool = True) -> None:
        """Initialize the planner.

        Args:
            shift: If False, numbers are kept and only re-padded to a uniform width.
        """
        self.shift = shift

    def group(self, entries: Iterable[Entry]) -> list[list[Entry]]:
        """Sort entries and split them into groups that contain a numbered member.

        Args:
            entries: Parsed entries of one directory, in any order.

        Returns:
            Groups ordered by group key, each ordered by descending number.
        """
        ordered = sorted(entries, key=_sort_key)
        groups: list[list[Entry]] = []
        for _, members in groupby(ordered, key=lambda e: e.group_key):
            group = list(members)
            if any(e.number is not None for e in group):
                groups.append(group)
        return groups

    def plan(self, entries: Iterable[Entry]) -> RenamePlan:
        """Compute the ordered rename plan for a set of entries.

        Args:
            entries: Parsed entries of one directory.

        Returns:
            RenamePlan with operations grouped per group key, highest number first.
        """
        entries = list(entries)
        groups = self.group(entries)
        operations: list[RenameOp] = []
        for group in groups:
            operations.extend(self._plan_group(group))
        return RenamePlan(operations=operations, files_scanned=len(entries), group_count=len(groups))

    def _plan_group(self, group: list[Entry]) -> list[RenameOp]:
        """Compute rename operations for a single sorted group."""
        numbered = [e for e in group if e.number is not None]
        max_number = max(e.number for e in numbered)
        separator = numbered[0].separator
        width = digit_width(max_number + 1 if self.shift else max_number)

        operations: list[RenameOp] = []
        for entry in group:
            target = entry.target_path(width, separator=separator, shift=self.shift)
            if target is None or target == entry.original_path:
                continue
            operations.append(RenameOp(source=entry.original_path, target=target))
        return operations
