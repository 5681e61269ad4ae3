"""File rename processor for renumbering a directory."""

from collections.abc import Callable
from pathlib import Path

from renumber.models.rename import RenameOp, RenamePlan
from renumber.processors.directory_scanner import DirectoryScanner
from renumber.processors.renumber_planner import RenumberPlanner


def _occupied(path: Path) -> bool:
    # Dangling symlinks still block a rename target.
    return path.exists() or path.is_symlink()


class RenameProcessor:
    """Processor that plans and applies renumbering renames in one directory."""

    def __init__(self, scanner: DirectoryScanner, planner: RenumberPlanner) -> None:
        """Initialize the rename processor.

        Args:
            scanner: Scanner used to list and parse the directory's files.
            planner: Planner that turns parsed entries into a rename plan.
        """
        self.scanner = scanner
        self.planner = planner

    def plan_directory(self, directory: Path) -> RenamePlan:
        """Scan a directory and compute its rename plan.

        Args:
            directory: Directory whose files are renumbered.

        Returns:
            RenamePlan in execution order.

        Raises:
            OSError: If the directory cannot be read.
        """
        entries = self.scanner.scan(directory)
        return self.planner.plan(entries)

    def verify_plan(self, plan: RenamePlan) -> None:
        """Check that the plan can run to completion without overwriting anything.

        The plan is simulated in order against the current filesystem state: each
        source must exist when its turn comes, and each target must be free, either
        because it never existed or because an earlier operation moved it away.

        Args:
            plan: Plan to check.

        Raises:
            FileNotFoundError: If a source file would be missing at its turn.
            FileExistsError: If a target would already exist at its turn.
        """
        state: dict[Path, bool] = {}

        def present(path: Path) -> bool:
            if path not in state:
                state[path] = _occupied(path)
            return state[path]

        for op in plan.operations:
            if not present(op.source):
                raise FileNotFoundError(f"Source file not found: {op.source}")
            if present(op.target):
                raise FileExistsError(f"Target file already exists: {op.target}")
            state[op.source] = False
            state[op.target] = True

    def apply_renames(
        self,
        plan: RenamePlan,
        on_rename: Callable[[RenameOp], None] | None = None,
    ) -> int:
        """Apply rename operations one at a time, in plan order.

        The first failure stops the run. Renames already performed are kept.

        Args:
            plan: Plan to execute.
            on_rename: Called after each successful rename.

        Returns:
            Number of files renamed.

        Raises:
            FileNotFoundError: If a source file doesn't exist.
            FileExistsError: If a target file already exists.
            OSError: If the rename itself fails.
        """
        renamed = 0
        for op in plan.operations:
            if not _occupied(op.source):
                raise FileNotFoundError(f"Source file not found: {op.source}")
            if _occupied(op.target):
                raise FileExistsError(f"Target file already exists: {op.target}")

            op.source.rename(op.target)
            renamed += 1
            if on_rename is not None:
                on_rename(op)

        return renamed
