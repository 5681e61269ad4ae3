"""CLI entrypoints."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from renumber.models.rename import RenameOp, RenamePlan
from renumber.parser import FileNameParser
from renumber.processors.directory_scanner import DirectoryScanner
from renumber.processors.rename_processor import RenameProcessor
from renumber.processors.renumber_planner import RenumberPlanner


# Diagnostics and progress go to stderr.
console = Console(stderr=True)


def _print_rename(op: RenameOp) -> None:
    # Filenames are printed verbatim: no markup, emoji codes or highlighting.
    console.print(str(op), markup=False, emoji=False, highlight=False, soft_wrap=True)


def _print_plan_table(plan: RenamePlan) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Original", style="cyan")
    table.add_column("New Name", style="green")

    for ix, (source, target) in enumerate(plan.to_pairs(), start=1):
        table.add_row(str(ix), escape(source.name), escape(target.name))

    console.print(table)


@click.command(context_settings=dict(show_default=True))
@click.argument(
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    required=False,
)
@click.option(
    "--shift/--no-shift",
    default=True,
    help="Shift every number up by one and give position 1 to the unnumbered sibling. "
    "With --no-shift, numbers are only re-padded to a uniform width.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Show the planned renames without applying them.")
@click.option(
    "--verify/--no-verify",
    default=True,
    help="Check the whole plan for collisions before renaming anything.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Print scan and plan details.")
def cli(directory: Path, shift: bool, dry_run: bool, verify: bool, verbose: bool) -> None:
    """renumber - Shift numbered file sequences in DIRECTORY up by one.

    Files sharing a name prefix (e.g. photo_1.jpg, photo_2.jpg) form a group. Every
    numbered file in a group moves up by one and an unnumbered sibling (photo.jpg)
    becomes number 1. Numbers within a group share one zero-padded width.

    Examples:

        renumber

        renumber ~/Pictures/trip --dry-run
    """
    parser = FileNameParser()
    processor = RenameProcessor(scanner=DirectoryScanner(parser), planner=RenumberPlanner(shift=shift))

    try:
        plan = processor.plan_directory(directory)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1) from e

    if verbose:
        console.print(
            f"Scanned [cyan]{plan.files_scanned}[/cyan] file(s), "
            f"[cyan]{plan.group_count}[/cyan] numbered group(s).",
        )
        console.print(
            f"Planned [cyan]{len(plan)}[/cyan] rename(s) in [bold cyan]{escape(str(directory))}[/bold cyan].",
            soft_wrap=True,
        )

    if dry_run:
        if not plan.operations:
            console.print("[yellow]No numbered file groups found. Nothing to rename.[/yellow]")
            return
        _print_plan_table(plan)
        console.print("[yellow]Dry run. No files were renamed.[/yellow]")
        return

    try:
        if verify:
            processor.verify_plan(plan)
        renamed = processor.apply_renames(plan, on_rename=_print_rename)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1) from e

    if verbose:
        console.print(f"[bold green]Renamed {renamed} file(s).[/bold green]")
