"""CLI entrypoints."""

from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from leadzero.assistant import LeadZeroAssistant
from leadzero.errors import DirectoryUnreadableError, RenameFailedError, ValidationError


console = Console()

DIRECTORY_ARGUMENT = click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=".",
)


@click.group(context_settings=dict(show_default=True))
def cli() -> None:
    """leadzero - Add leading zeroes to numbered filenames like 'paris (1).jpg'."""
    pass


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise SystemExit(1) from error


def _load_assistant(directory: Path, show_skipped: bool) -> LeadZeroAssistant:
    """Scan the directory and report skipped files."""
    try:
        assistant = LeadZeroAssistant(directory)
    except DirectoryUnreadableError as e:
        _fail(e)

    if assistant.skipped:
        console.print(f"[dim]Skipped {len(assistant.skipped)} file(s) that are not numbered like 'name (1).ext'.[/dim]")
        if show_skipped:
            for skipped in assistant.skipped:
                console.print(f"[yellow]  skipping:[/yellow] [dim]{escape(str(skipped))}[/dim]")

    return assistant


def _print_plan(assistant: LeadZeroAssistant) -> None:
    """Render the planned renames as a table."""
    plan = assistant.plan
    console.print(
        f"Found [bold cyan]{len(plan)}[/bold cyan] numbered file(s), "
        f"padding number groups to [bold magenta]{plan.max_digit_width}[/bold magenta] digit(s)."
    )

    if plan.files_to_rename:
        console.print()
        console.print("[bold]Planned renames:[/bold]")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Original", style="cyan")
        table.add_column("New Name", style="green")

        for entry in plan.files_to_rename:
            table.add_row(escape(entry.original_filename), escape(entry.new_filename))

        console.print(table)

    if plan.files_without_rename:
        console.print(f"[dim]{len(plan.files_without_rename)} file(s) already named correctly.[/dim]")
    console.print()


@cli.command("rename")
@DIRECTORY_ARGUMENT
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Automatically apply renames without asking for confirmation.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Show and validate the renames without applying them.")
@click.option("--show-skipped", is_flag=True, default=False, help="List files that don't match the pattern.")
@click.option("--progress/--no-progress", default=True, help="Show a progress bar while renaming.")
def rename(directory: Path, yes: bool, dry_run: bool, show_skipped: bool, progress: bool) -> None:
    """Zero-pad the number groups of all numbered files in DIRECTORY.

    All files must share the same text around the number group. Files with no
    or more than one number group are ignored.

    Examples:

        leadzero rename ./photos

        leadzero rename --dry-run --show-skipped .
    """
    console.print(f"Scanning [bold cyan]{escape(str(directory))}[/bold cyan]...")
    assistant = _load_assistant(directory, show_skipped)

    if assistant.plan.is_empty:
        console.print("[yellow]No numbered files found. Nothing to do.[/yellow]")
        return

    _print_plan(assistant)

    try:
        assistant.check_can_rename_all()
    except ValidationError as e:
        _fail(e)

    if not assistant.files_to_rename:
        console.print("[green]Nothing to do. All files already have the correct number of leading zeroes.[/green]")
        return

    if dry_run:
        console.print("[yellow]Dry run. No files were renamed.[/yellow]")
        return

    if not yes and not click.confirm("Apply these renames?", default=False):
        console.print("[yellow]Aborted. No files were renamed.[/yellow]")
        return

    console.print("[cyan]Applying renames...[/cyan]")
    try:
        assistant.rename_all(show_progress=progress)
    except (ValidationError, RenameFailedError) as e:
        _fail(e)

    console.print(f"[bold green]Successfully renamed {len(assistant.files_to_rename)} file(s).[/bold green]")


@cli.command("check")
@DIRECTORY_ARGUMENT
@click.option("--show-skipped", is_flag=True, default=False, help="List files that don't match the pattern.")
def check(directory: Path, show_skipped: bool) -> None:
    """Show the renames for DIRECTORY and check that they could be applied safely."""
    assistant = _load_assistant(directory, show_skipped)

    if assistant.plan.is_empty:
        console.print("[yellow]No numbered files found.[/yellow]")
        return

    _print_plan(assistant)

    try:
        assistant.check_can_rename_all()
    except ValidationError as e:
        _fail(e)

    console.print("[bold green]All files can be renamed safely.[/bold green]")
