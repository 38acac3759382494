"""Applies a validated rename plan to the filesystem."""

from collections.abc import Callable
from pathlib import Path

from tqdm import tqdm

from leadzero.errors import RenameFailedError
from leadzero.models.plan import RenamePlan, RenamePlanEntry
from leadzero.processors.plan_validator import validate_plan


RenameFunc = Callable[[Path, Path], None]


def rename_file(source: Path, target: Path) -> None:
    """Rename `source` to `target` within the same directory."""
    source.rename(target)


class PlanExecutor:
    """Executes rename plans one file at a time.

    There is no rollback. If a rename fails, the files renamed before it keep their new
    names. Another process changing the directory between validation and execution is
    not guarded against.
    """

    def __init__(self, rename: RenameFunc = rename_file) -> None:
        """Initialize the executor.

        Args:
            rename: Callable performing a single rename. Raises OSError on failure.
        """
        self.rename = rename

    def execute(self, plan: RenamePlan, directory: Path, show_progress: bool = False) -> list[RenamePlanEntry]:
        """Validate `plan` and apply its renames in plan order.

        Args:
            plan: The rename plan.
            directory: Directory containing the files of the plan.
            show_progress: Show a progress bar while renaming.

        Returns:
            All entries of the plan, including the ones that needed no rename.

        Raises:
            ValidationError: If the plan fails validation. Nothing has been renamed.
            RenameFailedError: If a rename fails. Earlier renames are not undone.
        """
        validate_plan(plan, directory)

        pending = plan.files_to_rename
        for entry in tqdm(pending, desc="Renaming files...", total=len(pending), disable=not show_progress):
            source = directory / entry.original_filename
            target = directory / entry.new_filename
            try:
                self.rename(source, target)
            except OSError as e:
                raise RenameFailedError(source, target, e) from e

        return list(plan.entries)
