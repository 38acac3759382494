"""High level entry point tying the pipeline stages together."""

from pathlib import Path

from leadzero.models.plan import RenamePlan, RenamePlanEntry
from leadzero.processors.directory_scanner import SkippedFile, scan
from leadzero.processors.plan_builder import build_plan
from leadzero.processors.plan_executor import PlanExecutor
from leadzero.processors.plan_validator import validate_plan


class LeadZeroAssistant:
    """Pads the number groups of all numbered files in one directory.

    Scanning and planning happen on construction, so the plan can be shown to the user
    before deciding whether to call `rename_all`.

    Example:

        assistant = LeadZeroAssistant(Path("./photos"))
        assistant.check_can_rename_all()
        assistant.rename_all()
    """

    def __init__(self, directory: Path, executor: PlanExecutor | None = None) -> None:
        """Scan `directory` and build the rename plan.

        Raises:
            DirectoryUnreadableError: If the directory can't be read.
        """
        self.directory = Path(directory)
        self.executor = executor if executor is not None else PlanExecutor()

        scan_result = scan(self.directory)
        self.skipped: list[SkippedFile] = scan_result.skipped
        self.plan: RenamePlan = build_plan(scan_result.valid)

    @property
    def files_to_rename(self) -> list[RenamePlanEntry]:
        return self.plan.files_to_rename

    @property
    def files_without_rename(self) -> list[RenamePlanEntry]:
        return self.plan.files_without_rename

    def check_can_rename_all(self) -> None:
        """Raise a ValidationError subclass if the plan can't be applied safely."""
        validate_plan(self.plan, self.directory)

    def rename_all(self, show_progress: bool = False) -> list[RenamePlanEntry]:
        """Validate and apply the plan. See `PlanExecutor.execute`."""
        return self.executor.execute(self.plan, self.directory, show_progress=show_progress)
