"""Rename plan builder."""

from collections.abc import Iterable

from leadzero.models.files import ParsedFile
from leadzero.models.plan import RenamePlan, RenamePlanEntry
from leadzero.padding import digit_count, pad_number


def padded_filename(file: ParsedFile, width: int) -> str:
    """Return the name of `file` with its number group zero-padded to `width` digits."""
    return f"{file.prefix}{pad_number(file.number_value, width)}{file.suffix}"


def build_plan(files: Iterable[ParsedFile]) -> RenamePlan:
    """Compute the new filename of every file so that all number groups share one width.

    Files that already carry the right amount of leading zeroes get no new filename, which
    makes building a plan for already renamed files a no-op.

    Args:
        files: Parsed files of one directory.

    Returns:
        The rename plan, entries sorted ascending by number value.
    """
    files = list(files)
    if not files:
        return RenamePlan()

    width = digit_count(max(file.number_value for file in files))

    entries: list[RenamePlanEntry] = []
    for file in files:
        new_filename = padded_filename(file, width)
        entries.append(
            RenamePlanEntry(
                file=file,
                new_filename=None if new_filename == file.original_filename else new_filename,
            )
        )

    return RenamePlan(entries=sorted(entries), max_digit_width=width)
