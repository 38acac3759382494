"""Checks that a rename plan can be applied without losing files.

Renames are not transactional, so every check runs before the first file is touched.
"""

from collections import Counter
from pathlib import Path

from leadzero.errors import AmbiguousPrefixesError, AmbiguousSuffixesError, ConflictingFilesError
from leadzero.models.plan import RenamePlan


def find_conflicting_targets(plan: RenamePlan, directory: Path) -> list[Path]:
    """Return every planned target path that already exists in `directory` or is planned more than once.

    Two files with the same number value, like `a (1).jpg` and `a (001).jpg`, map onto the
    same new name. Renaming both would overwrite the first one.
    """
    target_counts = Counter(entry.new_filename for entry in plan.files_to_rename)
    conflicts: list[Path] = []
    for new_filename, count in target_counts.items():
        target = directory / new_filename
        if count > 1 or target.exists():
            conflicts.append(target)
    return conflicts


def check_no_conflicts(plan: RenamePlan, directory: Path) -> None:
    """Raise ConflictingFilesError listing all targets that already exist or collide."""
    conflicts = find_conflicting_targets(plan, directory)
    if conflicts:
        raise ConflictingFilesError(conflicts)


def suffixes_differ_only_in_case(suffixes: set[str]) -> bool:
    """Two suffixes like `).jpg` and `).JPG` are tolerated, e.g. photos from different cameras."""
    if len(suffixes) != 2:
        return False
    first, second = suffixes
    return first.casefold() == second.casefold()


def check_unambiguous_affixes(plan: RenamePlan) -> None:
    """Raise if the files don't share one prefix and one suffix.

    Prefixes must match exactly. Suffixes may differ in case only, and only when there
    are exactly two of them.
    """
    prefixes = plan.prefixes()
    if len(prefixes) > 1:
        raise AmbiguousPrefixesError(prefixes)

    suffixes = plan.suffixes()
    if len(suffixes) > 1 and not suffixes_differ_only_in_case(suffixes):
        raise AmbiguousSuffixesError(suffixes)


def validate_plan(plan: RenamePlan, directory: Path) -> None:
    """Validate `plan` against `directory`.

    Raises:
        AmbiguousPrefixesError: If the files have more than one prefix.
        AmbiguousSuffixesError: If the files have incompatible suffixes.
        ConflictingFilesError: If a target filename is already taken or planned twice.
    """
    check_unambiguous_affixes(plan)
    check_no_conflicts(plan, directory)
