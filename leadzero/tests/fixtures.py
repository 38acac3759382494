"""Shared test data."""

from pathlib import Path


# Mirrors a typical photo export: 1-10 and 734 plus one file with two number groups.
PARIS_FILENAMES = [f"paris ({i}).jpg" for i in range(1, 11)] + ["paris (734).jpg"]
INVALID_FILENAME = "invalid (100) (19231).jpg"


def create_files(directory: Path, filenames: list[str]) -> list[Path]:
    """Create empty files with the given names inside `directory`."""
    paths = []
    for filename in filenames:
        path = directory / filename
        path.touch()
        paths.append(path)
    return paths


def filenames_in(directory: Path) -> set[str]:
    return {path.name for path in directory.iterdir()}
