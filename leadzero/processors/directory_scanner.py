"""Directory listing and partitioning of files into candidates and skipped files."""

from dataclasses import dataclass, field
from pathlib import Path

from leadzero.errors import DirectoryUnreadableError, ParseError
from leadzero.models.files import ParsedFile
from leadzero.processors.filename_parser import parse_path


@dataclass
class SkippedFile:
    """A file that was left out of the candidate set, and why."""

    filename: str
    reason: ParseError

    def __str__(self) -> str:
        # The reason names the file, escaped when it is not valid text.
        return str(self.reason)


@dataclass
class ScanResult:
    """Files of one directory split into parsable candidates and skipped files."""

    valid: list[ParsedFile] = field(default_factory=list)
    skipped: list[SkippedFile] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.valid)


def list_regular_files(directory: Path) -> list[Path]:
    """List the regular files directly inside `directory`, sorted by name.

    Subdirectories and other non-regular entries are left out. Symlinks to regular
    files count as regular files.

    Raises:
        DirectoryUnreadableError: If the directory or one of its entries can't be read.
    """
    try:
        return sorted(entry for entry in directory.iterdir() if entry.is_file())
    except OSError as e:
        raise DirectoryUnreadableError(directory, e) from e


def partition(paths: list[Path]) -> ScanResult:
    """Parse every path, keeping the ones that match and recording why the others don't."""
    result = ScanResult()
    for path in paths:
        try:
            result.valid.append(parse_path(path))
        except ParseError as e:
            result.skipped.append(SkippedFile(filename=path.name, reason=e))
    return result


def scan(directory: Path) -> ScanResult:
    """List `directory` and partition its files into candidates and skipped files."""
    return partition(list_regular_files(directory))
