"""Exceptions raised while scanning, planning, validating and renaming."""

from pathlib import Path


class LeadZeroError(Exception):
    """Base class for all leadzero errors."""


class ParseError(LeadZeroError, ValueError):
    """A filename does not match the numbered filename pattern.

    Parse errors are never fatal: the directory scanner turns them into skipped files.
    """

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(message)
        self.filename = filename


class InvalidFilenameError(ParseError):
    """The filename is not valid text, e.g. undecodable bytes escaped as surrogates."""

    def __init__(self, filename: str) -> None:
        # repr keeps the message printable, the raw name contains lone surrogates.
        super().__init__(filename, f"The filename {filename!r} is not valid UTF-8 text.")


class NoNumberGroupError(ParseError):
    def __init__(self, filename: str) -> None:
        super().__init__(filename, f"The filename '{filename}' contains no number group like '(42)'.")


class MultipleNumberGroupsError(ParseError):
    def __init__(self, filename: str) -> None:
        super().__init__(filename, f"The filename '{filename}' contains more than one number group.")


class InvalidNumberError(ParseError):
    def __init__(self, filename: str, text: str) -> None:
        super().__init__(filename, f"The value '{text}' in the number group of '{filename}' is not a valid number.")
        self.text = text


class DirectoryUnreadableError(LeadZeroError):
    """The directory or one of its entries could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"The directory '{path}' or the files in it can't be read: {cause}")
        self.path = path
        self.cause = cause


class ValidationError(LeadZeroError):
    """A rename plan can not be executed safely. Raised before any file is touched."""


class ConflictingFilesError(ValidationError):
    def __init__(self, paths: list[Path]) -> None:
        names = ", ".join(f"'{path.name}'" for path in paths)
        super().__init__(
            f"Can't rename files because {len(paths)} new file name(s) are in conflict with existing files or with each other: {names}"
        )
        self.paths = paths


class AmbiguousPrefixesError(ValidationError):
    def __init__(self, prefixes: set[str]) -> None:
        super().__init__(
            f"There are multiple (and therefore ambiguous) prefixes in this directory: {_format_set(prefixes)}"
        )
        self.prefixes = prefixes


class AmbiguousSuffixesError(ValidationError):
    def __init__(self, suffixes: set[str]) -> None:
        super().__init__(
            f"There are multiple (and therefore ambiguous) suffixes in this directory: {_format_set(suffixes)}"
        )
        self.suffixes = suffixes


class ExecutionError(LeadZeroError):
    """A rename failed while the plan was being applied."""


class RenameFailedError(ExecutionError):
    def __init__(self, old_path: Path, new_path: Path, cause: OSError) -> None:
        super().__init__(
            f"Can't rename '{old_path}' to '{new_path}': {cause}. "
            "Files renamed before this one keep their new names, the directory may be in an inconsistent state."
        )
        self.old_path = old_path
        self.new_path = new_path
        self.cause = cause


def _format_set(values: set[str]) -> str:
    return ", ".join(f"'{value}'" for value in sorted(values))
