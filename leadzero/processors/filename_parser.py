"""Parsing of numbered filenames like `paris (12).jpg`."""

import os
import re
from pathlib import Path

from leadzero.errors import (
    InvalidFilenameError,
    InvalidNumberError,
    MultipleNumberGroupsError,
    NoNumberGroupError,
)
from leadzero.models.files import MAX_NUMBER_VALUE, ParsedFile


# One or more ASCII digits enclosed in literal parentheses. Compiled once, never mutated.
NUMBER_GROUP_PATTERN = re.compile(r"\(([0-9]+)\)")

# Digit count of the largest unsigned 64-bit value.
MAX_NUMBER_DIGITS = len(str(MAX_NUMBER_VALUE))


def parse(filename: str, path: Path | None = None) -> ParsedFile:
    """Parse a filename that contains exactly one number group.

    Args:
        filename: The last path component only, e.g. `"paris (12).jpg"`.
        path: Full path of the file. Defaults to `filename` itself.

    Returns:
        The parsed file.

    Raises:
        InvalidFilenameError: If the filename is not valid UTF-8 text.
        NoNumberGroupError: If the filename has no number group.
        MultipleNumberGroupsError: If the filename has two or more number groups.
        InvalidNumberError: If the digits don't fit into an unsigned 64-bit value.
    """
    if "/" in filename or os.sep in filename:
        raise ValueError(f"Expected a filename without directory components, got '{filename}'")

    try:
        filename.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidFilenameError(filename) from e

    matches = list(NUMBER_GROUP_PATTERN.finditer(filename))
    if not matches:
        raise NoNumberGroupError(filename)
    if len(matches) > 1:
        # Secondary parenthesized numbers make it unclear which group is the counter.
        raise MultipleNumberGroupsError(filename)

    start, end = matches[0].span(1)
    digits = filename[start:end]
    # Leading zeroes are stripped and the width is checked first so int() never hits its digit limit.
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_NUMBER_DIGITS:
        raise InvalidNumberError(filename, digits)
    value = int(significant)
    if value > MAX_NUMBER_VALUE:
        raise InvalidNumberError(filename, digits)

    return ParsedFile(
        path=path if path is not None else Path(filename),
        original_filename=filename,
        number_group_span=(start, end),
        number_value=value,
    )


def parse_path(path: Path) -> ParsedFile:
    """Parse the final component of `path`."""
    return parse(path.name, path)
