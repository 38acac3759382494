"""Parsed numbered filename data model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Number groups are unsigned 64-bit values.
MAX_NUMBER_VALUE = 2**64 - 1


class ParsedFile(BaseModel):
    """A file whose name contains exactly one number group, like `paris (12).jpg`.

    Prefix and suffix are derived from the filename and the span of the digits. The prefix
    includes the opening parenthesis, the suffix includes the closing one.
    """

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Path to the file")
    original_filename: str = Field(description="Final path component of `path`")
    number_group_span: tuple[int, int] = Field(
        description="Half-open range of the digits inside the parentheses within `original_filename`"
    )
    number_value: int = Field(description="Value of the number group", ge=0, le=MAX_NUMBER_VALUE)

    @model_validator(mode="after")
    def check_span(self) -> "ParsedFile":
        start, end = self.number_group_span
        name = self.original_filename
        if not 0 < start < end < len(name) or name[start - 1] != "(" or name[end] != ")":
            raise ValueError(f"Span {self.number_group_span} is not a parenthesized number group of '{name}'")
        return self

    @property
    def prefix(self) -> str:
        """Text before the digits, including the opening parenthesis."""
        return self.original_filename[: self.number_group_span[0]]

    @property
    def suffix(self) -> str:
        """Text after the digits, including the closing parenthesis."""
        return self.original_filename[self.number_group_span[1] :]

    @property
    def number_group_text(self) -> str:
        """The digits as written in the filename, e.g. `"007"`."""
        start, end = self.number_group_span
        return self.original_filename[start:end]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedFile):
            return NotImplemented
        return self.original_filename == other.original_filename

    def __hash__(self) -> int:
        return hash(self.original_filename)

    def __lt__(self, other: "ParsedFile") -> bool:
        return (self.number_value, self.original_filename) < (other.number_value, other.original_filename)

    def __str__(self) -> str:
        return self.original_filename
