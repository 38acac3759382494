"""Rename plan data models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from leadzero.models.files import ParsedFile


class RenamePlanEntry(BaseModel):
    """A parsed file together with the name it should get.

    `new_filename` is None when the file already has the correct amount of leading zeroes.
    """

    model_config = ConfigDict(frozen=True)

    file: ParsedFile = Field(description="The parsed source file")
    new_filename: str | None = Field(
        default=None,
        description="New filename with leading zeroes, or None if no rename is required",
    )

    @model_validator(mode="after")
    def check_new_filename(self) -> "RenamePlanEntry":
        if self.new_filename == self.file.original_filename:
            raise ValueError(f"New filename of '{self.new_filename}' must differ from the original filename")
        return self

    @property
    def original_filename(self) -> str:
        return self.file.original_filename

    @property
    def needs_rename(self) -> bool:
        return self.new_filename is not None

    @property
    def is_already_properly_named(self) -> bool:
        return self.new_filename is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenamePlanEntry):
            return NotImplemented
        return self.file == other.file

    def __hash__(self) -> int:
        return hash(self.file)

    def __lt__(self, other: "RenamePlanEntry") -> bool:
        return self.file < other.file

    def __str__(self) -> str:
        return f"RenamePlanEntry('{self.original_filename}' -> {self.new_filename!r})"


class RenamePlan(BaseModel):
    """All rename plan entries of one directory scan, sorted by number value."""

    model_config = ConfigDict(frozen=True)

    entries: list[RenamePlanEntry] = Field(default_factory=list, description="Entries sorted by number value")
    max_digit_width: int = Field(default=0, ge=0, description="Digit count of the largest number value")

    @property
    def files_to_rename(self) -> list[RenamePlanEntry]:
        """Entries that receive a new name."""
        return [entry for entry in self.entries if entry.needs_rename]

    @property
    def files_without_rename(self) -> list[RenamePlanEntry]:
        """Entries that are already named correctly."""
        return [entry for entry in self.entries if entry.is_already_properly_named]

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def prefixes(self) -> set[str]:
        return {entry.file.prefix for entry in self.entries}

    def suffixes(self) -> set[str]:
        return {entry.file.suffix for entry in self.entries}

    def __len__(self) -> int:
        return len(self.entries)
