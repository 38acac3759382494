"""Data models for numbered files and rename plans."""

from leadzero.models.files import MAX_NUMBER_VALUE, ParsedFile
from leadzero.models.plan import RenamePlan, RenamePlanEntry


__all__ = ["MAX_NUMBER_VALUE", "ParsedFile", "RenamePlan", "RenamePlanEntry"]
