"""leadzero - Zero-pad numbered filenames so that alphabetical order matches numeric order."""

from leadzero.assistant import LeadZeroAssistant
from leadzero.errors import LeadZeroError


__all__ = ["LeadZeroAssistant", "LeadZeroError"]
