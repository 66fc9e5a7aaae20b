"""
Validation result types.

Rule functions report problems as FieldError values; a ValidationResult
collects every error from one validation pass.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class FieldError:
    """A single rule violation scoped to one field."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of a validation pass. Valid when no errors were collected."""

    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def messages_for(self, field_name: str) -> List[str]:
        return [e.message for e in self.errors if e.field == field_name]

    def as_dict(self) -> Dict[str, List[str]]:
        """Group messages by field, keeping rule order."""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped
