"""Error taxonomy shared by the CLI and the HTTP service."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


class FitPlanError(Exception):
    """Base class for all fitplan failures."""


class ProfileValidationError(FitPlanError):
    """Raised when a submitted profile violates its field constraints.

    Attributes:
        field_errors (dict[str, str]): Message per offending field, keyed by the
            field's public (camelCase) name.
    """

    def __init__(self, field_errors: Mapping[str, str]) -> None:
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors)) or "profile"
        super().__init__(f"Invalid profile fields: {fields}")

    @classmethod
    def from_pydantic(cls, errors: Iterable[Mapping[str, Any]]) -> "ProfileValidationError":
        """Collapse pydantic error records into one message per field."""

        field_errors: dict[str, str] = {}
        for error in errors:
            location = [str(part) for part in error.get("loc", ()) if part != "body"]
            field = location[0] if location else "profile"
            field_errors.setdefault(field, str(error.get("msg", "Invalid value")))
        return cls(field_errors)


class GenerationFailed(FitPlanError):
    """Raised when the text-generation service yields no usable plan."""


class ExportFailed(FitPlanError):
    """Raised when a rendered plan cannot be written to a document."""


__all__ = [
    "ExportFailed",
    "FitPlanError",
    "GenerationFailed",
    "ProfileValidationError",
]
