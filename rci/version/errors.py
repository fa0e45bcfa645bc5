"""Validation errors for version resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ValidationErrorKind = Literal[
    "missing_field",
    "malformed_field",
    "unknown_workflow_type",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Caller-correctable input error.

    ``subject`` is the offending field name, or the rejected value for
    ``unknown_workflow_type``.
    """

    kind: ValidationErrorKind
    subject: str
    message: str
    hint: str | None = None

    @classmethod
    def missing_field(cls, name: str, *, hint: str | None = None) -> ValidationError:
        return cls(
            kind="missing_field",
            subject=name,
            message=f"missing required field: {name}",
            hint=hint,
        )

    @classmethod
    def malformed_field(
        cls, name: str, detail: str, *, hint: str | None = None
    ) -> ValidationError:
        return cls(
            kind="malformed_field",
            subject=name,
            message=f"malformed field {name}: {detail}",
            hint=hint,
        )

    @classmethod
    def unknown_workflow_type(cls, value: str) -> ValidationError:
        return cls(
            kind="unknown_workflow_type",
            subject=value,
            message=f"unknown workflow type: {value!r}",
            hint="expected one of: main, pull_request, release",
        )

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
