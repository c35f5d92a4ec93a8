"""Diagnostics returned to the host runtime."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""
    attribute: str | None = None

    def __str__(self) -> str:
        text = f"{self.severity.value}: {self.summary}"
        if self.attribute:
            text += f" (attribute {self.attribute!r})"
        if self.detail:
            text += f"\n  {self.detail}"
        return text


class Diagnostics(list[Diagnostic]):
    """Ordered collection of diagnostics from one provider call."""

    def has_error(self) -> bool:
        return bool(self.errors)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self if d.severity is Severity.WARNING]


def error(summary: str, detail: str = "", attribute: str | None = None) -> Diagnostic:
    return Diagnostic(Severity.ERROR, summary, detail, attribute)


def warning(summary: str, detail: str = "", attribute: str | None = None) -> Diagnostic:
    return Diagnostic(Severity.WARNING, summary, detail, attribute)


def from_err(exc: BaseException) -> Diagnostics:
    """Wrap an exception as a single error diagnostic, message verbatim."""
    return Diagnostics([error(str(exc) or type(exc).__name__)])
