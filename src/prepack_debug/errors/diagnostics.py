"""
Prepack Diagnostics

This module models the diagnostics Prepack reports while it compiles, and the
error handler that decides, per diagnostic, whether the compiler should keep
going or abort.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TextIO
from enum import Enum


class Severity(Enum):
    """Severity levels Prepack attaches to a diagnostic"""
    FATAL_ERROR = "FatalError"
    RECOVERABLE_ERROR = "RecoverableError"
    WARNING = "Warning"
    INFORMATION = "Information"


class ErrorHandlerResult(Enum):
    """What the error handler tells the compiler to do next"""
    RECOVER = "Recover"
    FAIL = "Fail"


@dataclass
class SourceLocation:
    """Location in source code"""
    source: Optional[str] = None
    line: int = 0
    column: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['SourceLocation']:
        # Babel style locations: {"start": {"line", "column"}, "source"}
        if not data:
            return None
        start = data.get("start") or {}
        return cls(
            source=data.get("source"),
            line=start.get("line", 0),
            column=start.get("column", 0),
        )


@dataclass
class Diagnostic:
    """A diagnostic message emitted by the compiler"""
    severity: Severity
    message: str
    error_code: str = ""
    location: Optional[SourceLocation] = None
    call_stack: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Diagnostic':
        """Build a diagnostic from the JSON forwarded by the Node bridge.

        Severities this harness does not know about are treated as fatal.
        """
        try:
            severity = Severity(data.get("severity"))
        except ValueError:
            severity = Severity.FATAL_ERROR
        return cls(
            severity=severity,
            message=data.get("message", ""),
            error_code=data.get("errorCode") or "",
            location=SourceLocation.from_dict(data.get("location")),
            call_stack=data.get("callStack"),
        )

    def __str__(self) -> str:
        header = self.severity.value
        if self.error_code:
            header += f" {self.error_code}"
        text = f"{header}: {self.message}"
        if self.location and self.location.line:
            source = self.location.source or "<input>"
            text += f"\n  --> {source}:{self.location.line}:{self.location.column}"
        if self.call_stack:
            text += f"\n{self.call_stack}"
        return text


def continuation_for(diagnostic: Diagnostic) -> ErrorHandlerResult:
    """Decide whether the compiler may continue past a diagnostic"""
    if diagnostic.severity in (Severity.INFORMATION, Severity.WARNING):
        return ErrorHandlerResult.RECOVER
    return ErrorHandlerResult.FAIL


@dataclass
class DiagnosticCapture:
    """Collects every diagnostic of a run and acts as Prepack's error handler.

    Informational messages are echoed as they arrive; the full capture list is
    only dumped when the compilation fails.
    """
    diagnostics: List[Diagnostic] = field(default_factory=list)
    out: Optional[TextIO] = None

    def handle(self, diagnostic: Diagnostic) -> ErrorHandlerResult:
        self.diagnostics.append(diagnostic)
        if diagnostic.severity == Severity.INFORMATION:
            print(diagnostic.message, file=self.out or sys.stdout)
        return continuation_for(diagnostic)

    def dump(self, err: Optional[TextIO] = None):
        """Print all captured diagnostics in capture order"""
        for diagnostic in self.diagnostics:
            print(diagnostic, file=err or sys.stderr)

    def first_failure(self) -> Optional[Diagnostic]:
        """The first captured diagnostic that told the compiler to fail"""
        for diagnostic in self.diagnostics:
            if continuation_for(diagnostic) == ErrorHandlerResult.FAIL:
                return diagnostic
        return None
