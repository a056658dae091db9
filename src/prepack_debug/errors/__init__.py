"""
Prepack Debug Error Handling
"""

from .diagnostics import (
    Diagnostic,
    DiagnosticCapture,
    ErrorHandlerResult,
    Severity,
    SourceLocation,
    continuation_for
)
from .exceptions import (
    PrepackDebugError,
    CompilationError,
    CompilerProtocolError
)

__all__ = [
    'Diagnostic',
    'DiagnosticCapture',
    'ErrorHandlerResult',
    'Severity',
    'SourceLocation',
    'continuation_for',
    'PrepackDebugError',
    'CompilationError',
    'CompilerProtocolError'
]
