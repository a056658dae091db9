"""
Prepack Debug Exception Classes

Custom exception classes with enhanced error information.
"""

from typing import Optional
from .diagnostics import Diagnostic


class PrepackDebugError(Exception):
    """Base exception for harness errors"""

    def __init__(self, message: str, diagnostic: Optional[Diagnostic] = None):
        super().__init__(message)
        self.diagnostic = diagnostic


class CompilationError(PrepackDebugError):
    """The compiler aborted the run"""

    def __init__(self, message: str, native_stack: Optional[str] = None,
                 diagnostic: Optional[Diagnostic] = None):
        super().__init__(message, diagnostic)
        self.native_stack = native_stack


class CompilerProtocolError(PrepackDebugError):
    """The compiler (or the bridge to it) answered with something unexpected"""
    pass
