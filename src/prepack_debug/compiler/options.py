"""
Prepack options

The option bundle handed to ``prepackSources`` and the fixed ``fb-www``
profile this harness always compiles with.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..errors.diagnostics import Diagnostic, ErrorHandlerResult


ErrorHandler = Callable[[Diagnostic], ErrorHandlerResult]


@dataclass
class SourceFile:
    """One in-memory source unit"""
    file_path: str
    file_contents: str
    source_map_contents: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "filePath": self.file_path,
            "fileContents": self.file_contents,
            "sourceMapContents": self.source_map_contents,
        }


@dataclass
class PrepackOptions:
    """Options for a Prepack compilation"""
    compatibility: str = "browser"
    internal_debug: bool = False
    serialize: bool = True
    unique_suffix: Optional[str] = None
    max_stack_depth: Optional[int] = None
    react_enabled: bool = False
    react_output: str = "create-element"
    react_verbose: bool = False
    inline_expressions: bool = False
    omit_invariants: bool = False
    abstract_effects_in_additional_functions: bool = False
    simple_closures: bool = False
    error_handler: Optional[ErrorHandler] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to Prepack's option names; the error handler stays local"""
        options = {
            "compatibility": self.compatibility,
            "internalDebug": self.internal_debug,
            "serialize": self.serialize,
            "reactEnabled": self.react_enabled,
            "reactOutput": self.react_output,
            "reactVerbose": self.react_verbose,
            "inlineExpressions": self.inline_expressions,
            "omitInvariants": self.omit_invariants,
            "abstractEffectsInAdditionalFunctions": self.abstract_effects_in_additional_functions,
            "simpleClosures": self.simple_closures,
        }
        if self.unique_suffix is not None:
            options["uniqueSuffix"] = self.unique_suffix
        if self.max_stack_depth is not None:
            options["maxStackDepth"] = self.max_stack_depth
        return options


def fb_www_options(error_handler: Optional[ErrorHandler] = None) -> PrepackOptions:
    """The profile used to debug fb-www bundles"""
    return PrepackOptions(
        compatibility="fb-www",
        internal_debug=True,
        serialize=True,
        unique_suffix="",
        max_stack_depth=100,
        react_enabled=True,
        react_output="jsx",
        react_verbose=True,
        inline_expressions=True,
        omit_invariants=True,
        abstract_effects_in_additional_functions=True,
        simple_closures=True,
        error_handler=error_handler,
    )
