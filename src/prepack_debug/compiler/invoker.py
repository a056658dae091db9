"""
Compiler invocation

Reads the input bundle, runs it through Prepack with the fb-www profile and
writes the generated code.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from ..config import DebugConfig
from ..errors.diagnostics import DiagnosticCapture
from ..errors.exceptions import CompilerProtocolError, PrepackDebugError
from .bridge import CompilerBackend
from .options import PrepackOptions, SourceFile, fb_www_options
from .statistics import ReactStatistics, RunResult

logger = logging.getLogger(__name__)


def compile_source(source: str, backend: CompilerBackend,
                   capture: Optional[DiagnosticCapture] = None,
                   options: Optional[PrepackOptions] = None,
                   err: Optional[TextIO] = None) -> RunResult:
    """Compile one in-memory source unit.

    If the compiler raises, every captured diagnostic is printed to ``err``
    before the exception propagates.
    """
    if capture is None:
        capture = DiagnosticCapture()
    if options is None:
        options = fb_www_options()
    options.error_handler = capture.handle

    sources = [SourceFile(file_path="", file_contents=source, source_map_contents="")]
    logger.debug("compiling %d characters", len(source))
    try:
        serialized = backend.prepack_sources(sources, options)
    except Exception as e:
        if isinstance(e, PrepackDebugError) and e.diagnostic is None:
            e.diagnostic = capture.first_failure()
        logger.debug("compilation failed after %d diagnostics", len(capture.diagnostics))
        capture.dump(err or sys.stderr)
        raise

    statistics = serialized.get("reactStatistics")
    if statistics is None:
        raise CompilerProtocolError("Compiler result has no reactStatistics; is reactEnabled set?")
    return RunResult(
        code=serialized.get("code", ""),
        statistics=ReactStatistics.from_dict(statistics),
    )


def write_output(path: Union[str, Path], code: str, encoding: str = "utf-8"):
    """Write generated code, replacing any previous output"""
    with open(path, 'w', encoding=encoding) as f:
        f.write(code)


def compile_file(config: DebugConfig, backend: CompilerBackend,
                 capture: Optional[DiagnosticCapture] = None,
                 err: Optional[TextIO] = None) -> RunResult:
    """Compile the configured input file and write the output file"""
    with open(config.input_path, 'r', encoding=config.encoding, errors='replace') as f:
        source = f.read()

    result = compile_source(source, backend, capture, err=err)
    write_output(config.output_path, result.code, config.encoding)
    logger.debug("wrote %s", config.output_path)
    return result
