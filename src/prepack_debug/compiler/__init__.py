"""
Prepack invocation: options, Node bridge and result statistics
"""

from .options import PrepackOptions, SourceFile, fb_www_options
from .statistics import (
    EvaluationGroup,
    EvaluationLeaf,
    EvaluationNode,
    ReactStatistics,
    RunResult,
    parse_evaluation_node
)
from .bridge import CompilerBackend, NodePrepackBridge, run_bridge_session
from .invoker import compile_file, compile_source, write_output

__all__ = [
    'PrepackOptions',
    'SourceFile',
    'fb_www_options',
    'EvaluationGroup',
    'EvaluationLeaf',
    'EvaluationNode',
    'ReactStatistics',
    'RunResult',
    'parse_evaluation_node',
    'CompilerBackend',
    'NodePrepackBridge',
    'run_bridge_session',
    'compile_file',
    'compile_source',
    'write_output'
]
