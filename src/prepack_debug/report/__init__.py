"""
Evaluation report: component tracking, tree rendering and summary
"""

from .tracking import ComponentTracker, MISSING
from .graph import EvaluationRecord, walk_evaluation_tree
from .render import (
    StatusClass,
    banner,
    classify_status,
    format_record,
    print_evaluation_graph
)
from .summary import print_status, print_summary

__all__ = [
    'ComponentTracker',
    'MISSING',
    'EvaluationRecord',
    'walk_evaluation_tree',
    'StatusClass',
    'banner',
    'classify_status',
    'format_record',
    'print_evaluation_graph',
    'print_status',
    'print_summary'
]
