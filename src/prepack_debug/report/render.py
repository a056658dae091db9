"""
Console rendering of the evaluation tree
"""

import sys
from enum import Enum
from typing import Optional, TextIO

from ..compiler.statistics import EvaluationNode
from .graph import EvaluationRecord, walk_evaluation_tree
from .tracking import ComponentTracker

# ANSI color codes
RED = '\033[31m'
GREEN = '\033[32m'
YELLOW = '\033[33m'
GRAY = '\033[90m'
BOLD = '\033[1m'
INVERSE = '\033[7m'
NC = '\033[0m'  # No Color

ALERT_STATUSES = {"unsupported_completion", "unknown_type", "bail-out"}


class StatusClass(Enum):
    """How a component's evaluation status is highlighted"""
    SUCCESS = GREEN
    ALERT = RED
    CAUTION = YELLOW


def colorize(text: str, code: str, color: bool = True) -> str:
    if not color:
        return text
    return f"{code}{text}{NC}"


def classify_status(status: str) -> StatusClass:
    if status == "inlined":
        return StatusClass.SUCCESS
    if status in ALERT_STATUSES:
        return StatusClass.ALERT
    return StatusClass.CAUTION


def format_record(record: EvaluationRecord, color: bool = True) -> str:
    """Format as ``- Name (status: message)``, indented two spaces per level"""
    message = f": {record.message}" if record.message else ""
    line = (
        f"{colorize('-', GRAY, color)} "
        f"{colorize(record.name, classify_status(record.status).value, color)} "
        f"{colorize(f'({record.status}{message})', GRAY, color)}"
    )
    return " " * (record.depth * 2) + line


def banner(title: str, color: bool = True) -> str:
    return colorize(f"=== {title} ===", INVERSE, color)


def print_evaluation_graph(root: EvaluationNode, tracker: ComponentTracker,
                           out: Optional[TextIO] = None, color: bool = True):
    """Print the evaluation tree, recording tracked components as they appear"""
    out = out or sys.stdout
    for record in walk_evaluation_tree(root):
        tracker.observe(record.name, record.status)
        print(format_record(record, color), file=out)
