"""
Status and summary sections printed after the evaluation tree
"""

import sys
from typing import Optional, TextIO

from ..compiler.statistics import ReactStatistics
from .render import GRAY, GREEN, RED, banner, colorize
from .tracking import ComponentTracker


def print_status(tracker: ComponentTracker, out: Optional[TextIO] = None, color: bool = True):
    """Check or cross every tracked component, in list order"""
    out = out or sys.stdout
    if len(tracker) == 0:
        return
    print(f"\n{banner('Status', color)}\n", file=out)
    for name, _ in tracker.entries():
        if tracker.is_missing(name):
            print(f"{colorize('✖', RED, color)} {name}", file=out)
        else:
            print(f"{colorize('✔', GREEN, color)} {name}", file=out)


def print_summary(statistics: ReactStatistics, tracker: ComponentTracker,
                  elapsed_seconds: int, out: Optional[TextIO] = None, color: bool = True):
    out = out or sys.stdout

    def label(text: str) -> str:
        return colorize(text, GRAY, color)

    print(f"\n{banner('Summary', color)}\n", file=out)
    if len(tracker) > 0:
        print(f"{label('Optimized Components')}: {tracker.unique_evaluated}/{len(tracker)}", file=out)
    print(f"{label('Optimized Nodes')}: {statistics.components_evaluated}", file=out)
    print(f"{label('Inlined Nodes')}: {statistics.inlined_components}", file=out)
    print(f"{label('Optimized Trees')}: {statistics.optimized_trees}", file=out)
    print(f"{label('Compile time')}: {elapsed_seconds}s\n", file=out)
