"""
Component tracking

An optional ``components.txt`` names the components a developer expects
Prepack to optimize. Each is tracked as ``"missing"`` until it shows up in
the evaluation tree, after which every status it was seen with is kept.
"""

import os
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union


MISSING = "missing"

TrackedStatus = Union[str, List[str]]


class ComponentTracker:
    """Tracked component names and the statuses they were evaluated with"""

    def __init__(self, names: Optional[List[str]] = None):
        self.components: Dict[str, TrackedStatus] = {}
        self.unique_evaluated = 0
        for name in names or []:
            self.components[name] = MISSING

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> 'ComponentTracker':
        """Load a newline separated list; no file means nothing is tracked.

        A trailing newline registers an empty name, same as any other line.
        """
        if not os.path.exists(path):
            return cls()
        with open(path, 'r', encoding=encoding) as f:
            return cls(f.read().split("\n"))

    def observe(self, name: str, status: str):
        """Record that ``name`` was evaluated with ``status``"""
        if name not in self.components:
            return
        current = self.components[name]
        if current == MISSING:
            self.components[name] = [status]
            self.unique_evaluated += 1
        else:
            current.append(status)

    def is_missing(self, name: str) -> bool:
        return self.components.get(name) == MISSING

    def entries(self) -> Iterator[Tuple[str, TrackedStatus]]:
        return iter(self.components.items())

    def __contains__(self, name: str) -> bool:
        return name in self.components

    def __len__(self) -> int:
        return len(self.components)
