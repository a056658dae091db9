"""
Evaluation tree traversal
"""

from dataclasses import dataclass
from typing import Iterator

from ..compiler.statistics import EvaluationGroup, EvaluationLeaf, EvaluationNode


@dataclass(frozen=True)
class EvaluationRecord:
    """One visited component, flattened out of the tree"""
    depth: int
    name: str
    status: str
    message: str = ""


def walk_evaluation_tree(node: EvaluationNode, depth: int = 0) -> Iterator[EvaluationRecord]:
    """Yield records depth-first in the order the compiler reported them.

    Members of a group share its depth; a leaf's children sit one level deeper.
    """
    if isinstance(node, EvaluationGroup):
        for child in node.nodes:
            yield from walk_evaluation_tree(child, depth)
    elif isinstance(node, EvaluationLeaf):
        yield EvaluationRecord(depth, node.name, node.status.lower(), node.message)
        yield from walk_evaluation_tree(node.children, depth + 1)
    else:
        raise TypeError(f"Not an evaluation node: {type(node).__name__}")
