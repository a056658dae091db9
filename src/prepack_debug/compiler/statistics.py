"""
React evaluation statistics

Prepack reports which components it evaluated as a tree whose ``children``
may be a single node, a list of nodes, or nothing at all. The tree is parsed
here into a tagged variant so the rest of the harness never has to inspect
raw JSON shapes.
"""

from dataclasses import dataclass, field
from typing import Any, List, Union

from ..errors.exceptions import CompilerProtocolError


@dataclass(frozen=True)
class EvaluationGroup:
    """An ordered group of sibling nodes"""
    nodes: List['EvaluationNode'] = field(default_factory=list)


@dataclass(frozen=True)
class EvaluationLeaf:
    """A single evaluated component"""
    name: str
    status: str
    message: str = ""
    children: 'EvaluationNode' = field(default_factory=EvaluationGroup)


EvaluationNode = Union[EvaluationLeaf, EvaluationGroup]


def parse_evaluation_node(raw: Any) -> EvaluationNode:
    """Convert the compiler's JSON evaluation tree into EvaluationNode values"""
    if raw is None:
        return EvaluationGroup()
    if isinstance(raw, list):
        return EvaluationGroup([parse_evaluation_node(item) for item in raw])
    if isinstance(raw, dict):
        try:
            return EvaluationLeaf(
                name=raw["name"],
                status=raw["status"],
                message=raw.get("message") or "",
                children=parse_evaluation_node(raw.get("children")),
            )
        except KeyError as e:
            raise CompilerProtocolError(f"Evaluation node is missing field {e}") from e
    raise CompilerProtocolError(f"Unexpected evaluation node: {raw!r}")


@dataclass(frozen=True)
class ReactStatistics:
    """Aggregate React optimization counters plus the evaluation tree"""
    evaluated_root_nodes: EvaluationNode
    components_evaluated: int
    inlined_components: int
    optimized_trees: int

    @classmethod
    def from_dict(cls, data: dict) -> 'ReactStatistics':
        return cls(
            evaluated_root_nodes=parse_evaluation_node(data.get("evaluatedRootNodes")),
            components_evaluated=data.get("componentsEvaluated", 0),
            inlined_components=data.get("inlinedComponents", 0),
            optimized_trees=data.get("optimizedTrees", 0),
        )


@dataclass(frozen=True)
class RunResult:
    """Generated code and statistics of one compilation"""
    code: str
    statistics: ReactStatistics
