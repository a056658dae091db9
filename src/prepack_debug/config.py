"""
Harness configuration

Where the harness finds its input, component list and compiler, and where it
writes the compiled bundle. All paths derive from one root directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


ROOT_ENV_VAR = "PREPACK_DEBUG_ROOT"
NODE_ENV_VAR = "PREPACK_DEBUG_NODE"


@dataclass
class DebugConfig:
    """Paths and settings for one harness run"""
    root: Path
    input_path: Path
    output_path: Path
    components_path: Path
    prepack_path: Path
    node_executable: str = "node"
    encoding: str = "utf-8"

    @classmethod
    def from_root(cls, root: Union[str, Path, None] = None,
                  node_executable: Optional[str] = None) -> 'DebugConfig':
        """Derive the fb-www layout below ``root``.

        ``root`` falls back to $PREPACK_DEBUG_ROOT, then the working directory.
        """
        if root is None:
            root = os.environ.get(ROOT_ENV_VAR) or Path.cwd()
        root = Path(root).resolve()
        fb_www = root / "fb-www"
        return cls(
            root=root,
            input_path=fb_www / "input.js",
            output_path=fb_www / "output.js",
            components_path=fb_www / "components.txt",
            prepack_path=root / "lib" / "prepack-node.js",
            node_executable=node_executable or os.environ.get(NODE_ENV_VAR) or "node",
        )
