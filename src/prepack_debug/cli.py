"""
Command-line interface for debugging fb-www builds with Prepack

Put the fb-www bundle in <root>/fb-www/input.js; the compiled bundle is
written to <root>/fb-www/output.js. An optional <root>/fb-www/components.txt
lists the components whose optimization should be tracked.
"""

import argparse
import logging
import sys
import time
import traceback
from pathlib import Path
from typing import List, Optional, TextIO

from .compiler import CompilerBackend, NodePrepackBridge, compile_file
from .config import DebugConfig
from .errors import DiagnosticCapture
from .report import ComponentTracker, banner, print_evaluation_graph, print_status, print_summary
from .report.render import BOLD, colorize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="debug-fb-www",
        description="Compile an fb-www bundle with Prepack and report React component evaluation"
    )
    parser.add_argument("--root", type=Path,
                        help="Directory holding fb-www/ and lib/ (default: $PREPACK_DEBUG_ROOT or cwd)")
    parser.add_argument("--input", type=Path, help="Override the input bundle path")
    parser.add_argument("--output", type=Path, help="Override the output bundle path")
    parser.add_argument("--components", type=Path, help="Override the component list path")
    parser.add_argument("--prepack", type=Path, help="Path to prepack-node.js")
    parser.add_argument("--node", help="Node executable (default: $PREPACK_DEBUG_NODE or node)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log bridge traffic to stderr")
    return parser


def config_from_args(args: argparse.Namespace) -> DebugConfig:
    config = DebugConfig.from_root(args.root, node_executable=args.node)
    if args.input:
        config.input_path = args.input.resolve()
    if args.output:
        config.output_path = args.output.resolve()
    if args.components:
        config.components_path = args.components.resolve()
    if args.prepack:
        config.prepack_path = args.prepack.resolve()
    return config


def format_failure(error: BaseException) -> str:
    """The most specific trace available: Prepack's own stack, else Python's.

    A Python trace is headed by the diagnostic that aborted the compiler.
    """
    native_stack = getattr(error, "native_stack", None)
    if native_stack:
        return native_stack
    trace = "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip()
    diagnostic = getattr(error, "diagnostic", None)
    if diagnostic is not None:
        return f"{diagnostic}\n{trace}"
    return trace


def run(config: DebugConfig, backend: CompilerBackend, start_time: float,
        out: TextIO, err: TextIO, color: bool = True):
    """Compile, then print the evaluation tree, status and summary"""
    tracker = ComponentTracker.from_file(config.components_path, config.encoding)
    capture = DiagnosticCapture(out=out)
    result = compile_file(config, backend, capture, err=err)

    print(f"\n{banner('Compilation Complete', color)}\n", file=out)
    print(colorize("Evaluated Tree:", BOLD, color), file=out)
    print_evaluation_graph(result.statistics.evaluated_root_nodes, tracker, out, color)
    print_status(tracker, out, color)

    elapsed = int(time.monotonic() - start_time)
    print_summary(result.statistics, tracker, elapsed, out, color)


def main(argv: Optional[List[str]] = None, backend: Optional[CompilerBackend] = None,
         out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Main CLI entry point"""
    start_time = time.monotonic()
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=err,
    )
    color = not args.no_color and hasattr(out, "isatty") and out.isatty()

    try:
        config = config_from_args(args)
        if backend is None:
            backend = NodePrepackBridge(config.prepack_path, config.node_executable)
        run(config, backend, start_time, out, err, color)
    except Exception as e:
        logger.debug("run failed", exc_info=True)
        print(format_failure(e), file=err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
