"""
Node bridge to Prepack

Prepack is a Node library, so the harness runs it in a ``node`` child process
and talks to it over newline-delimited JSON on the child's stdin/stdout.
The error handler stays in Python: for every diagnostic the child blocks until
the harness answers ``Recover`` or ``Fail``, so diagnostics are handled
synchronously and in the order Prepack produces them.
"""

import json
import logging
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Union

from ..errors.diagnostics import Diagnostic, continuation_for
from ..errors.exceptions import CompilationError, CompilerProtocolError
from .options import ErrorHandler, PrepackOptions, SourceFile

logger = logging.getLogger(__name__)


BRIDGE_SCRIPT = r"""
const fs = require("fs");
const path = require("path");
const { prepackSources } = require(path.resolve(process.argv[1]));

// stdout carries the protocol; route library chatter to stderr
console.log = console.info = (...args) => console.error(...args);

let pending = Buffer.alloc(0);
function readLine() {
  const chunk = Buffer.alloc(65536);
  for (;;) {
    const newline = pending.indexOf(10);
    if (newline !== -1) {
      const line = pending.slice(0, newline).toString("utf8");
      pending = pending.slice(newline + 1);
      return line;
    }
    let bytesRead;
    try {
      bytesRead = fs.readSync(0, chunk, 0, chunk.length, null);
    } catch (e) {
      if (e.code === "EAGAIN") continue;
      if (e.code !== "EOF") throw e;
      bytesRead = 0;
    }
    if (bytesRead === 0) {
      const rest = pending.toString("utf8");
      pending = Buffer.alloc(0);
      return rest;
    }
    pending = Buffer.concat([pending, chunk.slice(0, bytesRead)]);
  }
}

function send(message) {
  const data = Buffer.from(JSON.stringify(message) + "\n", "utf8");
  let offset = 0;
  // fd 1 turns non-blocking once process.stdout is touched; writes may be partial
  while (offset < data.length) {
    try {
      offset += fs.writeSync(1, data, offset, data.length - offset);
    } catch (e) {
      if (e.code !== "EAGAIN") throw e;
    }
  }
}

const request = JSON.parse(readLine());
const options = Object.assign({}, request.options, {
  errorHandler: diagnostic => {
    const location = diagnostic.location;
    send({
      type: "diagnostic",
      diagnostic: {
        severity: diagnostic.severity,
        message: diagnostic.message,
        errorCode: diagnostic.errorCode,
        callStack: diagnostic.callStack || null,
        location: location ? { source: location.source, start: location.start, end: location.end } : null,
      },
    });
    return readLine().trim();
  },
});

try {
  const serialized = prepackSources(request.sources, options);
  send({ type: "result", code: serialized.code, reactStatistics: serialized.reactStatistics || null });
} catch (e) {
  send({
    type: "error",
    message: String((e && e.message) || e),
    stack: (e && (e.nativeStack || e.stack)) || null,
  });
  process.exitCode = 1;
}
"""


class CompilerBackend(ABC):
    """Something that can run ``prepackSources``"""

    @abstractmethod
    def prepack_sources(self, sources: List[SourceFile],
                        options: PrepackOptions) -> Dict[str, Any]:
        """Compile sources, returning Prepack's serialized result.

        The result holds ``code`` and ``reactStatistics``. Raises when the
        compiler aborts.
        """
        pass


def _decode_message(line: str) -> Optional[Dict[str, Any]]:
    line = line.strip()
    if not line.startswith("{"):
        return None
    try:
        message = json.loads(line)
    except json.JSONDecodeError:
        return None
    if not isinstance(message, dict) or "type" not in message:
        return None
    return message


def run_bridge_session(reader: IO[str], writer: IO[str], request: Dict[str, Any],
                       error_handler: Optional[ErrorHandler] = None,
                       echo: Optional[IO[str]] = None) -> Dict[str, Any]:
    """Drive one compilation over the bridge protocol.

    Sends the request, answers every diagnostic with the error handler's
    decision and returns the final result message. Lines that are not
    protocol messages are echoed unchanged.
    """
    writer.write(json.dumps(request) + "\n")
    writer.flush()

    for line in reader:
        message = _decode_message(line)
        if message is None:
            (echo or sys.stdout).write(line)
            continue

        kind = message["type"]
        if kind == "diagnostic":
            diagnostic = Diagnostic.from_dict(message.get("diagnostic") or {})
            handler = error_handler or continuation_for
            decision = handler(diagnostic)
            logger.debug("diagnostic %s -> %s", diagnostic.severity.value, decision.value)
            writer.write(decision.value + "\n")
            writer.flush()
        elif kind == "result":
            return message
        elif kind == "error":
            raise CompilationError(
                message.get("message") or "Prepack failed",
                native_stack=message.get("stack"),
            )
        else:
            raise CompilerProtocolError(f"Unknown bridge message type: {kind!r}")

    raise CompilerProtocolError("Prepack bridge exited without a result")


class NodePrepackBridge(CompilerBackend):
    """Runs Prepack's ``prepack-node.js`` in a Node child process"""

    def __init__(self, prepack_path: Union[str, Path], node_executable: str = "node"):
        self.prepack_path = Path(prepack_path)
        self.node_executable = node_executable

    def command(self) -> List[str]:
        return [self.node_executable, "-e", BRIDGE_SCRIPT, str(self.prepack_path)]

    def prepack_sources(self, sources: List[SourceFile],
                        options: PrepackOptions) -> Dict[str, Any]:
        if not self.prepack_path.exists():
            raise FileNotFoundError(f"Prepack library not found: {self.prepack_path}")

        request = {
            "sources": [source.to_dict() for source in sources],
            "options": options.to_dict(),
        }
        logger.debug("starting %s with %s", self.node_executable, self.prepack_path)
        try:
            proc = subprocess.Popen(
                self.command(),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as e:
            raise CompilationError(f"Node executable not found: {self.node_executable}") from e

        try:
            message = run_bridge_session(proc.stdout, proc.stdin, request, options.error_handler)
        except BaseException:
            proc.kill()
            raise
        finally:
            try:
                proc.stdin.close()
            except BrokenPipeError:
                # child already gone; its exit status is reported below
                pass
            returncode = proc.wait()
            proc.stdout.close()
            logger.debug("node exited with %s", returncode)

        return {
            "code": message.get("code", ""),
            "reactStatistics": message.get("reactStatistics"),
        }
