"""Console log callables, switched on by --verbose / --debug."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO, Tuple

LogFn = Callable[[str], None]


def make_loggers(
    verbose: bool = False,
    debug: bool = False,
    stream: Optional[TextIO] = None,
) -> Tuple[LogFn, LogFn]:
    verbose = bool(verbose or debug)
    out = stream if stream is not None else sys.stderr
    start_t = time.time()

    def log(msg: str) -> None:
        if not verbose:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}", file=out)

    def log_debug(msg: str) -> None:
        if not debug:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] DEBUG {msg}", file=out)

    return log, log_debug
