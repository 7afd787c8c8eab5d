"""Diagnostic logging and micro-benchmark helpers."""

from __future__ import annotations

import time
from typing import Callable


def log(file, line, function_name, *args) -> None:
    """Print a log line tagged with its origin, arguments separated by spaces."""
    message = f"LOG {file}:{line} ({function_name}):"
    message += "".join(f" {arg}" for arg in args)
    print(message)


def benchmark(function_name: str, func: Callable[[], object], iterations: int) -> float:
    """Call ``func`` repeatedly, report and return the mean time in milliseconds."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    average = elapsed_ms / iterations
    print(f"{function_name} took {average} ms (average) over {iterations} iterations.")
    return average