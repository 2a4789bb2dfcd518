"""
Deferred computations for fpbelt.

A Task is a zero-argument callable returning an awaitable. Nothing runs
until the task is called and awaited:

    await sleep(10)()
"""

from __future__ import annotations

import asyncio
import math
import time
from typing import Awaitable, Callable, TypeVar

from loguru import logger

A = TypeVar("A")

Task = Callable[[], Awaitable[A]]


def sleep(ms: float) -> Task[None]:
    """A task that resolves with None after floor(ms) milliseconds."""
    delay = max(0, math.floor(ms)) / 1000

    async def run() -> None:
        await asyncio.sleep(delay)

    return run


def elapsed(callback: Callable[[float], None]) -> Callable[[Task[A]], Task[A]]:
    """
    Time a task.

    The wrapped task awaits the original, then calls callback with the
    duration in milliseconds, then returns the original's value.
    """
    def wrap(task: Task[A]) -> Task[A]:
        async def run() -> A:
            start = time.perf_counter()
            value = await task()
            duration_ms = (time.perf_counter() - start) * 1000
            logger.debug("Task finished in {:.1f} ms", duration_ms)
            callback(duration_ms)
            return value
        return run
    return wrap
