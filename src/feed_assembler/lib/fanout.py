"""Ordered, fail-fast fan-out/fan-in.

:func:`gather_in_order` runs awaitables concurrently and returns their
results in launch order.  Unlike ``asyncio.gather`` it never leaves
siblings running after a failure: the first failure cancels the rest and
waits for them to finish before it is re-raised, so late results are
dropped and no task outlives the call.
"""

import asyncio
import logging
from typing import Awaitable, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _drain(tasks: Iterable[asyncio.Future]) -> None:
    tasks = list(tasks)
    for task in tasks:
        task.cancel()
    if tasks:
        # return_exceptions keeps late failures from being reported.
        await asyncio.gather(*tasks, return_exceptions=True)


async def gather_in_order(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Await every item of *aws* concurrently.

    All awaitables are scheduled before any is awaited.  Result ``i``
    belongs to awaitable ``i`` regardless of completion order.  The first
    exception to occur (ties broken by launch position) is raised once
    the remaining tasks have been cancelled and drained.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []

    position = {task: i for i, task in enumerate(tasks)}
    results: list = [None] * len(tasks)
    pending = set(tasks)
    failure: BaseException | None = None

    try:
        while pending and failure is None:
            done, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_EXCEPTION
            )
            for task in sorted(done, key=position.__getitem__):
                if task.cancelled():
                    if failure is None:
                        failure = asyncio.CancelledError()
                    continue
                exc = task.exception()
                if exc is not None:
                    if failure is None:
                        failure = exc
                    continue
                results[position[task]] = task.result()
    finally:
        # Reached on failure and when the caller itself is cancelled.
        await _drain(pending)

    if failure is not None:
        logger.debug(
            "Fan-out of %d tasks failed: %r", len(tasks), failure
        )
        raise failure
    return results
