"""Bounded worker pool for batch pin / unpin calls."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Sequence, TypeVar

log = logging.getLogger(__name__)

J = TypeVar("J")
R = TypeVar("R")

MAX_WORKERS = 5


@dataclass
class Outcome(Generic[J, R]):
    """What one job produced: a result or an error, never both."""

    index: int
    job: J
    result: R | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class WorkerPool(Generic[J, R]):
    """Runs ``handler`` over a batch of jobs with at most ``max_workers`` in flight.

    Jobs are loaded into a queue up front; each worker pulls one job at a time
    until the queue is empty. Job-to-worker assignment and outcome arrival
    order are unspecified.
    """

    def __init__(
        self,
        handler: Callable[[J], Awaitable[R]],
        max_workers: int = MAX_WORKERS,
        background: set[asyncio.Task] | None = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._handler = handler
        self._max_workers = max_workers
        # Workers left running after a fail-fast return are parked here so
        # the owner can await them before closing the transport.
        self._background = background if background is not None else set()

    def size_for(self, job_count: int) -> int:
        return min(job_count, self._max_workers)

    def _start(
        self, jobs: Sequence[J], stop_on_error: bool,
    ) -> tuple[list[asyncio.Task], asyncio.Queue[Outcome[J, R]]]:
        queue: asyncio.Queue[tuple[int, J]] = asyncio.Queue(maxsize=len(jobs))
        for item in enumerate(jobs):
            queue.put_nowait(item)
        outcomes: asyncio.Queue[Outcome[J, R]] = asyncio.Queue(maxsize=len(jobs))

        async def _worker() -> None:
            while True:
                try:
                    index, job = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                try:
                    result = await self._handler(job)
                except Exception as exc:
                    outcomes.put_nowait(Outcome(index, job, error=exc))
                    if stop_on_error:
                        return
                else:
                    outcomes.put_nowait(Outcome(index, job, result=result))

        size = self.size_for(len(jobs))
        log.debug("Starting %d workers for %d jobs", size, len(jobs))
        workers = [asyncio.create_task(_worker()) for _ in range(size)]
        return workers, outcomes

    async def run_fail_fast(self, jobs: Sequence[J]) -> list[R]:
        """Run every job; raise the first error any worker reports.

        Results are returned in submission order. On error, workers still
        busy keep running in the background and their outcomes are dropped.
        """
        if not jobs:
            return []
        workers, outcomes = self._start(jobs, stop_on_error=True)
        results: list[R | None] = [None] * len(jobs)
        for _ in range(len(jobs)):
            outcome = await outcomes.get()
            if outcome.error is not None:
                self._detach(workers)
                raise outcome.error
            results[outcome.index] = outcome.result
        await asyncio.gather(*workers)
        return results  # type: ignore[return-value]

    async def run_all(self, jobs: Sequence[J]) -> list[Outcome[J, R]]:
        """Run every job to completion and return one outcome per job."""
        if not jobs:
            return []
        workers, outcomes = self._start(jobs, stop_on_error=False)
        collected = [await outcomes.get() for _ in range(len(jobs))]
        await asyncio.gather(*workers)
        collected.sort(key=lambda o: o.index)
        return collected

    def _detach(self, workers: list[asyncio.Task]) -> None:
        for task in workers:
            if not task.done():
                self._background.add(task)
                task.add_done_callback(self._background.discard)
