# SPDX-License-Identifier: MIT
"""Wait-for-completion loop for Creatify jobs.

The poller is a small state machine::

    PENDING -> POLLING(attempts_remaining) -> TERMINAL | TIMED_OUT

Running out of attempts is not an error: the last payload seen is returned
as-is and the caller inspects its ``status`` field. Errors raised by the
status call are never retried.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

import anyio

from .config import DEFAULT_POLL_INTERVAL, DEFAULT_POLL_MAX_ATTEMPTS, get_poll_settings, logger
from .types import JobStatus

GetJob = Callable[[str], Awaitable[Any]]


class PollState(str, Enum):
    PENDING = "pending"
    POLLING = "polling"
    TERMINAL = "terminal"
    TIMED_OUT = "timed_out"


class CompletionPoller:
    """Poll a job's status endpoint until it reaches ``done`` or ``error``.

    Args:
        max_attempts: Number of status calls before giving up (at least 1)
        interval: Seconds to sleep between status calls
    """

    def __init__(self, max_attempts: int = DEFAULT_POLL_MAX_ATTEMPTS, interval: float = DEFAULT_POLL_INTERVAL) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if interval < 0:
            raise ValueError(f"interval must not be negative, got {interval}")
        self.max_attempts = max_attempts
        self.interval = interval
        self.state = PollState.PENDING
        self.attempts_remaining = max_attempts

    @classmethod
    def from_config(cls) -> CompletionPoller:
        """Build a poller from ``CREATIFY_POLL_INTERVAL`` / ``CREATIFY_POLL_MAX_ATTEMPTS``."""
        settings = get_poll_settings()
        return cls(max_attempts=settings.max_attempts, interval=settings.interval)

    @property
    def attempts_made(self) -> int:
        return self.max_attempts - self.attempts_remaining

    async def run(self, get_fn: GetJob, job_id: str) -> Any:
        """Drive one job to a terminal state or until the attempt budget is spent.

        Args:
            get_fn: Status call for the capability that created the job
            job_id: Job id returned by the create call

        Returns:
            The first terminal payload, or the last non-terminal one on timeout
        """
        if self.state is not PollState.PENDING:
            raise RuntimeError(f"Poller already used (state={self.state.value})")

        self.state = PollState.POLLING
        while True:
            result = await get_fn(job_id)
            self.attempts_remaining -= 1
            status = JobStatus.of(result)

            if status.is_terminal:
                self.state = PollState.TERMINAL
                logger.info("Job %s finished with status %s after %d poll(s)", job_id, status.value, self.attempts_made)
                return result

            if self.attempts_remaining == 0:
                self.state = PollState.TIMED_OUT
                logger.warning(
                    "Job %s still %s after %d poll(s); returning last known status",
                    job_id,
                    status.value,
                    self.attempts_made,
                )
                return result

            logger.debug("Job %s is %s, %d attempt(s) left", job_id, status.value, self.attempts_remaining)
            await anyio.sleep(self.interval)


async def poll_until_terminal(
    get_fn: GetJob,
    job_id: str,
    max_attempts: int = DEFAULT_POLL_MAX_ATTEMPTS,
    interval: float = DEFAULT_POLL_INTERVAL,
) -> Any:
    """Poll ``get_fn(job_id)`` until the job is done or errored, or attempts run out."""
    return await CompletionPoller(max_attempts=max_attempts, interval=interval).run(get_fn, job_id)
