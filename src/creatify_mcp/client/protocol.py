# SPDX-License-Identifier: MIT
"""Contract that every pollable Creatify capability implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..polling import CompletionPoller

JobPayload = dict[str, Any]
"""Decoded job object as returned by the API: at least ``id`` and ``status``."""


@runtime_checkable
class JobAPI(Protocol):
    """Create/get pair for one job-producing capability.

    A job id is only meaningful to the ``get`` of the capability that
    created it.
    """

    async def create(self, payload: dict[str, Any]) -> JobPayload:
        """Start a job.

        Returns:
            The new job, typically with status ``queued`` or ``processing``.

        Raises:
            CreatifyAPIError: If the API rejects the request.
        """
        ...

    async def get(self, job_id: str) -> JobPayload:
        """Fetch the current state of a job.

        Raises:
            CreatifyAPIError: If the API rejects the request.
        """
        ...

    async def create_and_wait(self, payload: dict[str, Any], poller: CompletionPoller | None = None) -> JobPayload:
        """Start a job and block until it is terminal or the poll budget runs out."""
        ...
