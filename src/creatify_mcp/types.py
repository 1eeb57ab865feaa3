# SPDX-License-Identifier: MIT
"""Job status and job kind types shared by the client, poller and tools."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class JobStatus(str, Enum):
    """Lifecycle state of a Creatify job.

    Only ``DONE`` and ``ERROR`` are terminal. Vendor values this enum does not
    recognise parse to ``UNKNOWN``, which is treated as still running.
    """

    QUEUED = "queued"
    PROCESSING = "processing"
    DONE = "done"
    ERROR = "error"
    UNKNOWN = "unknown"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.DONE, JobStatus.ERROR)

    @classmethod
    def parse(cls, value: Any) -> JobStatus:
        """Map a raw vendor status string onto the enum."""
        if not isinstance(value, str):
            return cls.UNKNOWN
        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return _VENDOR_ALIASES.get(normalized, cls.UNKNOWN)

    @classmethod
    def of(cls, payload: Any) -> JobStatus:
        """Read the status of a job payload returned by the API."""
        if isinstance(payload, dict):
            return cls.parse(payload.get("status"))
        return cls.UNKNOWN


# Creatify reports intermediate states under a few other names
_VENDOR_ALIASES: dict[str, JobStatus] = {
    "pending": JobStatus.QUEUED,
    "in_queue": JobStatus.QUEUED,
    "running": JobStatus.PROCESSING,
}


class JobKind(str, Enum):
    """Capability that produced a job. Decides which endpoint a job id is polled on."""

    LIPSYNC = "lipsync"
    ADVANCED_LIPSYNC = "advanced-lipsync"
    URL_TO_VIDEO = "url-to-video"
    TEXT_TO_SPEECH = "text-to-speech"
    MULTI_AVATAR = "multi-avatar"
    CUSTOM_TEMPLATE = "custom-template"
    AI_EDITING = "ai-editing"
    AI_SHORTS = "ai-shorts"
    AI_SCRIPT = "ai-script"
    CUSTOM_AVATAR = "custom-avatar"


@dataclass(frozen=True)
class JobHandle:
    """Identifier of a job together with the capability that created it."""

    id: str
    kind: JobKind

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Job id must not be empty")
