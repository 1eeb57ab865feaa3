# SPDX-License-Identifier: MIT
"""Creatify REST API client.

Thin async wrapper over ``httpx`` that authenticates with the
``X-API-ID`` / ``X-API-KEY`` header pair and exposes one :class:`JobResource`
per job-producing capability plus the collection endpoints.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..config import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT
from ..errors import CreatifyAPIError
from ..polling import CompletionPoller
from ..types import JobKind, JobStatus
from .protocol import JobPayload

logger = logging.getLogger("creatify_mcp")


class JobResource:
    """Create/get/wait operations for one job endpoint.

    Args:
        client: Owning API client
        kind: Capability this endpoint serves
        create_path: Path jobs are POSTed to (relative to ``/api/``)
        get_path: Collection path job ids are looked up under; defaults to ``create_path``
    """

    def __init__(self, client: CreatifyClient, kind: JobKind, create_path: str, get_path: str | None = None) -> None:
        self._client = client
        self.kind = kind
        self.create_path = create_path
        self.get_path = get_path or create_path

    async def create(self, payload: dict[str, Any]) -> JobPayload:
        job = await self._client.request("POST", self.create_path, json=payload)
        logger.info("Started %s job %s (%s)", self.kind.value, job.get("id"), job.get("status"))
        return job

    async def get(self, job_id: str) -> JobPayload:
        return await self._client.request("GET", f"{self.get_path}{quote(job_id, safe='')}/")

    async def create_and_wait(self, payload: dict[str, Any], poller: CompletionPoller | None = None) -> JobPayload:
        job = await self.create(payload)
        if JobStatus.of(job).is_terminal:
            return job
        poller = poller or CompletionPoller.from_config()
        return await poller.run(self.get, job["id"])


class CreatifyClient:
    """Async client for the Creatify API.

    Args:
        api_id: Value for the ``X-API-ID`` header
        api_key: Value for the ``X-API-KEY`` header
        base_url: API root without the ``/api`` prefix
        timeout: Transport timeout per request, in seconds
        transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
    """

    def __init__(
        self,
        api_id: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/api/",
            headers={"X-API-ID": api_id, "X-API-KEY": api_key, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

        self.lipsync = JobResource(self, JobKind.LIPSYNC, "lipsyncs/")
        self.multi_avatar = JobResource(self, JobKind.MULTI_AVATAR, "lipsyncs/multi_avatar/", get_path="lipsyncs/")
        self.lipsync_v2 = JobResource(self, JobKind.ADVANCED_LIPSYNC, "lipsyncs_v2/")
        self.link_to_video = JobResource(self, JobKind.URL_TO_VIDEO, "link_to_videos/")
        self.text_to_speech = JobResource(self, JobKind.TEXT_TO_SPEECH, "text_to_speech/")
        self.custom_template = JobResource(self, JobKind.CUSTOM_TEMPLATE, "custom_template_jobs/")
        self.ai_editing = JobResource(self, JobKind.AI_EDITING, "ai_editing/")
        self.ai_shorts = JobResource(self, JobKind.AI_SHORTS, "ai_shorts/")
        self.ai_script = JobResource(self, JobKind.AI_SCRIPT, "ai_scripts/")
        self.custom_avatar = JobResource(self, JobKind.CUSTOM_AVATAR, "dyoa/")

        self._jobs: dict[JobKind, JobResource] = {
            resource.kind: resource
            for resource in (
                self.lipsync,
                self.multi_avatar,
                self.lipsync_v2,
                self.link_to_video,
                self.text_to_speech,
                self.custom_template,
                self.ai_editing,
                self.ai_shorts,
                self.ai_script,
                self.custom_avatar,
            )
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> CreatifyClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        """Send one request and decode the JSON response.

        Returns:
            Decoded JSON body, or ``None`` for an empty response

        Raises:
            CreatifyAPIError: If the API answers with a 4xx/5xx status
            httpx.HTTPError: On transport failures
        """
        resp = await self._client.request(method, path, json=json)
        if resp.is_error:
            raise CreatifyAPIError(resp.status_code, method, f"/api/{path}", self._error_detail(resp))
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    @staticmethod
    def _error_detail(resp: httpx.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            body = None
        return CreatifyAPIError.extract_detail(body, resp.text.strip())

    # ------------------------------------------------------------------
    # Job routing
    # ------------------------------------------------------------------

    def jobs_for(self, kind: JobKind) -> JobResource:
        """Return the endpoint that created (and can be polled for) jobs of ``kind``."""
        return self._jobs[kind]

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    async def create_link(self, payload: dict[str, Any]) -> dict[str, Any]:
        link = await self.request("POST", "links/", json=payload)
        logger.info("Created link %s for %s", link.get("id"), payload.get("url"))
        return link

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    async def list_avatars(self) -> list[dict[str, Any]]:
        return await self.request("GET", "personas/")

    async def list_voices(self) -> list[dict[str, Any]]:
        return await self.request("GET", "voices/")

    async def list_templates(self) -> list[dict[str, Any]]:
        return await self.request("GET", "custom_templates/")

    async def remaining_credits(self) -> dict[str, Any]:
        return await self.request("GET", "remaining_credits/")

    # ------------------------------------------------------------------
    # Music
    # ------------------------------------------------------------------

    async def list_music(self) -> list[dict[str, Any]]:
        return await self.request("GET", "musics/")

    async def get_music(self, music_id: str) -> dict[str, Any]:
        return await self.request("GET", f"musics/{quote(music_id, safe='')}/")

    async def create_music(self, payload: dict[str, Any]) -> dict[str, Any]:
        music = await self.request("POST", "musics/", json=payload)
        logger.info("Uploaded music %s", (music or {}).get("id"))
        return music

    async def delete_music(self, music_id: str) -> dict[str, Any]:
        await self.request("DELETE", f"musics/{quote(music_id, safe='')}/")
        logger.info("Deleted music %s", music_id)
        return {"id": music_id, "deleted": True}
