# SPDX-License-Identifier: MIT
"""Integration tests for video tools with a mocked Creatify client."""

import pytest

from creatify_mcp.errors import CreatifyAPIError
from creatify_mcp.tools.video import (
    create_ai_edited_video,
    create_ai_shorts,
    create_custom_template_video,
    create_url_to_video,
    get_video_status,
)
from creatify_mcp.types import JobKind


@pytest.fixture
def mock_client(mocker):
    return mocker.patch("creatify_mcp.tools.video.get_client").return_value


# ==================== URL to video ====================


@pytest.mark.integration
async def test_url_to_video_creates_link_then_video(mocker, mock_client, job_processing):
    """The link is created first and its id feeds the video request."""
    mock_client.create_link = mocker.AsyncMock(return_value={"id": "link-1", "url": "https://shop.example.com"})
    mock_client.link_to_video.create = mocker.AsyncMock(return_value=job_processing)

    result = await create_url_to_video(url="https://shop.example.com", aspect_ratio="9:16")

    assert result == {"link": {"id": "link-1", "url": "https://shop.example.com"}, "video": job_processing}
    mock_client.create_link.assert_awaited_once_with({"url": "https://shop.example.com"})
    mock_client.link_to_video.create.assert_awaited_once_with(
        {"link": "link-1", "language": "en", "aspect_ratio": "9:16"}
    )


@pytest.mark.integration
async def test_url_to_video_link_failure_skips_video(mocker, mock_client):
    """A failed link step makes no video call."""
    mock_client.create_link = mocker.AsyncMock(
        side_effect=CreatifyAPIError(400, "POST", "/api/links/", "Invalid URL")
    )
    mock_client.link_to_video.create = mocker.AsyncMock()

    with pytest.raises(CreatifyAPIError, match="Invalid URL"):
        await create_url_to_video(url="not-a-url")

    mock_client.link_to_video.create.assert_not_called()


@pytest.mark.integration
async def test_url_to_video_wait(mocker, mock_client, job_done):
    """wait_for_completion polls the video job."""
    mock_client.create_link = mocker.AsyncMock(return_value={"id": "link-1"})
    mock_client.link_to_video.create_and_wait = mocker.AsyncMock(return_value=job_done)

    result = await create_url_to_video(url="https://x.example.com", language="de", wait_for_completion=True)

    assert result["video"]["status"] == "done"
    mock_client.link_to_video.create_and_wait.assert_awaited_once_with({"link": "link-1", "language": "de"})


# ==================== Template / editing / shorts ====================


@pytest.mark.integration
async def test_custom_template_video(mocker, mock_client, job_processing):
    """The template id is sent as visual_style."""
    mock_client.custom_template.create = mocker.AsyncMock(return_value=job_processing)

    await create_custom_template_video(template_id="promo", data={"product": "Mug", "price": 9.5})

    mock_client.custom_template.create.assert_awaited_once_with(
        {"visual_style": "promo", "data": {"product": "Mug", "price": 9.5}}
    )


@pytest.mark.integration
async def test_ai_edited_video(mocker, mock_client, job_processing):
    """AI editing sends the video URL and style."""
    mock_client.ai_editing.create = mocker.AsyncMock(return_value=job_processing)

    await create_ai_edited_video(video_url="https://cdn.example.com/raw.mp4", editing_style="film", name="cut")

    mock_client.ai_editing.create.assert_awaited_once_with(
        {"video_url": "https://cdn.example.com/raw.mp4", "editing_style": "film", "name": "cut"}
    )


@pytest.mark.integration
async def test_ai_shorts_defaults_to_portrait(mocker, mock_client, job_processing):
    """Shorts default to 9:16."""
    mock_client.ai_shorts.create = mocker.AsyncMock(return_value=job_processing)

    await create_ai_shorts(prompt="Top 3 coffee hacks")

    mock_client.ai_shorts.create.assert_awaited_once_with({"prompt": "Top 3 coffee hacks", "aspect_ratio": "9:16"})


@pytest.mark.integration
async def test_ai_shorts_wait(mocker, mock_client, job_done):
    """wait_for_completion polls the shorts job."""
    mock_client.ai_shorts.create_and_wait = mocker.AsyncMock(return_value=job_done)

    result = await create_ai_shorts(prompt="p", aspect_ratio="1:1", duration=30, wait_for_completion=True)

    assert result == job_done
    mock_client.ai_shorts.create_and_wait.assert_awaited_once_with(
        {"prompt": "p", "aspect_ratio": "1:1", "duration": 30}
    )


# ==================== Status ====================


@pytest.mark.integration
@pytest.mark.parametrize("video_type", [kind.value for kind in JobKind])
async def test_status_routes_by_video_type(mocker, mock_client, job_done, video_type):
    """Status lookups go to the endpoint for the job kind."""
    resource = mocker.MagicMock()
    resource.get = mocker.AsyncMock(return_value=job_done)
    mock_client.jobs_for.return_value = resource

    result = await get_video_status(video_id="v1", video_type=video_type)

    assert result == job_done
    mock_client.jobs_for.assert_called_once_with(JobKind(video_type))
    resource.get.assert_awaited_once_with("v1")


@pytest.mark.integration
async def test_status_rejects_unknown_type(mock_client):
    """An unknown video type fails before any API call."""
    with pytest.raises(ValueError):
        await get_video_status(video_id="v1", video_type="hologram")

    mock_client.jobs_for.assert_not_called()
