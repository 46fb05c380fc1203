"""Tests for the sequential upload fallback chain."""

import httpx
import pytest

from tests.transport_helpers import FakeHostingServices, RecordingTransport
from uploads import (
    DEFAULT_UPLOAD_ORDER,
    AllUploadsFailedError,
    LitterboxUploader,
    TmpfilesUploader,
    UploadCoordinator,
    UploadResult,
    create_uploader,
    default_uploaders,
)
from utils.media_utils import MediaNotFoundError


def _coordinator(services: FakeHostingServices) -> tuple[UploadCoordinator, RecordingTransport]:
    transport = RecordingTransport(services)
    return UploadCoordinator(transport=transport), transport


def test_default_chain_tries_tmpfiles_then_litterbox():
    uploaders = default_uploaders()
    assert DEFAULT_UPLOAD_ORDER == ("tmpfiles", "litterbox")
    assert [type(uploader) for uploader in uploaders] == [TmpfilesUploader, LitterboxUploader]


def test_create_uploader_unknown_name():
    with pytest.raises(KeyError, match="No uploader registered for 'dropbox'"):
        create_uploader("dropbox")


@pytest.mark.asyncio
async def test_missing_file_fails_before_any_network_call(tmp_path):
    coordinator, transport = _coordinator(FakeHostingServices())
    missing = tmp_path / "nope.mp4"

    with pytest.raises(MediaNotFoundError) as excinfo:
        await coordinator.upload(str(missing))

    assert str(excinfo.value) == f"File not found: {missing}"
    assert transport.requests == []


@pytest.mark.asyncio
async def test_first_success_wins(sample_video):
    coordinator, transport = _coordinator(FakeHostingServices())

    result = await coordinator.upload(str(sample_video))

    assert result == UploadResult(url="https://tmpfiles.org/dl/123/clip.mp4", service="tmpfiles.org")
    assert transport.paths() == ["POST tmpfiles.org/api/v1/upload"]
    assert [attempt.succeeded for attempt in coordinator.last_attempts] == [True]


@pytest.mark.asyncio
async def test_falls_back_to_litterbox_when_tmpfiles_fails(sample_video):
    services = FakeHostingServices()
    services.tmpfiles = httpx.Response(500, text="down")
    coordinator, transport = _coordinator(services)

    result = await coordinator.upload(str(sample_video))

    assert result == UploadResult(url="https://litter.catbox.moe/abc123.mp4", service="litterbox.catbox.moe")
    assert transport.paths() == [
        "POST tmpfiles.org/api/v1/upload",
        "POST litterbox.catbox.moe/resources/internals/api.php",
    ]
    first, second = coordinator.last_attempts
    assert first.label == "tmpfiles.org"
    assert first.error == "tmpfiles.org upload failed: 500"
    assert second.succeeded


@pytest.mark.asyncio
async def test_transport_errors_also_fall_through(sample_video):
    services = FakeHostingServices()
    services.tmpfiles = httpx.ConnectError("connection refused")
    coordinator, transport = _coordinator(services)

    result = await coordinator.upload(str(sample_video))

    assert result.service == "litterbox.catbox.moe"
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_all_services_failing_reports_every_reason(sample_video):
    services = FakeHostingServices()
    services.tmpfiles = httpx.Response(502, text="bad gateway")
    services.litterbox = httpx.Response(200, text="<html>maintenance</html>")
    coordinator, transport = _coordinator(services)

    with pytest.raises(AllUploadsFailedError) as excinfo:
        await coordinator.upload(str(sample_video))

    message = str(excinfo.value)
    assert message.startswith("All upload services failed.")
    assert "publicly accessible URL directly using qwen_chat" in message
    assert "tmpfiles.org: tmpfiles.org upload failed: 502" in message
    assert "litterbox: Litterbox returned invalid URL: <html>maintenance</html>" in message
    assert [attempt.service for attempt in excinfo.value.attempts] == ["tmpfiles.org", "litterbox.catbox.moe"]
    assert len(transport.requests) == 2


@pytest.mark.asyncio
async def test_injected_client_is_not_closed(sample_video):
    client = httpx.AsyncClient(transport=RecordingTransport(FakeHostingServices()))
    coordinator = UploadCoordinator(client=client)

    await coordinator.upload(str(sample_video))

    assert not client.is_closed
    await client.aclose()
