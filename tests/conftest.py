"""
Pytest configuration for Qwen MCP Server tests
"""

import asyncio
import sys
from pathlib import Path

import pytest

# Ensure the parent directory is in the Python path for imports
parent_dir = Path(__file__).resolve().parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import utils.env as env_config  # noqa: E402

# Ensure tests operate with runtime environment rather than .env overrides during imports
env_config.reload_env({"QWEN_MCP_FORCE_ENV_OVERRIDE": "false"})

# Configure asyncio for Windows compatibility
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from providers import QwenModelProvider, reset_for_testing, set_provider  # noqa: E402
from tests.transport_helpers import FakeQwenAPI, RecordingTransport  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Give every test a token, runtime env visibility and a fresh model cache."""

    monkeypatch.setenv("QWEN_API_TOKEN", "test-token")
    monkeypatch.setenv("QWEN_MCP_FORCE_ENV_OVERRIDE", "false")
    env_config.reload_env({"QWEN_MCP_FORCE_ENV_OVERRIDE": "false"})
    reset_for_testing()

    try:
        yield
    finally:
        reset_for_testing()
        env_config.reload_env({"QWEN_MCP_FORCE_ENV_OVERRIDE": "false"})


@pytest.fixture
def qwen_api():
    """Fake Qwen API installed as the shared provider's transport."""

    api = FakeQwenAPI()
    transport = RecordingTransport(api)
    set_provider(QwenModelProvider(api_key="test-token", transport=transport))
    api.transport = transport
    return api


@pytest.fixture
def sample_video(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42fake-video-bytes")
    return path


@pytest.fixture
def sample_image(tmp_path):
    path = tmp_path / "photo.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image-bytes")
    return path
