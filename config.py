"""
Configuration and constants for the Qwen MCP Server

This module centralizes all configuration settings for the server: the
upstream Qwen API endpoint, default model and thinking budget, upload
limits and the roster of vision-capable models. Values that operators may
want to change are read through ``utils.env.get_env`` so they can be set in
the process environment or a local ``.env`` file.
"""

from utils.env import get_env, get_env_float

# Version and metadata
__version__ = "1.0.0"
__author__ = "Qwen MCP contributors"

# Name advertised to MCP clients during initialization
SERVER_NAME = "qwen-api"

# Upstream OpenAI-compatible endpoint. The client appends /v1 itself.
QWEN_API_BASE = (get_env("QWEN_API_BASE", "https://qwen.aikit.club") or "https://qwen.aikit.club").rstrip("/")

# Environment variable holding the bearer token. Read lazily at first use so a
# missing token fails the enclosing tool call rather than server startup.
QWEN_API_TOKEN_ENV = "QWEN_API_TOKEN"

DEFAULT_MODEL = get_env("DEFAULT_MODEL", "qwen-max-latest") or "qwen-max-latest"

# Token budget forwarded with enable_thinking requests
DEFAULT_THINKING_BUDGET = 30000

# Qwen's video understanding endpoint rejects files above 500MB
MAX_VIDEO_SIZE_MB = 500

# Litterbox accepts only these retention windows
LITTERBOX_RETENTION_CHOICES = ("1h", "12h", "24h", "72h")
DEFAULT_LITTERBOX_RETENTION = "24h"
LITTERBOX_RETENTION = get_env("LITTERBOX_RETENTION", DEFAULT_LITTERBOX_RETENTION) or DEFAULT_LITTERBOX_RETENTION

# HTTP timeouts (seconds). Uploads of large videos need a long write window.
HTTP_CONNECT_TIMEOUT = get_env_float("QWEN_HTTP_CONNECT_TIMEOUT", 30.0)
HTTP_READ_TIMEOUT = get_env_float("QWEN_HTTP_READ_TIMEOUT", 600.0)
HTTP_WRITE_TIMEOUT = get_env_float("QWEN_HTTP_WRITE_TIMEOUT", 600.0)

# Vision-capable models for video/image analysis. Order matters: it is the
# fallback list shown when the live model listing has no matching entries.
VISION_MODELS = [
    "qwen-max-latest",
    "qwen3-vl-plus",
    "qwen3-vl-32b",
    "qwen3-vl-30b-a3b",
    "qwen2.5-vl-32b-instruct",
    "qvq-72b-preview-0310",
    "qwen-video",
]

# Subset surfaced by qwen_list_models as the recommended vision models
RECOMMENDED_VISION_MODELS = [
    "qwen-max-latest (recommended)",
    "qwen3-vl-plus",
    "qwen3-vl-32b",
    "qvq-72b-preview-0310",
    "qwen-video",
]

LOG_LEVEL = get_env("LOG_LEVEL", "INFO") or "INFO"
