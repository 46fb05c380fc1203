"""Process-wide access to the Qwen provider and its model registry."""

from __future__ import annotations

import logging
from typing import Optional

from .qwen import QwenModelProvider
from .registries.base import ModelListCache
from .registries.qwen import QwenModelRegistry

logger = logging.getLogger(__name__)

_PROVIDER: Optional[QwenModelProvider] = None
_MODEL_REGISTRY: Optional[QwenModelRegistry] = None


def get_provider() -> QwenModelProvider:
    global _PROVIDER
    if _PROVIDER is None:
        _PROVIDER = QwenModelProvider()
    return _PROVIDER


def set_provider(provider: Optional[QwenModelProvider]) -> None:
    """Install a specific provider instance (tests inject mock transports here)."""
    global _PROVIDER
    _PROVIDER = provider


async def _fetch_model_ids() -> list[str]:
    return await get_provider().list_model_ids()


def get_model_registry() -> QwenModelRegistry:
    """Return the shared registry; its model cache lives for the whole process."""
    global _MODEL_REGISTRY
    if _MODEL_REGISTRY is None:
        _MODEL_REGISTRY = QwenModelRegistry(ModelListCache(_fetch_model_ids))
        logger.debug("Created shared Qwen model registry")
    return _MODEL_REGISTRY


def reset_for_testing() -> None:
    global _PROVIDER, _MODEL_REGISTRY
    _PROVIDER = None
    _MODEL_REGISTRY = None
