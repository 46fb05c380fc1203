"""Qwen API provider, model registry and message builders."""

from .qwen import NO_RESPONSE_TEXT, ConfigMissingError, QwenAPIError, QwenModelProvider
from .registries import ModelListCache, QwenModelRegistry, format_model_error
from .registry import get_model_registry, get_provider, reset_for_testing, set_provider
from .shared import ModelValidationResult

__all__ = [
    "NO_RESPONSE_TEXT",
    "ConfigMissingError",
    "ModelListCache",
    "ModelValidationResult",
    "QwenAPIError",
    "QwenModelProvider",
    "QwenModelRegistry",
    "format_model_error",
    "get_model_registry",
    "get_provider",
    "reset_for_testing",
    "set_provider",
]
