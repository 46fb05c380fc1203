"""Registry implementations for upstream model listings."""

from .base import ModelListCache
from .qwen import QwenModelRegistry, format_model_error

__all__ = [
    "ModelListCache",
    "QwenModelRegistry",
    "format_model_error",
]
