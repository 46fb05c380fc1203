"""Model registry backed by the live Qwen ``/v1/models`` listing."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from config import VISION_MODELS

from ..shared.model_validation import ModelValidationResult
from .base import ModelListCache

logger = logging.getLogger(__name__)

RECOMMENDED_VIDEO_MODEL = "qwen-max-latest"


def _normalize(name: str) -> str:
    return name.lower().replace("-", "").replace("_", "")


def _first_token(name: str) -> str:
    return name.lower().split("-", 1)[0]


class QwenModelRegistry:
    """Validate requested model ids and suggest alternatives.

    Validation fails open: when the listing cannot be fetched (or is empty)
    every model is accepted, since the upstream API remains the final judge.
    """

    def __init__(self, cache: ModelListCache, vision_models: Sequence[str] | None = None) -> None:
        self.cache = cache
        self.vision_models = list(vision_models if vision_models is not None else VISION_MODELS)

    async def list_models(self) -> list[str]:
        return await self.cache.get()

    async def validate(self, model: str) -> ModelValidationResult:
        models = await self.list_models()

        if not models:
            return ModelValidationResult(valid=True)

        if model in models:
            return ModelValidationResult(valid=True)

        suggestion = self.find_suggestion(model, models)
        vision = self.filter_vision_models(models)
        logger.info("Model '%s' not in upstream listing (suggestion: %s)", model, suggestion)

        return ModelValidationResult(valid=False, suggestion=suggestion, available_vision_models=vision)

    @staticmethod
    def find_suggestion(model: str, models: Sequence[str]) -> str | None:
        """Return the first listed model that loosely resembles ``model``.

        A candidate matches when its normalized id contains the normalized
        request, or the normalized request contains the candidate's first
        hyphen-delimited token.
        """

        requested = _normalize(model)
        for candidate in models:
            if requested in _normalize(candidate):
                return candidate
            token = _normalize(_first_token(candidate))
            if token and token in requested:
                return candidate
        return None

    def filter_vision_models(self, models: Sequence[str]) -> list[str]:
        """Return listed models sharing a family prefix with a known vision model.

        Matching uses only the first hyphen token of each roster entry, so any
        listed ``qwen*`` model qualifies. Falls back to the fixed roster.
        """

        prefixes = [_first_token(vision_model) for vision_model in self.vision_models]
        matches = [model for model in models if any(prefix in model.lower() for prefix in prefixes)]
        return matches if matches else list(self.vision_models)


def format_model_error(model: str, validation: ModelValidationResult, is_vision_request: bool) -> str:
    """Render guidance text for an unknown model."""

    message = f'Model "{model}" not found.'

    if validation.suggestion:
        message += f'\nDid you mean "{validation.suggestion}"?'

    if is_vision_request and validation.available_vision_models:
        message += "\n\nAvailable vision models for video/image analysis:\n"
        message += "\n".join(f"- {name}" for name in validation.available_vision_models)
        message += f'\n\nRecommended: "{RECOMMENDED_VIDEO_MODEL}" (works well with video)'

    return message
