"""Dataclass describing the outcome of checking a requested model name."""

from dataclasses import dataclass, field
from typing import Optional

__all__ = ["ModelValidationResult"]


@dataclass
class ModelValidationResult:
    """Result of validating a model id against the live model listing.

    ``valid=False`` is a soft failure: callers turn ``suggestion`` and
    ``available_vision_models`` into guidance text instead of raising.
    """

    valid: bool
    suggestion: Optional[str] = None
    available_vision_models: Optional[list[str]] = field(default=None)
