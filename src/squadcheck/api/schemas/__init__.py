"""Pydantic models for API I/O."""

from .tenant import AutoLockRequest, AutoLockResponse
from .validation import (
    ErrorDescriptorResponse,
    LeagueValidationRequest,
    ReplacementPayload,
    SquadValidationRequest,
    ValidationResponse,
)

__all__ = [
    "AutoLockRequest",
    "AutoLockResponse",
    "ErrorDescriptorResponse",
    "LeagueValidationRequest",
    "ReplacementPayload",
    "SquadValidationRequest",
    "ValidationResponse",
]
