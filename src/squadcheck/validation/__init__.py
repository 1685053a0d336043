"""Squad and league rule validation."""

from .errors import (
    RULE_SOURCES,
    VALIDATION_ERRORS,
    ErrorDescriptor,
    ErrorKind,
    LeagueErrorKind,
    classify,
    format_error,
)
from .participants import participant_bounds, validate_participant_bounds
from .squad import (
    ADD_BLOCKING_KINDS,
    ValidationResult,
    check_squad_limit,
    is_valid_position,
    preview_addition,
    validate_squad,
)

__all__ = [
    "ADD_BLOCKING_KINDS",
    "RULE_SOURCES",
    "VALIDATION_ERRORS",
    "ErrorDescriptor",
    "ErrorKind",
    "LeagueErrorKind",
    "ValidationResult",
    "check_squad_limit",
    "classify",
    "format_error",
    "is_valid_position",
    "participant_bounds",
    "preview_addition",
    "validate_participant_bounds",
    "validate_squad",
]
