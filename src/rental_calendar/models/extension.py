"""Extension request models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ExtensionRejection(str, Enum):
    """Reasons an extension can be rejected, in evaluation order."""

    LEAD_TIME = "Extension must start at least 24 hours from now"
    SEQUENCING = "Extension must start after the original order ends"
    RANGE_ORDER = "Start date must be before end date"
    CONFLICT = "Dates overlap with existing bookings"


class ExtensionValidation(BaseModel):
    """Result of validating a proposed extension."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    reason: str | None = None

    @classmethod
    def accepted(cls) -> "ExtensionValidation":
        """A passing validation."""
        return cls(valid=True)

    @classmethod
    def rejected(cls, rejection: ExtensionRejection) -> "ExtensionValidation":
        """A failing validation carrying the rule's reason."""
        return cls(valid=False, reason=rejection.value)
