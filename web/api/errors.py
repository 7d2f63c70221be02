"""API errors and validation helpers."""

from pydantic import BaseModel

from election.errors import (
    AlreadyVoted,
    ElectionError,
    Expired,
    IndexOutOfRange,
    InvalidElectionParams,
    InvalidStakeholder,
    InvalidState,
    InvalidWeight,
    NotComputed,
    NotFound,
    Unauthorized,
)


class ValidationError(ElectionError):
    """Malformed request parameter."""

    default_message = "Validation error"


class ErrorResponse(BaseModel):
    """Error payload handed to the transport layer."""

    error: str
    message: str
    status: int


# Status hints for the transport layer, by error class
STATUS_CODES: dict[type[ElectionError], int] = {
    ValidationError: 400,
    InvalidElectionParams: 400,
    InvalidStakeholder: 400,
    InvalidWeight: 400,
    IndexOutOfRange: 400,
    Unauthorized: 403,
    NotFound: 404,
    InvalidState: 409,
    AlreadyVoted: 409,
    NotComputed: 409,
    Expired: 410,
}


def error_response(exc: ElectionError) -> ErrorResponse:
    """Describe an engine error for the caller."""
    status = next((code for cls, code in STATUS_CODES.items() if isinstance(exc, cls)), 500)
    return ErrorResponse(error=exc.__class__.__name__, message=exc.message, status=status)


def validate_election_id(election_id: int) -> None:
    """Validate election_id is a non-negative integer."""
    if isinstance(election_id, bool) or not isinstance(election_id, int) or election_id < 0:
        raise ValidationError(f"Invalid election_id: {election_id!r}. Must be a non-negative integer")


def validate_identity(identity: str) -> None:
    if not isinstance(identity, str) or not identity.strip():
        raise ValidationError("Identity must be a non-empty string")
