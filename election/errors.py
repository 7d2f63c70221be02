"""Election engine errors.

Every failure is raised synchronously to the caller of the failing operation
and the surrounding transaction is rolled back, so no error ever leaves a
partial write behind.
"""


class ElectionError(Exception):
    """Base class for all election engine errors."""

    default_message = "Election error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ElectionError):
    """Caller lacks the administrator identity or a required role."""

    default_message = "Unauthorized"


class NotFound(ElectionError):
    """Unknown voter identity or election id."""

    default_message = "Not found"


class InvalidElectionParams(ElectionError):
    """Election creation parameters are inconsistent."""

    default_message = "Invalid election parameters"


class InvalidState(ElectionError):
    """Operation not allowed in the election's current state."""

    default_message = "Invalid election state"


class Expired(ElectionError):
    """Vote cast after the election timer elapsed."""

    default_message = "Election expired"


class AlreadyVoted(ElectionError):
    default_message = "Already voted"


class IndexOutOfRange(ElectionError):
    default_message = "Choice index out of range"


class InvalidStakeholder(ElectionError):
    """Unknown role label."""

    default_message = "Invalid stakeholder"


class InvalidWeight(ElectionError):
    default_message = "Weight must be an integer between 0 and MAX_WEIGHT"


class NotComputed(ElectionError):
    """Result requested before compilation."""

    default_message = "Result not computed"
