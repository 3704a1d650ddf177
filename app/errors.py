# app/errors.py


class SchedulingError(Exception):
    """Base for errors raised by the scheduling core.

    ``kind`` lets callers pick a message without matching on the class;
    ``status_code`` is what the HTTP layer answers with.
    """

    kind = "scheduling"
    status_code = 400
    retryable = False

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(SchedulingError):
    kind = "validation"
    status_code = 422


class BarberInactiveError(ValidationError):
    kind = "barber_inactive"


class SlotIneligibleError(ValidationError):
    kind = "slot_ineligible"


class SlotTakenError(SchedulingError):
    """Another booking holds the slot; re-resolve availability and re-select."""

    kind = "conflict"
    status_code = 409


class InvalidTransitionError(SchedulingError):
    kind = "invalid_transition"
    status_code = 409


class NotFoundError(SchedulingError):
    kind = "not_found"
    status_code = 404


class ForbiddenError(SchedulingError):
    kind = "forbidden"
    status_code = 403


class BackendError(SchedulingError):
    kind = "backend"
    status_code = 503
    retryable = True


class AvailabilityUnknownError(BackendError):
    kind = "availability_unknown"
