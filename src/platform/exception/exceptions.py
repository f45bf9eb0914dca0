class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed or missing field, e.g. blank id, non-positive fare, seat outside the trip."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class ReservationNotFoundError(NotFoundError):
    """Cancel attempted on a seat that is not booked by the claimed passenger."""


class SeatUnavailableError(ConflictError):
    """Seat already booked or outside the trip; the ledger turns it into a waitlist fallback."""


class QueueFullError(ConflictError):
    pass


class QueueEmptyError(ConflictError):
    pass
