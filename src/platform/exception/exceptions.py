class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    retryable: bool = False

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class InvalidFilterError(DomainError):
    """Filter input rejected before any query is issued."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class SeatGridOverflowError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class TransientError(CustomBaseError):
    """Failure worth retrying: the row source is unreachable or slow."""

    retryable = True

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)


class RowSourceConnectionError(TransientError):
    pass


class QueryTimeoutError(TransientError):
    pass


class QueryError(CustomBaseError):
    """Malformed or rejected query. Not retryable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class MappingError(CustomBaseError):
    """A source row does not match the shape of the record it maps to."""

    def __init__(
        self, message: str, *, column: str | None = None, row_index: int | None = None
    ) -> None:
        self.column = column
        self.row_index = row_index
        if row_index is not None:
            message = f'{message} (row {row_index})'
        super().__init__(message, 500)
