from booking_agent.core.error_codes import ErrorCode


class DomainException(Exception):
    """Expected request failure carrying an API error code."""

    def __init__(self, code: ErrorCode, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
