"""Domain errors raised by services and rendered by the API as envelope responses."""


class ServiceError(Exception):
    """Base class; status_code is the HTTP status the API answers with."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    status_code = 404


class DuplicateEmailError(ServiceError):
    status_code = 400


class NoChangesError(ServiceError):
    """Raised for partial updates that carry no recognized field; nothing is written."""

    status_code = 400

    def __init__(self, message: str = "Tidak ada data yang diupdate") -> None:
        super().__init__(message)


class ForbiddenError(ServiceError):
    status_code = 403


class AuthenticationError(ServiceError):
    status_code = 401
