"""Domain error taxonomy shared by services, repositories and the HTTP layer."""


class InstituteAdminError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(InstituteAdminError):
    status_code = 404
    code = "NOT_FOUND"


class ValidationError(InstituteAdminError):
    status_code = 422
    code = "VALIDATION_ERROR"


class ConflictError(InstituteAdminError):
    status_code = 409
    code = "CONFLICT"


class StorageUnavailable(InstituteAdminError):
    status_code = 503
    code = "STORAGE_UNAVAILABLE"


class DecodeError(InstituteAdminError):
    """A persisted record could not be turned back into a domain object."""

    status_code = 500
    code = "DECODE_ERROR"
