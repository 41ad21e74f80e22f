"""Error taxonomy shared by the services and the HTTP layer."""


class AppError(Exception):
    """Base class for errors reported synchronously to the caller.

    Attributes:
        status_code: HTTP status used when rendering the error.
        message: Machine-readable message sent as ``{"error": message}``.
    """

    status_code = 400
    message = 'error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(AppError):
    status_code = 401
    message = 'Unauthorized'


class ValidationError(AppError):
    status_code = 400


class MissingEmail(ValidationError):
    message = 'Missing email'


class MissingPassword(ValidationError):
    message = 'Missing password'


class MissingName(ValidationError):
    message = 'Missing name'


class MissingType(ValidationError):
    message = 'Missing type'


class MissingData(ValidationError):
    message = 'Missing data'


class InvalidData(ValidationError):
    message = 'Invalid data'


class ParentNotFound(ValidationError):
    message = 'Parent not found'


class ParentNotAFolder(ValidationError):
    message = 'Parent is not a folder'


class FolderHasNoContent(ValidationError):
    message = "A folder doesn't have content"


class NotAnImage(ValidationError):
    message = 'Not an image'


class Conflict(AppError):
    # duplicate registrations are reported as a plain 400
    status_code = 400
    message = 'Already exist'


class NotFound(AppError):
    status_code = 404
    message = 'Not found'


class StorageFailure(AppError):
    status_code = 500
    message = 'Storage failure'


class JobFailure(Exception):
    """Raised by background handlers; retried by the queue, never by callers."""


class FileNotFound(JobFailure):
    def __init__(self, message='File not found'):
        super().__init__(message)
