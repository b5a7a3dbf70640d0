"""Error types shared by services and routes."""


class EpaperSiteError(Exception):
    """Base class for errors reported back to the caller."""
    status_code = 500
    message = 'Something went wrong'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidInput(EpaperSiteError):
    """Missing or malformed input, rejected before persistence."""
    status_code = 400
    message = 'Invalid input'


class NotFound(EpaperSiteError):
    """No record for the requested key."""
    status_code = 404
    message = 'Not found'


class Conflict(EpaperSiteError):
    """The write would break the one-paper-per-date rule."""
    status_code = 409
    message = 'An e-paper already exists for this date'


class StorageError(EpaperSiteError):
    """Object storage rejected or failed the request."""
    status_code = 502
    message = 'File storage is unavailable'
