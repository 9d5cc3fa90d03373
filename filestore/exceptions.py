"""Custom exception classes for the FileStore server."""


class FileStoreException(Exception):
    """
    Base exception class for all FileStore errors.
    """
    pass


class BadRequestError(FileStoreException):
    """
    Raised when required request input is missing or malformed.
    """
    pass


class InvalidFileNameError(BadRequestError):
    """
    Raised when a file name would resolve outside the store directory.
    """
    pass


class UnsupportedMediaTypeError(FileStoreException):
    """
    Raised when fetching a file whose MIME family is not served.
    """

    def __init__(self, mime):
        self.mime = mime
        super().__init__(f"Mime type {mime or 'unknown'} not supported")


class StoredFileNotFoundError(FileStoreException):
    """
    Raised when a requested file does not exist in the store directory.
    """
    pass


class IOFailureError(FileStoreException):
    """
    Raised when a filesystem or streaming operation fails unexpectedly.
    """
    pass
