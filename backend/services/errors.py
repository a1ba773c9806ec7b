class SheetError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreNotFound(SheetError):
    status_code = 404


class RecordValidationError(SheetError):
    status_code = 400


class StoreFailure(SheetError):
    status_code = 500
