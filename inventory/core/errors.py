class InventoryError(Exception):
    """Base error for store operations. Carries the HTTP status it maps to."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(InventoryError):
    """Missing or malformed input, or a negative quantity."""

    status_code = 400


class NotFound(InventoryError):
    """No product has the requested id."""

    status_code = 404
