"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class PersistenceError(Exception):
    """Error talking to the persistence backend.

    Raised by repository implementations when a query, write or procedure
    call fails (network error, constraint violation, RPC failure).
    """

    def __init__(self, message: str, operation: str = ""):
        super().__init__(message)
        self.message = message
        self.operation = operation
