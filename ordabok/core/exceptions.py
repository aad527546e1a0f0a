"""
Custom exceptions for the application.

Repositories, resolvers and the mutation orchestrator raise these; the
boundary layer in ``ordabok.main`` turns them into HTTP responses.
"""


class OrdabokException(Exception):
    """Base exception for all Ordabok application exceptions."""
    pass


class DatabaseConnectionError(OrdabokException):
    """Raised when no connection could be checked out of the pool, or the store is unreachable."""
    pass


class NotFoundError(OrdabokException):
    """Raised when a well-formed lookup matched no row."""
    pass


class ValidationError(OrdabokException):
    """Raised when input is malformed or relationship state does not allow the operation."""
    pass


class UnauthorizedError(OrdabokException):
    """Raised when the caller may not perform the operation."""
    pass


class AuthenticationError(UnauthorizedError):
    """Raised when an operation requires a caller identity and none is attached."""
    pass


class AuthorizationError(UnauthorizedError):
    """Raised when the caller is not the owner, or the administrative key is wrong."""
    pass


class DatabaseError(OrdabokException):
    """
    Raised on any other store failure.

    ``detail`` keeps the full diagnostic for logs, ``code`` is a short message
    that is safe to hand to callers.
    """

    def __init__(self, detail: str, code: str = "Database error"):
        super().__init__(detail)
        self.detail = detail
        self.code = code
