"""Exceptions raised by the mock lifecycle helpers."""


class MockLifecycleError(Exception):
    """Base class for mock lifecycle errors."""
    pass


class MocksNotInitializedError(MockLifecycleError):
    """Raised when a mock field is read while no session is open."""
    pass


class MocksAlreadyOpenError(MockLifecycleError):
    """Raised when open_mocks() is called on an instance with an open session."""
    pass


class StaticMockError(MockLifecycleError):
    """Raised when a class cannot be statically mocked."""
    pass
