__docformat__ = 'google'

__all__ = [
    'StringyError',
    'UnknownMethod',
    'InvalidArgument'
]

class StringyError(Exception):
    """Base class for errors raised by `stringy.dispatch`."""

class UnknownMethod(StringyError, AttributeError):
    """
    Raised when the requested transformation is not in the catalog.

    Args:
        method: The method name that was requested
    """
    def __init__(self, method):
        self.method = method
        super().__init__(f"Method doesn't exist: {method!r}")

class InvalidArgument(StringyError, TypeError):
    """
    Raised when an argument that must be text is not a string.

    Args:
        received: Type name of the value actually supplied
        index: Position of the bad argument in the call
    """
    def __init__(self, received: str, index: int = 0):
        self.received = received
        self.index = index
        super().__init__(
            'Argument of type str expected, instead received an argument '
            f'of type {received}'
        )
