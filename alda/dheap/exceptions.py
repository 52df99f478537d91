class UnderflowError(RuntimeError):
    """Raised when reading from or removing out of an empty heap."""


class InvalidArgumentError(ValueError):
    """Raised for arguments outside the domain an operation accepts."""
