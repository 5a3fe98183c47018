"""
Exceptions raised while configuring a clustering run.
"""


class UnknownMethodError(ValueError):
    """Raised when a linkage method name is not one of the built-in methods."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"unknown clustering method: {method!r}")


class InvalidMethodTypeError(TypeError):
    """Raised when the linkage method is neither a string nor a callable."""

    def __init__(self, method: object):
        self.method = method
        super().__init__(
            f"method must be a string or function, got {type(method).__name__}"
        )
