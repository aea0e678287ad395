"""Base exceptions for structcheck domain."""


class StructCheckError(Exception):
    """Root exception for all structcheck errors.

    All domain exceptions inherit from this.
    Allows catching all structcheck-specific errors.
    """
