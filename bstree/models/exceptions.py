"""
Custom exceptions for ordered containers.
"""


class OperationInvalid(Exception):
    """
    Raised when an inspection accessor is used on a missing node.

    This is a programmer error: the caller asked for a child or root that
    does not exist.
    """

    def __init__(self, operation: str, reason: str):
        """
        Initialize the error.

        Args:
            operation: Name of the accessor that was called.
            reason: What was missing.
        """
        self.operation = operation
        self.reason = reason
        super().__init__(f"Invalid operation {operation}(): {reason}")
