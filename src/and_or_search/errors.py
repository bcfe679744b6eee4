# errors.py
# Exception taxonomy for the And-Or search.
#
# "No plan exists" is never an exception; it is the Failure result.
# Everything here means a caller or a problem implementation is broken.

from typing import Any


class SearchError(Exception):
    """Base class for fatal search errors."""


class ContractViolationError(SearchError):
    """Raised when an offered action produces no possible outcome. Always fatal."""

    def __init__(self, state: Any, action: Any) -> None:
        self.state = state
        self.action = action
        super().__init__(f"From {state!r} action {action!r} results in no states.")


class UnsupportedOperationError(SearchError):
    """Raised when a deterministic-only operation is invoked on a non-deterministic problem."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} is not supported for a non-deterministic problem.")
