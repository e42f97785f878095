from __future__ import annotations


class NodeError(Exception):
    """Base class for every node construction and execution failure."""


class EmptyNodeName(NodeError):
    def __init__(self) -> None:
        super().__init__("Node name cannot be empty")


class InvalidRetryCount(NodeError):
    def __init__(self, given: int, maximum: int) -> None:
        self.given = given
        self.maximum = maximum
        super().__init__(
            f"Invalid retry count: {given}. Maximum allowed retries is {maximum}"
        )


class InvalidWaitTime(NodeError):
    def __init__(self, given: int, maximum: int) -> None:
        self.given = given
        self.maximum = maximum
        super().__init__(
            f"Invalid wait time: {given} seconds. "
            f"Maximum allowed wait time is {maximum} seconds"
        )


class ExecutionError(NodeError):
    """A single attempt failed; wrapped into RetryLimitExceeded once attempts run out."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Node execution failed: {detail}")


class RetryLimitExceeded(NodeError):
    def __init__(self, attempts: int, message: str) -> None:
        self.attempts = attempts
        self.message = message
        super().__init__(
            f"Execution retry limit reached after {attempts} attempts: {message}"
        )


__all__ = [
    "EmptyNodeName",
    "ExecutionError",
    "InvalidRetryCount",
    "InvalidWaitTime",
    "NodeError",
    "RetryLimitExceeded",
]
