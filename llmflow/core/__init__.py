"""
Core types of llmflow: the node, its errors and retry bookkeeping.
"""

from __future__ import annotations

from .errors import (
    EmptyNodeName,
    ExecutionError,
    InvalidRetryCount,
    InvalidWaitTime,
    NodeError,
    RetryLimitExceeded,
)
from .node import DEFAULT_NODE_NAME, Node, NodeLogic
from .result import ExecutionResult, Failure, Success
from .retry import MAX_RETRIES, MAX_WAIT_SECONDS, RetryPolicy, RetryState


__all__ = [
    "DEFAULT_NODE_NAME",
    "MAX_RETRIES",
    "MAX_WAIT_SECONDS",
    "EmptyNodeName",
    "ExecutionError",
    "ExecutionResult",
    "Failure",
    "InvalidRetryCount",
    "InvalidWaitTime",
    "Node",
    "NodeError",
    "NodeLogic",
    "RetryLimitExceeded",
    "RetryPolicy",
    "RetryState",
    "Success",
]
