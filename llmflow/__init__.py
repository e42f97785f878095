"""
llmflow: flow-based building blocks.

The most commonly used names are re-exported here.
"""

from __future__ import annotations

from .core import (
    MAX_RETRIES,
    MAX_WAIT_SECONDS,
    EmptyNodeName,
    ExecutionError,
    Failure,
    InvalidRetryCount,
    InvalidWaitTime,
    Node,
    NodeError,
    RetryLimitExceeded,
    Success,
)


__all__ = [
    "MAX_RETRIES",
    "MAX_WAIT_SECONDS",
    "EmptyNodeName",
    "ExecutionError",
    "Failure",
    "InvalidRetryCount",
    "InvalidWaitTime",
    "Node",
    "NodeError",
    "RetryLimitExceeded",
    "Success",
]
