from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TypeVar

from llmflow.core.errors import EmptyNodeName, ExecutionError, RetryLimitExceeded
from llmflow.core.result import ExecutionResult, Failure, Success
from llmflow.core.retry import RetryPolicy, RetryState, validate_retries, validate_wait
from llmflow.logger import get_logger


DEFAULT_NODE_NAME = "default"

NodeT = TypeVar("NodeT", bound="Node")

# Unit of work run on every attempt; raising means the attempt failed.
NodeLogic = Callable[["Node"], None]


@dataclass(slots=True, frozen=True)
class Node:
    """
    A single unit of work in a flow.

    Nodes are immutable: every ``with_*`` builder returns a new node and leaves
    the receiver untouched, so a successor can be shared between several nodes
    without copying. Out-of-range settings are rejected, never clamped.
    """

    # имя ноды
    name: str = DEFAULT_NODE_NAME
    # следующая нода в цепочке (общая ссылка, не копия)
    next: Node | None = None
    # количество повторов после первой неудачной попытки
    max_retries: int = 0
    # пауза между попытками в секундах
    wait: int = 0
    # подключаемая логика ноды; без нее попытка всегда успешна
    logic: NodeLogic | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise EmptyNodeName()
        validate_retries(self.max_retries)
        validate_wait(self.wait)

    @classmethod
    def create(cls: type[NodeT], name: str | None = None) -> NodeT:
        """Create a node with no successor, no retries and no wait."""
        return cls(name=DEFAULT_NODE_NAME if name is None else name)

    # ----- Builders ------------------------------------------------------------------------------

    def with_next(self: NodeT, node: Node) -> NodeT:
        return replace(self, next=node)

    def with_retries(self: NodeT, retries: int) -> NodeT:
        return replace(self, max_retries=validate_retries(retries))

    def with_wait(self: NodeT, seconds: int) -> NodeT:
        """Set the wait time in seconds between retries."""
        return replace(self, wait=validate_wait(seconds))

    def with_logic(self: NodeT, logic: NodeLogic) -> NodeT:
        return replace(self, logic=logic)

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(max_retries=self.max_retries, wait_sec=self.wait)

    # ----- Execution -----------------------------------------------------------------------------

    def execute(self) -> Success:
        """
        Run the node's logic, retrying failed attempts.

        Makes at most ``max_retries + 1`` attempts and blocks the calling thread
        for ``wait`` seconds before each retry.

        Raises:
            RetryLimitExceeded: every attempt failed; chained to the last
                ``ExecutionError``.
        """
        log_event = get_logger("node.event").bind(node=self.name)
        log_event.info("node.execute", max_retries=self.max_retries, wait_s=self.wait)

        retry_state = RetryState(self.retry_policy)
        while True:
            try:
                self._attempt()
            except ExecutionError as error:
                if not retry_state.can_retry():
                    log_event.error(
                        "node.giveup", attempts=retry_state.attempt, error=error.detail
                    )
                    raise RetryLimitExceeded(
                        attempts=retry_state.attempt, message=str(error)
                    ) from error

                delay = retry_state.delay()
                log_event.warning(
                    "node.retry",
                    attempt=retry_state.attempt,
                    delay_s=delay,
                    error=error.detail,
                )
                time.sleep(delay)
                retry_state.register_failure()
                continue

            attempts = retry_state.attempt + 1
            log_event.info("node.succeeded", attempts=attempts)
            return Success(f"node {self.name} succeeded", attempts=attempts)

    def try_execute(self) -> ExecutionResult:
        """Same as execute(), but returns the retry failure instead of raising it."""
        try:
            return self.execute()
        except RetryLimitExceeded as error:
            return Failure(error)

    def execute_logic(self) -> None:
        """Actual work of the node. Override in subclasses or attach with with_logic()."""
        if self.logic is not None:
            self.logic(self)

    def _attempt(self) -> None:
        try:
            self.execute_logic()
        except ExecutionError:
            raise
        except Exception as exception:
            raise ExecutionError(str(exception) or type(exception).__name__) from exception


__all__ = ["DEFAULT_NODE_NAME", "Node", "NodeLogic"]
