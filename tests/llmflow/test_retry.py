from __future__ import annotations

import pytest

from llmflow.core.errors import InvalidRetryCount, InvalidWaitTime
from llmflow.core.retry import MAX_RETRIES, MAX_WAIT_SECONDS, RetryPolicy, RetryState


def test_limits() -> None:
    assert MAX_RETRIES == 10
    assert MAX_WAIT_SECONDS == 60


def test_policy_rejects_out_of_range() -> None:
    with pytest.raises(InvalidRetryCount):
        RetryPolicy(max_retries=11)
    with pytest.raises(InvalidWaitTime):
        RetryPolicy(wait_sec=61)


def test_state_counts_up_to_max_retries() -> None:
    state = RetryState(RetryPolicy(max_retries=2, wait_sec=5))
    assert state.can_retry()
    state.register_failure()
    assert state.attempt == 1
    state.register_failure()
    assert state.attempt == 2
    assert not state.can_retry()
    with pytest.raises(RuntimeError):
        state.register_failure()


def test_delay_is_fixed() -> None:
    state = RetryState(RetryPolicy(max_retries=3, wait_sec=7))
    delays = []
    while state.can_retry():
        delays.append(state.delay())
        state.register_failure()
    assert delays == [7.0, 7.0, 7.0]


def test_zero_retries_never_retries() -> None:
    assert not RetryState(RetryPolicy()).can_retry()


@pytest.mark.parametrize("value", [2.5, True, "3", None])
def test_non_int_values_rejected(value: object) -> None:
    with pytest.raises(TypeError):
        RetryPolicy(max_retries=value)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        RetryPolicy(wait_sec=value)  # type: ignore[arg-type]
