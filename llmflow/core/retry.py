from __future__ import annotations

from dataclasses import dataclass

from llmflow.core.errors import InvalidRetryCount, InvalidWaitTime


MAX_RETRIES = 10
MAX_WAIT_SECONDS = 60


def _require_int(value: object, what: str) -> None:
    # bool is an int subclass, but True is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")


def validate_retries(retries: int) -> int:
    """Check the retry count against the allowed range and return it unchanged."""
    _require_int(retries, "retries")
    if retries < 0 or retries > MAX_RETRIES:
        raise InvalidRetryCount(retries, MAX_RETRIES)
    return retries


def validate_wait(seconds: int) -> int:
    """Check the wait time (seconds) against the allowed range and return it unchanged."""
    _require_int(seconds, "wait")
    if seconds < 0 or seconds > MAX_WAIT_SECONDS:
        raise InvalidWaitTime(seconds, MAX_WAIT_SECONDS)
    return seconds


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Политика повторных попыток выполнения ноды"""

    # количество дополнительных попыток после первой неудачи
    max_retries: int = 0
    # фиксированная пауза между попытками в секундах
    wait_sec: int = 0

    def __post_init__(self) -> None:
        validate_retries(self.max_retries)
        validate_wait(self.wait_sec)


@dataclass(slots=True)
class RetryState:
    """Состояние повторных попыток одного запуска"""

    # политика, по которой считаются попытки
    policy: RetryPolicy
    # номер текущей попытки, начиная с нуля
    attempt: int = 0

    def can_retry(self) -> bool:
        """Остались ли попытки после текущей"""

        return self.attempt < self.policy.max_retries

    def delay(self) -> float:
        """
        Задержка перед следующей попыткой.
        Не растет с номером попытки, всегда равна wait_sec
        """
        return float(self.policy.wait_sec)

    def register_failure(self) -> None:
        """Перейти к следующей попытке"""

        if not self.can_retry():
            raise RuntimeError("retry budget exhausted")
        self.attempt += 1


__all__ = [
    "MAX_RETRIES",
    "MAX_WAIT_SECONDS",
    "RetryPolicy",
    "RetryState",
    "validate_retries",
    "validate_wait",
]
