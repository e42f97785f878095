from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from llmflow.core.errors import RetryLimitExceeded


@dataclass(slots=True, frozen=True)
class Success:
    message: str
    # сколько раз выполнялась логика ноды, включая успешный раз
    attempts: int = 1

    is_ok: Literal[True] = True


@dataclass(slots=True, frozen=True)
class Failure:
    error: RetryLimitExceeded

    is_ok: Literal[False] = False


ExecutionResult: TypeAlias = Success | Failure


__all__ = ["ExecutionResult", "Failure", "Success"]
