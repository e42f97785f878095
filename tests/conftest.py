from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


# ---- structlog keeps a reference to the stream it was configured with ----
@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
