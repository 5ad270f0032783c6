"""Fixtures for the client test suite.

No test touches the network: every client is wired to an
``httpx.MockTransport`` whose handler serves queued responses and records the
requests it saw.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Iterable, Iterator, List

import httpx
import pytest

from deepseek_client import DeepseekClient
from deepseek_client.base.logging import BASE_LOGGER_NAME
from deepseek_client.tests.helpers import Recorder, Reply


@pytest.fixture()
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Replace ``time.sleep`` with a recorder of requested delays."""
    delays: List[float] = []
    monkeypatch.setattr(time, "sleep", lambda seconds: delays.append(seconds))
    return delays


@pytest.fixture()
def make_client() -> Iterator[Callable[..., tuple]]:
    """Return ``factory(replies, **options) -> (client, recorder)``."""
    created: List[httpx.Client] = []

    def factory(replies: Iterable[Reply], **options: Any):
        recorder = Recorder(replies)
        http = httpx.Client(transport=httpx.MockTransport(recorder))
        created.append(http)
        options.setdefault("api_key", "sk-test")
        options.setdefault("base_url", "https://api.x.com")
        return DeepseekClient(http_client=http, **options), recorder

    yield factory
    for http in created:
        http.close()


@pytest.fixture()
def log_capture() -> Iterator[List[logging.LogRecord]]:
    """Collect records emitted on the ``deepseek`` logger hierarchy."""
    records: List[logging.LogRecord] = []
    handler = logging.Handler(level=logging.DEBUG)
    handler.emit = lambda record: records.append(record)  # type: ignore[method-assign]
    logger = logging.getLogger(BASE_LOGGER_NAME)
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
