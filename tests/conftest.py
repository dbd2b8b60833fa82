from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, Iterator, List
from urllib.error import HTTPError

import pytest

from tests._fixtures.jar_builder import JarBuilder


@pytest.fixture(autouse=True)
def _reset_mvn2llm_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger("mvn2llm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def jar_builder(tmp_path: Path) -> JarBuilder:
    """Provide a reusable jar builder rooted at the pytest tmp_path."""
    return JarBuilder(tmp_path)


class FakeResponse:
    def __init__(self, payload: bytes) -> None:
        self._payload = payload

    def read(self) -> bytes:
        return self._payload

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False


class FakeOpener:
    """Stands in for a urllib opener; serves canned bodies keyed by URL."""

    def __init__(self, responses: Dict[str, bytes] | None = None) -> None:
        self.responses: Dict[str, bytes] = dict(responses or {})
        self.requests: List[str] = []
        self.timeouts: List[float] = []

    def open(self, request, timeout=None):
        url = request.full_url
        self.requests.append(url)
        self.timeouts.append(timeout)
        if url not in self.responses:
            raise HTTPError(url, 404, "Not Found", {}, io.BytesIO(b""))
        return FakeResponse(self.responses[url])


@pytest.fixture
def fake_opener() -> FakeOpener:
    return FakeOpener()
