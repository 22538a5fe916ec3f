from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from online_compiler.core.config import Settings


JUDGE0_URL = "https://judge0.test/submissions?base64_encoded=false&wait=true"
CHAT_URL = "https://chat.test/v1/chat/completions"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def sent_json(self, index: int = 0) -> Any:
        return json.loads(self.requests[index].content)


def reply(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _handler


@pytest.fixture
def settings() -> Settings:
    return Settings(
        judge0_base_url=JUDGE0_URL,
        judge0_api_key=None,
        openai_api_key="sk-test",
        openai_chat_url=CHAT_URL,
    )
