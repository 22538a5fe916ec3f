from __future__ import annotations

from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Iterator

from online_compiler.core.languages import DEFAULT_LANGUAGE


DEFAULT_CODE = 'print("Hello from automation!")'

RUNNING_PLACEHOLDER = "⏳ Running code..."
THINKING_PLACEHOLDER = "🤖 Thinking..."


class FlowBusyError(RuntimeError):
    """Raised when a flow is triggered while its previous call is in flight."""


@dataclass(slots=True)
class CompilerSession:
    """State behind the single page.

    Only mutated from coroutines on the event loop, one flow at a time per flag.
    """

    language: str = DEFAULT_LANGUAGE
    code: str = DEFAULT_CODE
    stdin: str = ""
    output: str = ""
    is_running: bool = False

    ai_prompt: str = ""
    ai_response: str = ""
    is_thinking: bool = False

    def snapshot(self) -> dict[str, Any]:
        return asdict(self)

    @contextmanager
    def running(self) -> Iterator[None]:
        if self.is_running:
            raise FlowBusyError("code is already running")
        self.is_running = True
        self.output = RUNNING_PLACEHOLDER
        try:
            yield
        finally:
            self.is_running = False

    @contextmanager
    def thinking(self) -> Iterator[None]:
        if self.is_thinking:
            raise FlowBusyError("the assistant is already answering")
        self.is_thinking = True
        self.ai_response = THINKING_PLACEHOLDER
        try:
            yield
        finally:
            self.is_thinking = False
