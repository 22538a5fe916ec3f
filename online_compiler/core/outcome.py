from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    REMOTE = "remote"
    TRANSPORT = "transport"


@dataclass(frozen=True, slots=True)
class Outcome:
    text: str
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
