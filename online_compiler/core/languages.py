from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Literal, Mapping


LanguageName = Literal[
    "python",
    "javascript",
    "java",
    "cpp",
    "c",
    "csharp",
    "php",
    "ruby",
    "go",
    "rust",
    "kotlin",
    "swift",
]


@dataclass(frozen=True, slots=True)
class Language:
    runtime_id: int  # Judge0 language_id
    label: str


# Ids must match the execution service's own numbering exactly.
LANGUAGES: Final[Mapping[str, Language]] = MappingProxyType(
    {
        "python": Language(71, "Python"),
        "javascript": Language(63, "JavaScript (Node)"),
        "java": Language(62, "Java"),
        "cpp": Language(54, "C++ (GCC)"),
        "c": Language(50, "C (GCC)"),
        "csharp": Language(51, "C#"),
        "php": Language(68, "PHP"),
        "ruby": Language(72, "Ruby"),
        "go": Language(60, "Go"),
        "rust": Language(73, "Rust"),
        "kotlin": Language(78, "Kotlin"),
        "swift": Language(83, "Swift"),
    }
)

DEFAULT_LANGUAGE: Final[LanguageName] = "python"


def runtime_id(name: str) -> int:
    return LANGUAGES[name].runtime_id


def label(name: str) -> str:
    return LANGUAGES[name].label
