from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

from online_compiler.core.languages import DEFAULT_LANGUAGE, LanguageName
from online_compiler.core.outcome import ErrorKind


class RunRequest(BaseModel):
    language: LanguageName = Field(DEFAULT_LANGUAGE, description="Language to run the code as.")
    code: StrictStr = Field(..., description="Source to execute.")
    stdin: StrictStr | None = Field(None, description="Optional stdin passed to the program.")


class RunResponse(BaseModel):
    output: StrictStr
    error: ErrorKind | None = None


class AskRequest(BaseModel):
    language: LanguageName = Field(DEFAULT_LANGUAGE, description="Language of the code.")
    code: StrictStr = Field("", description="Current contents of the editor.")
    prompt: StrictStr = Field(..., description="Question for the assistant.")


class AskResponse(BaseModel):
    answer: StrictStr
    error: ErrorKind | None = None


class LanguageInfo(BaseModel):
    name: StrictStr
    label: StrictStr
    runtime_id: StrictInt


class SessionState(BaseModel):
    language: StrictStr
    code: StrictStr
    stdin: StrictStr
    output: StrictStr
    is_running: StrictBool
    ai_prompt: StrictStr
    ai_response: StrictStr
    is_thinking: StrictBool
