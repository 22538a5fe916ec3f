from __future__ import annotations

import logging
from typing import Any

import httpx

from online_compiler.core.config import Settings
from online_compiler.core.languages import label
from online_compiler.core.outcome import ErrorKind, Outcome
from online_compiler.services.session import CompilerSession


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful coding assistant inside an online compiler. "
    "Explain code, suggest fixes, and help with errors."
)

MISSING_API_KEY = "❌ OPENAI_API_KEY is not set in .env.local"
EMPTY_PROMPT = "Please type a question for the AI assistant."
REMOTE_FAILED = "❌ Error from AI API. Check your API key / usage in the server log."
CALL_FAILED = "❌ Error calling AI API. Check the server log for details."
NO_RESPONSE = "No response from AI."


def build_messages(language: str, source_code: str, prompt: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": f"Language: {label(language)}\n\nCode:\n{source_code}\n\nQuestion:\n{prompt}",
        },
    ]


def build_chat_request(
    settings: Settings, language: str, source_code: str, prompt: str
) -> dict[str, Any]:
    return {
        "model": settings.openai_model,
        "messages": build_messages(language, source_code, prompt),
    }


def extract_answer(payload: Any) -> str:
    """Return the first completion's text, trimmed, or the no-response fallback."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return NO_RESPONSE
    if not isinstance(content, str):
        return NO_RESPONSE
    return content.strip() or NO_RESPONSE


def check_request(settings: Settings, prompt: str) -> Outcome | None:
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not configured; refusing to call the assistant")
        return Outcome(MISSING_API_KEY, ErrorKind.CONFIGURATION)
    if not prompt.strip():
        return Outcome(EMPTY_PROMPT, ErrorKind.VALIDATION)
    return None


async def ask(
    client: httpx.AsyncClient,
    settings: Settings,
    *,
    language: str,
    source_code: str,
    prompt: str,
) -> Outcome:
    """Ask the chat-completion service about the current code.

    The reply body is decoded regardless of status; an ``error`` object in it
    is reported generically and logged in full.
    """
    failure = check_request(settings, prompt)
    if failure is not None:
        return failure

    try:
        response = await client.post(
            settings.openai_chat_url,
            json=build_chat_request(settings, language, source_code, prompt),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {settings.openai_api_key}",
            },
        )
        payload = response.json()
    except Exception:
        logger.exception("Chat request to %s failed", settings.openai_chat_url)
        return Outcome(CALL_FAILED, ErrorKind.TRANSPORT)

    if isinstance(payload, dict) and payload.get("error"):
        logger.error("Chat service returned an error: %s", payload["error"])
        return Outcome(REMOTE_FAILED, ErrorKind.REMOTE)

    return Outcome(extract_answer(payload))


async def ask_assistant(
    session: CompilerSession,
    client: httpx.AsyncClient,
    settings: Settings,
    *,
    language: str,
    source_code: str,
    prompt: str,
) -> Outcome:
    session.language = language
    session.code = source_code
    session.ai_prompt = prompt

    failure = check_request(settings, prompt)
    if failure is not None:
        session.ai_response = failure.text
        return failure

    with session.thinking():
        outcome = await ask(
            client,
            settings,
            language=language,
            source_code=source_code,
            prompt=prompt,
        )
        session.ai_response = outcome.text
    return outcome
