from __future__ import annotations

import logging
from typing import Any

import httpx

from online_compiler.core.config import Settings
from online_compiler.core.languages import runtime_id
from online_compiler.core.outcome import ErrorKind, Outcome
from online_compiler.services.session import CompilerSession


logger = logging.getLogger(__name__)

MISSING_BASE_URL = "❌ JUDGE0_BASE_URL is not set in .env.local"
RUN_FAILED = "❌ Error running code. Check the server log & your Judge0 config."
NO_OUTPUT = "No output."


def build_submission(language: str, source_code: str, stdin: str | None) -> dict[str, Any]:
    return {
        "source_code": source_code,
        "language_id": runtime_id(language),
        "stdin": stdin or "",
    }


def build_headers(settings: Settings) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if settings.judge0_api_key:
        headers["X-RapidAPI-Key"] = settings.judge0_api_key
    return headers


def _text(value: Any) -> str:
    # Missing, null and "" all count as empty.
    return value if isinstance(value, str) else ""


def format_report(payload: Any) -> str:
    """Render an execution-service response as the text shown in the output panel.

    Sections appear only for non-empty fields, always in the order
    status, stdout, stderr, compile output.
    """
    if not isinstance(payload, dict):
        payload = {}
    status = payload.get("status")
    description = _text(status.get("description")) if isinstance(status, dict) else ""
    stdout = _text(payload.get("stdout"))
    stderr = _text(payload.get("stderr"))
    compile_output = _text(payload.get("compile_output"))

    report = ""
    if description:
        report += f"Status: {description}\n\n"
    if stdout:
        report += f"Output:\n{stdout}\n"
    if stderr:
        report += f"Errors:\n{stderr}\n"
    if compile_output:
        report += f"Compiler Output:\n{compile_output}\n"
    return report or NO_OUTPUT


def check_configured(settings: Settings) -> Outcome | None:
    if not settings.judge0_base_url:
        logger.warning("JUDGE0_BASE_URL is not configured; refusing to run code")
        return Outcome(MISSING_BASE_URL, ErrorKind.CONFIGURATION)
    return None


async def submit(
    client: httpx.AsyncClient,
    settings: Settings,
    *,
    language: str,
    source_code: str,
    stdin: str | None,
) -> Outcome:
    """Send one submission to the execution service and map the reply to a report."""
    failure = check_configured(settings)
    if failure is not None:
        return failure

    try:
        response = await client.post(
            settings.judge0_base_url,
            json=build_submission(language, source_code, stdin),
            headers=build_headers(settings),
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        return Outcome(format_report(payload))
    except Exception:
        logger.exception("Execution request to %s failed", settings.judge0_base_url)
        return Outcome(RUN_FAILED, ErrorKind.TRANSPORT)


async def run_code(
    session: CompilerSession,
    client: httpx.AsyncClient,
    settings: Settings,
    *,
    language: str,
    source_code: str,
    stdin: str | None,
) -> Outcome:
    session.language = language
    session.code = source_code
    session.stdin = stdin or ""

    failure = check_configured(settings)
    if failure is not None:
        session.output = failure.text
        return failure

    with session.running():
        outcome = await submit(
            client,
            settings,
            language=language,
            source_code=source_code,
            stdin=stdin,
        )
        session.output = outcome.text
    return outcome
