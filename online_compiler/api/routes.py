from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, status

from online_compiler.core.config import Settings
from online_compiler.core.languages import LANGUAGES
from online_compiler.models.schemas import (
    AskRequest,
    AskResponse,
    LanguageInfo,
    RunRequest,
    RunResponse,
    SessionState,
)
from online_compiler.services.assistant import ask_assistant
from online_compiler.services.executor import run_code
from online_compiler.services.session import CompilerSession, FlowBusyError


router = APIRouter()


def get_session(request: Request) -> CompilerSession:
    return request.app.state.session


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_http_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    # No timeout: a request runs until the remote service answers or fails.
    async with httpx.AsyncClient(
        transport=request.app.state.transport,
        timeout=None,
        follow_redirects=True,
    ) as client:
        yield client


@router.get("/languages", response_model=list[LanguageInfo])
def languages() -> list[LanguageInfo]:
    return [
        LanguageInfo(name=name, label=lang.label, runtime_id=lang.runtime_id)
        for name, lang in LANGUAGES.items()
    ]


@router.get("/session", response_model=SessionState)
def session_state(session: CompilerSession = Depends(get_session)) -> SessionState:
    return SessionState(**session.snapshot())


@router.post("/run", response_model=RunResponse, status_code=status.HTTP_200_OK)
async def run(
    req: RunRequest,
    session: CompilerSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> RunResponse:
    """Run the code on the configured execution service and return the report.

    Configuration and remote failures come back as a normal response carrying
    the message and an ``error`` kind; only a second run while one is in
    flight is rejected.
    """
    try:
        outcome = await run_code(
            session,
            client,
            settings,
            language=req.language,
            source_code=req.code,
            stdin=req.stdin,
        )
    except FlowBusyError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return RunResponse(output=outcome.text, error=outcome.error)


@router.post("/ask", response_model=AskResponse, status_code=status.HTTP_200_OK)
async def ask(
    req: AskRequest,
    session: CompilerSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> AskResponse:
    try:
        outcome = await ask_assistant(
            session,
            client,
            settings,
            language=req.language,
            source_code=req.code,
            prompt=req.prompt,
        )
    except FlowBusyError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return AskResponse(answer=outcome.text, error=outcome.error)
