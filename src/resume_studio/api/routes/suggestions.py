"""AI suggestion route for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from resume_studio.api.dependencies import get_editor_session
from resume_studio.api.schemas.resume import SuggestionRequest, SuggestionResponse
from resume_studio.services.session import EditorSession
from resume_studio.services.suggestions import SuggestionService

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


def get_suggestion_service(request: Request) -> SuggestionService:
    return request.app.state.suggestions


@router.post("", response_model=SuggestionResponse)
def suggest(
    data: SuggestionRequest,
    _session: Annotated[EditorSession, Depends(get_editor_session)],
    service: Annotated[SuggestionService, Depends(get_suggestion_service)],
) -> SuggestionResponse:
    """Ask the language model for a suggestion.

    Provider problems come back as a fixed message in ``text`` rather than as
    an error status, so the editor can show it inline.
    """
    return SuggestionResponse(text=service.suggest(data.prompt))
