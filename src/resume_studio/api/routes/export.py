"""PDF export route for the API."""

from __future__ import annotations

import json
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from resume_studio.api.dependencies import get_editor_session
from resume_studio.api.schemas.resume import ExportFailureResponse, ExportNoticeResponse
from resume_studio.services.pdf_export import ExportInProgressError, Notice
from resume_studio.services.session import EditorSession

router = APIRouter(prefix="/resume", tags=["export"])

NOTICES_HEADER = "X-Export-Notices"


def _notices(notices: tuple[Notice, ...]) -> list[ExportNoticeResponse]:
    return [ExportNoticeResponse(severity=n.severity.value, message=n.message) for n in notices]


@router.post(
    "/export",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}, "description": "The exported PDF."},
        409: {"description": "An export is already running for this session."},
        502: {"model": ExportFailureResponse, "description": "Both render paths failed."},
    },
)
def export_resume(session: Annotated[EditorSession, Depends(get_editor_session)]) -> Response:
    """Export the current document with the session's template and palette.

    Notices raised along the way (for example the switch to local rendering)
    are returned as a JSON list in the ``X-Export-Notices`` header.
    """
    try:
        result = session.export_pdf()
    except ExportInProgressError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc

    notices = _notices(result.notices)
    if result.pdf is None:
        failure = ExportFailureResponse(detail="PDF export failed", notices=notices)
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=failure.model_dump())

    return Response(
        content=result.pdf,
        media_type="application/pdf",
        headers={
            "Content-Disposition": 'attachment; filename="resume.pdf"',
            NOTICES_HEADER: json.dumps([notice.model_dump() for notice in notices]),
        },
    )
