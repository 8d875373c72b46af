"""Resume editing routes for the API.

Every editing route submits one mutation through the session history and
returns the resulting state. Unknown section or entry ids are silent no-ops
and come back with ``changed: false``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi import Path as PathParam
from fastapi.responses import HTMLResponse

from resume_studio.api.dependencies import get_editor_session
from resume_studio.api.schemas.resume import (
    AddSectionRequest,
    ContactFieldUpdateRequest,
    DocumentFieldUpdateRequest,
    ItemUpdateRequest,
    MoveSectionRequest,
    ResumeStateResponse,
    SectionContentUpdateRequest,
    SectionTitleUpdateRequest,
    SkillRequest,
    StyleOptionsResponse,
    StyleUpdateRequest,
    TemplateOption,
)
from resume_studio.models.document import ResumeDocument
from resume_studio.services.content_editing import (
    add_item,
    add_skill,
    edit_items_section,
    edit_skills_section,
    new_item,
    remove_item,
    remove_skill,
    responsibilities_from_text,
    update_item,
)
from resume_studio.services.mutations import (
    ContentTypeError,
    add_section,
    change_contact_field,
    change_field,
    change_section_content,
    change_section_title,
    delete_section,
    move_section,
)
from resume_studio.services.session import EditorSession
from resume_studio.templates import ColorPalette, get_template, list_templates

router = APIRouter(prefix="/resume", tags=["resume"])

SessionDep = Annotated[EditorSession, Depends(get_editor_session)]
SectionIdParam = Annotated[str, PathParam(description="Section id")]

# HTTP 422 Unprocessable Content.
UNPROCESSABLE = 422


def _state(session: EditorSession, changed: bool = False) -> ResumeStateResponse:
    history = session.history
    return ResumeStateResponse(
        document=history.present,
        can_undo=history.can_undo,
        can_redo=history.can_redo,
        template=session.style.template,
        palette=session.style.palette,
        changed=changed,
    )


def _apply(
    session: EditorSession, operation: Callable[..., ResumeDocument], *args: Any
) -> ResumeStateResponse:
    """Run *operation* through the history, mapping bad input to 422."""
    try:
        changed = session.apply(operation, *args)
    except ValueError as exc:
        raise HTTPException(
            status_code=UNPROCESSABLE,
            detail=str(exc),
        ) from exc
    return _state(session, changed)


def _append_new_item(document: ResumeDocument, section_id: str) -> ResumeDocument:
    section = document.find_section(section_id)
    if section is None:
        return document
    try:
        item = new_item(section.type)
    except ValueError as exc:
        raise ContentTypeError(str(exc)) from exc
    return edit_items_section(document, section_id, lambda items: add_item(items, item))


def _normalize_item_changes(changes: dict[str, Any]) -> dict[str, Any]:
    changes = dict(changes)
    changes.pop("id", None)
    if "responsibilities_text" in changes:
        changes["responsibilities"] = responsibilities_from_text(
            str(changes.pop("responsibilities_text"))
        )
    return changes


@router.get("", response_model=ResumeStateResponse)
def get_resume(session: SessionDep) -> ResumeStateResponse:
    """Return the current document and whether undo/redo are available."""
    return _state(session)


@router.patch("/fields", response_model=ResumeStateResponse)
def update_document_field(
    data: DocumentFieldUpdateRequest, session: SessionDep
) -> ResumeStateResponse:
    return _apply(session, change_field, data.field, data.value)


@router.patch("/contact", response_model=ResumeStateResponse)
def update_contact_field(
    data: ContactFieldUpdateRequest, session: SessionDep
) -> ResumeStateResponse:
    return _apply(session, change_contact_field, data.field, data.value)


@router.post("/sections", response_model=ResumeStateResponse)
def create_section(data: AddSectionRequest, session: SessionDep) -> ResumeStateResponse:
    """Append an empty section. A second summary section is ignored."""
    return _apply(session, add_section, data.type)


@router.post("/sections/move", response_model=ResumeStateResponse)
def reorder_section(data: MoveSectionRequest, session: SessionDep) -> ResumeStateResponse:
    return _apply(session, move_section, data.index, data.direction)


@router.delete("/sections/{section_id}", response_model=ResumeStateResponse)
def remove_section(section_id: SectionIdParam, session: SessionDep) -> ResumeStateResponse:
    return _apply(session, delete_section, section_id)


@router.put("/sections/{section_id}/title", response_model=ResumeStateResponse)
def update_section_title(
    section_id: SectionIdParam, data: SectionTitleUpdateRequest, session: SessionDep
) -> ResumeStateResponse:
    title = data.title.strip()
    if not title:
        raise HTTPException(
            status_code=UNPROCESSABLE,
            detail="Section title cannot be blank",
        )
    return _apply(session, change_section_title, section_id, title)


@router.put("/sections/{section_id}/content", response_model=ResumeStateResponse)
def update_section_content(
    section_id: SectionIdParam, data: SectionContentUpdateRequest, session: SessionDep
) -> ResumeStateResponse:
    """Replace a section's content; the content must match the section type."""
    return _apply(session, change_section_content, section_id, data.content)


@router.post("/sections/{section_id}/skills", response_model=ResumeStateResponse)
def create_skill(
    section_id: SectionIdParam, data: SkillRequest, session: SessionDep
) -> ResumeStateResponse:
    return _apply(
        session,
        edit_skills_section,
        section_id,
        lambda skills: add_skill(skills, data.category, data.name),
    )


@router.delete("/sections/{section_id}/skills", response_model=ResumeStateResponse)
def delete_skill(
    section_id: SectionIdParam,
    session: SessionDep,
    category: Annotated[str, Query(description="Skill category")],
    name: Annotated[str, Query(description="Skill name")],
) -> ResumeStateResponse:
    return _apply(
        session,
        edit_skills_section,
        section_id,
        lambda skills: remove_skill(skills, category, name),
    )


@router.post("/sections/{section_id}/items", response_model=ResumeStateResponse)
def create_item(section_id: SectionIdParam, session: SessionDep) -> ResumeStateResponse:
    """Append an empty entry to a list section."""
    return _apply(session, _append_new_item, section_id)


@router.patch("/sections/{section_id}/items/{item_id}", response_model=ResumeStateResponse)
def modify_item(
    section_id: SectionIdParam,
    item_id: Annotated[str, PathParam(description="Entry id")],
    data: ItemUpdateRequest,
    session: SessionDep,
) -> ResumeStateResponse:
    changes = _normalize_item_changes(data.changes)
    return _apply(
        session,
        edit_items_section,
        section_id,
        lambda items: update_item(items, item_id, **changes),
    )


@router.delete("/sections/{section_id}/items/{item_id}", response_model=ResumeStateResponse)
def delete_item(
    section_id: SectionIdParam,
    item_id: Annotated[str, PathParam(description="Entry id")],
    session: SessionDep,
) -> ResumeStateResponse:
    return _apply(
        session,
        edit_items_section,
        section_id,
        lambda items: remove_item(items, item_id),
    )


@router.post("/undo", response_model=ResumeStateResponse)
def undo(session: SessionDep) -> ResumeStateResponse:
    return _state(session, session.undo())


@router.post("/redo", response_model=ResumeStateResponse)
def redo(session: SessionDep) -> ResumeStateResponse:
    return _state(session, session.redo())


@router.get(
    "/templates",
    response_model=StyleOptionsResponse,
    dependencies=[Depends(get_editor_session)],
)
def list_style_options() -> StyleOptionsResponse:
    """List the templates and palettes a resume can be styled with."""
    return StyleOptionsResponse(
        templates=[
            TemplateOption(key=key, name=get_template(key).name) for key in list_templates()
        ],
        palettes=list(ColorPalette),
    )


@router.put("/style", response_model=ResumeStateResponse)
def update_style(data: StyleUpdateRequest, session: SessionDep) -> ResumeStateResponse:
    """Select the template and/or palette used for preview and export."""
    try:
        session.set_style(template=data.template, palette=data.palette)
    except ValueError as exc:
        raise HTTPException(
            status_code=UNPROCESSABLE,
            detail=str(exc),
        ) from exc
    return _state(session)


@router.get("/preview", response_class=HTMLResponse)
def preview_resume(
    session: SessionDep,
    template: Annotated[str | None, Query(description="Override the session template")] = None,
    palette: Annotated[
        ColorPalette | None, Query(description="Override the session palette")
    ] = None,
    fragment: Annotated[
        bool, Query(description="Return only the page markup without the HTML wrapper")
    ] = False,
) -> HTMLResponse:
    """Render the current document as HTML."""
    try:
        layout = session.render(template=template, palette=palette)
    except ValueError as exc:
        raise HTTPException(
            status_code=UNPROCESSABLE,
            detail=str(exc),
        ) from exc
    html = layout.body_html if fragment else layout.dumps(title=session.document.name or "Resume")
    return HTMLResponse(content=html)
