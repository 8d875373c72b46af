"""Editing sessions: the per-user context that owns a document history.

A session is created when a user logs in and dropped when they log out.
Nothing in it is persisted; closing a session discards its history.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from resume_studio.config import get_history_limit, get_session_idle_timeout
from resume_studio.models.defaults import default_document
from resume_studio.models.document import ResumeDocument
from resume_studio.services.auth import AuthenticatedUser
from resume_studio.services.history import History
from resume_studio.services.pdf_export import ExportResult, PdfExporter
from resume_studio.templates import ColorPalette, RenderedLayout, get_template, render

logger = logging.getLogger(__name__)

__all__ = ["EditorSession", "SessionStore", "StyleOptions"]


@dataclass(frozen=True, slots=True)
class StyleOptions:
    """Template and palette currently selected for preview and export."""

    template: str = "classic"
    palette: ColorPalette = ColorPalette.BLUE

    def __post_init__(self) -> None:
        get_template(self.template)
        object.__setattr__(self, "palette", ColorPalette(self.palette))


@dataclass(slots=True)
class EditorSession:
    """Everything one logged-in user is editing.

    Edits, undo/redo and style changes are serialized per session, so
    requests handled on different worker threads never commit against a
    stale document.

    Attributes:
        token: Opaque id handed to the client.
        user: The authenticated user owning the session.
        history: Undo/redo history of document snapshots.
        style: Current template and palette.
        exporter: PDF exporter; runs one export at a time for this session.
        last_active: Monotonic timestamp of the last lookup by token.
    """

    token: str
    user: AuthenticatedUser
    history: History[ResumeDocument]
    style: StyleOptions = field(default_factory=StyleOptions)
    exporter: PdfExporter = field(default_factory=PdfExporter)
    closed: bool = False
    last_active: float = field(default_factory=time.monotonic)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @property
    def document(self) -> ResumeDocument:
        return self.history.present

    def apply(self, operation: Callable[..., ResumeDocument], *args: Any, **kwargs: Any) -> bool:
        """Submit ``operation(document, *args, **kwargs)`` through the history.

        The operation runs against the latest present value while holding the
        session lock, so concurrent calls are committed one after the other.

        Returns:
            True if the document changed and an undo entry was recorded.
        """
        with self._lock:
            return self.history.set(lambda document: operation(document, *args, **kwargs))

    def undo(self) -> bool:
        with self._lock:
            return self.history.undo()

    def redo(self) -> bool:
        with self._lock:
            return self.history.redo()

    def set_style(
        self, template: str | None = None, palette: ColorPalette | str | None = None
    ) -> None:
        with self._lock:
            self.style = StyleOptions(
                template=template or self.style.template,
                palette=ColorPalette(palette) if palette else self.style.palette,
            )

    def render(
        self, template: str | None = None, palette: ColorPalette | str | None = None
    ) -> RenderedLayout:
        """Render the current document, optionally overriding the session style."""
        with self._lock:
            document = self.document
            style = self.style
        return render(document, template or style.template, palette or style.palette)

    def export_pdf(self) -> ExportResult:
        layout = self.render()
        return self.exporter.export(layout, title=self.document.name or "Resume")

    def close(self) -> None:
        with self._lock:
            self.history.reset(self.history.present)
            self.closed = True


class SessionStore:
    """In-memory registry of active editing sessions keyed by token.

    Sessions not looked up for longer than the idle timeout are dropped the
    next time the store is used.

    Args:
        document_factory: Builds the starting document of a new session.
        exporter_factory: Builds the PDF exporter of a new session.
        idle_timeout: Seconds of inactivity before a session expires. When
            omitted, ``SESSION_IDLE_TIMEOUT`` is read on every check.
        clock: Monotonic time source.
    """

    def __init__(
        self,
        document_factory: Callable[[], ResumeDocument] = default_document,
        exporter_factory: Callable[[], PdfExporter] = PdfExporter,
        idle_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._document_factory = document_factory
        self._exporter_factory = exporter_factory
        self._idle_timeout = idle_timeout
        self._clock = clock
        self._sessions: dict[str, EditorSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def _timeout(self) -> float | None:
        if self._idle_timeout is not None:
            return self._idle_timeout if self._idle_timeout > 0 else None
        return get_session_idle_timeout()

    def _is_expired(self, session: EditorSession, now: float) -> bool:
        timeout = self._timeout()
        return timeout is not None and now - session.last_active > timeout

    def create(self, user: AuthenticatedUser) -> EditorSession:
        """Start a session for *user* seeded with the default document."""
        self.purge_expired()
        token = secrets.token_urlsafe(32)
        session = EditorSession(
            token=token,
            user=user,
            history=History(self._document_factory(), limit=get_history_limit()),
            exporter=self._exporter_factory(),
            last_active=self._clock(),
        )
        with self._lock:
            self._sessions[token] = session
        logger.info("Started editing session for %s", user.email)
        return session

    def get(self, token: str) -> EditorSession | None:
        """Return the live session for *token* and mark it as active."""
        now = self._clock()
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if self._is_expired(session, now):
                del self._sessions[token]
                expired = session
            else:
                session.last_active = now
                return session
        expired.close()
        logger.info("Editing session for %s expired", expired.user.email)
        return None

    def purge_expired(self) -> int:
        """Drop every idle session. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [s for s in self._sessions.values() if self._is_expired(s, now)]
            for session in expired:
                del self._sessions[session.token]
        for session in expired:
            session.close()
        if expired:
            logger.info("Expired %d idle editing session(s)", len(expired))
        return len(expired)

    def end(self, token: str) -> bool:
        """Close and forget the session for *token*. Returns False if unknown."""
        with self._lock:
            session = self._sessions.pop(token, None)
        if session is None:
            return False
        session.close()
        logger.info("Ended editing session for %s", session.user.email)
        return True

    def clear(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()
