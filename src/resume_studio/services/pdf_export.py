"""PDF export with a remote primary path and a local fallback.

The primary path posts the self-contained HTML of a rendered layout to an
external render service. If that fails for any reason the export reports an
informational notice and falls back to rasterizing the same markup locally
and embedding the image in a one-page A4 PDF. Only a failure of the fallback
is terminal.

An exporter runs one export at a time. A second call while one is in
flight raises :class:`ExportInProgressError` instead of queueing.
"""

from __future__ import annotations

import io
import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

import requests
from PIL import Image

from resume_studio.config import get_render_service_timeout, get_render_service_url
from resume_studio.templates.base import PAGE_HEIGHT_PX, PAGE_WIDTH_PX

if TYPE_CHECKING:
    from resume_studio.templates.base import RenderedLayout

logger = logging.getLogger(__name__)

__all__ = [
    "ExportInProgressError",
    "ExportResult",
    "LocalPdfRenderer",
    "LocalRenderError",
    "Notice",
    "PdfExporter",
    "PdfRenderError",
    "PdfRenderer",
    "RemotePdfRenderer",
    "RenderServiceError",
    "Severity",
    "playwright_screenshot",
]

FALLBACK_NOTICE = "PDF service is unavailable; generating the PDF locally instead."
FAILURE_NOTICE = "Failed to generate the PDF. Please try again."

# A4 at 150 dpi.
_A4_DPI = 150
_A4_SIZE_PX = (1240, 1754)

Rasterizer = Callable[[str, int, int], bytes]


class PdfRenderError(RuntimeError):
    """Base class for renderer failures."""


class RenderServiceError(PdfRenderError):
    """The remote render service could not produce a PDF."""


class LocalRenderError(PdfRenderError):
    """Local rasterization or PDF embedding failed."""


class ExportInProgressError(RuntimeError):
    """Raised when an export is requested while another is still running."""


class Severity(StrEnum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notice:
    """User-visible message produced during an export."""

    severity: Severity
    message: str


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Outcome of one export.

    Attributes:
        pdf: The PDF bytes, or None when both paths failed.
        notices: Messages to show the user, in the order they occurred.
        source: ``"remote"`` or ``"local"`` depending on which path succeeded.
    """

    pdf: bytes | None
    notices: tuple[Notice, ...] = field(default_factory=tuple)
    source: str | None = None

    @property
    def ok(self) -> bool:
        return self.pdf is not None


class PdfRenderer(ABC):
    """Turns self-contained HTML markup into PDF bytes."""

    @abstractmethod
    def render(self, html: str) -> bytes:
        """Return PDF bytes for *html*.

        Raises:
            PdfRenderError: If no PDF could be produced.
        """


class RemotePdfRenderer(PdfRenderer):
    """Client for the external HTML-to-PDF render service.

    Args:
        url: Service endpoint. Defaults to ``PDF_RENDER_SERVICE_URL``.
        timeout: Request timeout in seconds. Defaults to ``PDF_RENDER_TIMEOUT``.
    """

    def __init__(self, url: str | None = None, timeout: float | None = None) -> None:
        self.url = url if url is not None else get_render_service_url()
        self.timeout = timeout if timeout is not None else get_render_service_timeout()

    def render(self, html: str) -> bytes:
        if not self.url:
            raise RenderServiceError("PDF render service URL is not configured")

        try:
            response = requests.post(self.url, json={"html": html}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RenderServiceError(f"PDF render service request failed: {exc}") from exc

        if response.status_code != 200:
            raise RenderServiceError(f"PDF render service returned HTTP {response.status_code}")
        if not response.content.startswith(b"%PDF"):
            raise RenderServiceError("PDF render service returned a non-PDF body")
        return response.content


def playwright_screenshot(html: str, width: int, height: int) -> bytes:
    """Rasterize *html* to a full-page PNG with headless Chromium."""
    try:
        from playwright.sync_api import sync_playwright
    except ImportError as exc:
        raise LocalRenderError("Playwright is not installed") from exc

    with sync_playwright() as p:
        browser = p.chromium.launch(
            headless=True,
            args=["--no-sandbox", "--disable-dev-shm-usage"],
        )
        try:
            page = browser.new_page(
                viewport={"width": width, "height": height}, device_scale_factor=2
            )
            page.set_content(html, wait_until="load", timeout=30_000)
            return page.screenshot(full_page=True, type="png")
        finally:
            browser.close()


class LocalPdfRenderer(PdfRenderer):
    """Rasterize markup and embed the image in a single A4 page.

    Args:
        rasterizer: ``(html, width, height) -> PNG bytes``. Defaults to
            :func:`playwright_screenshot`.
    """

    def __init__(self, rasterizer: Rasterizer | None = None) -> None:
        self._rasterize = rasterizer or playwright_screenshot

    def render(self, html: str) -> bytes:
        try:
            png = self._rasterize(html, PAGE_WIDTH_PX, PAGE_HEIGHT_PX)
            return self.image_to_pdf(png)
        except LocalRenderError:
            raise
        except Exception as exc:
            raise LocalRenderError(f"Local PDF rendering failed: {exc}") from exc

    @staticmethod
    def image_to_pdf(image_bytes: bytes) -> bytes:
        """Fit an image onto a white A4 page, keeping its aspect ratio.

        The image is centred horizontally and anchored to the top edge.
        """
        with Image.open(io.BytesIO(image_bytes)) as source:
            image = source.convert("RGB")

        page_width, page_height = _A4_SIZE_PX
        scale = min(page_width / image.width, page_height / image.height)
        size = (max(1, round(image.width * scale)), max(1, round(image.height * scale)))
        image = image.resize(size, Image.Resampling.LANCZOS)

        page = Image.new("RGB", _A4_SIZE_PX, "white")
        page.paste(image, ((page_width - size[0]) // 2, 0))

        buffer = io.BytesIO()
        page.save(buffer, format="PDF", resolution=_A4_DPI)
        return buffer.getvalue()


class PdfExporter:
    """Runs the primary render path and falls back to the local one."""

    def __init__(
        self,
        primary: PdfRenderer | None = None,
        fallback: PdfRenderer | None = None,
    ) -> None:
        self.primary = primary or RemotePdfRenderer()
        self.fallback = fallback or LocalPdfRenderer()
        self._lock = threading.Lock()

    @property
    def in_progress(self) -> bool:
        return self._lock.locked()

    def export(self, layout: RenderedLayout, title: str = "Resume") -> ExportResult:
        """Produce a PDF for *layout*.

        Raises:
            ExportInProgressError: If this exporter is already running an export.
        """
        if not self._lock.acquire(blocking=False):
            raise ExportInProgressError("A PDF export is already in progress")
        try:
            return self._export(layout.dumps(title=title))
        finally:
            self._lock.release()

    def _export(self, html: str) -> ExportResult:
        notices: list[Notice] = []
        try:
            pdf = self.primary.render(html)
            return ExportResult(pdf=pdf, notices=tuple(notices), source="remote")
        except PdfRenderError as exc:
            logger.warning("Primary PDF path failed, falling back to local rendering: %s", exc)
            notices.append(Notice(Severity.INFO, FALLBACK_NOTICE))

        try:
            pdf = self.fallback.render(html)
        except PdfRenderError:
            logger.exception("Local PDF rendering failed")
            notices.append(Notice(Severity.ERROR, FAILURE_NOTICE))
            return ExportResult(pdf=None, notices=tuple(notices))
        return ExportResult(pdf=pdf, notices=tuple(notices), source="local")
