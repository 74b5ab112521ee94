"""PDF export of rendered plans.

Updates:
    v0.1.0 - 2026-10-19 - ReportLab letter/portrait export with one inch margins.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, List
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter, portrait
from reportlab.lib.styles import ParagraphStyle, StyleSheet1, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from ..core.errors import ExportFailed
from .config_service import ExportConfig
from .plan_renderer import BlockKind, GroupVariant, PlanGroup, RenderedBlock, render_plan

logger = logging.getLogger(__name__)

PAGE_SIZE = portrait(letter)
MARGIN = 1 * inch

_HEADER_COLOURS = {
    GroupVariant.A: "#2563eb",
    GroupVariant.B: "#9333ea",
}


class PlanExporter:
    """Serializes a plan to a single-column, paginated PDF."""

    def __init__(self, config: ExportConfig | None = None) -> None:
        self._config = config or ExportConfig()

    @property
    def default_filename(self) -> str:
        return self._config.filename

    def export(self, plan_text: str, destination: Path | None = None) -> Path:
        """Write the plan to `destination` (default: the configured file name).

        Raises:
            ExportFailed: If the document cannot be built or written.
        """

        target = Path(destination or self._config.filename)
        payload = self.export_bytes(plan_text)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)
        except OSError as exc:
            logger.error("Plan export to %s failed: %s", target, exc)
            raise ExportFailed(f"Could not write {target}: {exc}") from exc
        logger.info("plan_exported", extra={"path": str(target), "bytes": len(payload)})
        return target

    def export_bytes(self, plan_text: str) -> bytes:
        """Return the PDF document for the plan as bytes.

        Raises:
            ExportFailed: If ReportLab cannot lay out the document.
        """

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=PAGE_SIZE,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=self._config.title,
        )
        try:
            doc.build(self._build_story(render_plan(plan_text)))
        except Exception as exc:
            logger.error("Plan export failed: %s", exc, exc_info=True)
            raise ExportFailed(f"Could not build plan document: {exc}") from exc
        return buffer.getvalue()

    def _build_story(self, groups: List[PlanGroup]) -> List[Any]:
        styles = _plan_styles()
        story: List[Any] = [Paragraph(escape(self._config.title), styles["Title"])]
        for group in groups:
            colour = _HEADER_COLOURS[group.variant]
            for block in group.blocks:
                story.append(_block_flowable(block, styles, colour))
            story.append(Spacer(1, 0.2 * inch))
        return story


def _plan_styles() -> StyleSheet1:
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="PlanBullet", parent=styles["BodyText"], leftIndent=14, bulletIndent=4))
    styles.add(ParagraphStyle(name="PlanNumbered", parent=styles["BodyText"], leftIndent=18, bulletIndent=0))
    return styles


def _block_flowable(block: RenderedBlock, styles: StyleSheet1, colour: str) -> Paragraph:
    text = escape(block.text)
    if block.kind is BlockKind.HEADER:
        return Paragraph(f'<font color="{colour}">{text}</font>', styles["Heading2"])
    if block.kind is BlockKind.BULLET:
        return Paragraph(text, styles["PlanBullet"], bulletText="•")
    if block.kind is BlockKind.NUMBERED:
        return Paragraph(text, styles["PlanNumbered"], bulletText=f"{block.ordinal}.")
    return Paragraph(text, styles["BodyText"])
