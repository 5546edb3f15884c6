"""Paginated PDF export.

The report view is rasterized into one tall image, which is then cut into
page-height bands (see paginate.py) and assembled into a PDF with Pillow.
"""
from __future__ import annotations

import io
import logging
import textwrap
from dataclasses import dataclass
from typing import Any, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from PIL import Image, UnidentifiedImageError

from ..errors import ExportError
from ..report.charts import bar_chart
from ..report.layout import Chart, ReportView, Section
from .paginate import A4_MM, page_height_for, paginate

logger = logging.getLogger(__name__)

PDF_FILENAME = "bias_audit_report.pdf"

PAGE_WIDTH_IN = A4_MM[0] / 25.4
MARGIN_IN = 0.5
RASTER_DPI = 110

TITLE_COLOR = "#b91c1c"
HEADING_COLOR = "#111827"
BODY_COLOR = "#374151"
MUTED_COLOR = "#6b7280"


@dataclass(frozen=True)
class _Line:
    text: str
    size: float
    color: str = BODY_COLOR
    weight: str = "normal"

    @property
    def height(self) -> float:
        return self.size * 1.55 / 72


@dataclass(frozen=True)
class _Charts:
    charts: tuple[Chart, ...]
    labelled: bool = False

    @property
    def height(self) -> float:
        rows = max((len(c.groups) for c in self.charts), default=1)
        return 0.55 + 0.3 * max(rows, 1) + (0.2 if self.labelled else 0.0)


@dataclass(frozen=True)
class _Gap:
    height: float


def _wrap_width(size: float, usable_in: float) -> int:
    # Average glyph is roughly half the font size wide.
    return max(20, int(usable_in * 72 / (size * 0.52)))


def _paragraph(text: str, size: float, usable_in: float, **kw: Any) -> list[_Line]:
    lines: list[_Line] = []
    for para in (text or "").splitlines() or [""]:
        wrapped = textwrap.wrap(para, width=_wrap_width(size, usable_in)) or [""]
        lines.extend(_Line(w, size, **kw) for w in wrapped)
    return lines


def _section_blocks(section: Section, usable_in: float) -> list[Any]:
    blocks: list[Any] = [_Gap(0.15), _Line(section.title, 13, HEADING_COLOR, "bold"), _Gap(0.05)]
    if section.kind == "text":
        blocks += _paragraph(section.text, 9, usable_in)
    elif section.kind == "bullets":
        for item in section.items:
            wrapped = _paragraph(item, 9, usable_in - 0.2)
            blocks.append(_Line("• " + wrapped[0].text, 9))
            blocks += [_Line("   " + ln.text, 9) for ln in wrapped[1:]]
    else:
        for panel in section.panels:
            blocks += [_Gap(0.05), _Line(panel.title, 10, HEADING_COLOR, "bold")]
            if panel.text:
                blocks += _paragraph(panel.text, 8.5, usable_in)
            if panel.caption:
                blocks += _paragraph(panel.caption, 8, usable_in, color=MUTED_COLOR)
            if panel.charts:
                blocks.append(_Charts(panel.charts, labelled=section.kind == "compare"))
    return blocks


def _report_blocks(view: ReportView, usable_in: float) -> list[Any]:
    blocks: list[Any] = [_Line(view.title, 20, TITLE_COLOR, "bold")]
    blocks += _paragraph(view.subtitle, 9, usable_in, color=MUTED_COLOR)
    for section in view.column("main") + view.column("side"):
        blocks += _section_blocks(section, usable_in)
    return blocks


def report_figure(view: ReportView, *, width_in: float = PAGE_WIDTH_IN) -> Any:
    """Lay the whole report out on one tall matplotlib figure."""
    usable = width_in - 2 * MARGIN_IN
    blocks = _report_blocks(view, usable)
    total = 2 * MARGIN_IN + sum(b.height for b in blocks)

    fig = plt.figure(figsize=(width_in, total))
    try:
        _draw_blocks(fig, blocks, width_in, usable, total)
    except Exception:
        plt.close(fig)
        raise
    return fig


def _draw_blocks(fig: Any, blocks: list[Any], width_in: float, usable: float, total: float) -> None:
    fig.patch.set_facecolor("white")
    left = MARGIN_IN / width_in
    y = MARGIN_IN
    for b in blocks:
        if isinstance(b, _Line):
            fig.text(left, 1 - (y + b.height * 0.75) / total, b.text,
                     fontsize=b.size, color=b.color, weight=b.weight, va="baseline",
                     parse_math=False, usetex=False)
        elif isinstance(b, _Charts):
            n = len(b.charts)
            gap = 0.3
            label_w = 0.9
            slot = (usable - gap * (n - 1)) / n
            for i, chart in enumerate(b.charts):
                x0 = MARGIN_IN + i * (slot + gap) + label_w
                ax = fig.add_axes([
                    x0 / width_in,
                    1 - (y + b.height - 0.25) / total,
                    (slot - label_w) / width_in,
                    (b.height - 0.45) / total,
                ])
                bar_chart(ax, chart, show_title=b.labelled)
        y += b.height


def render_report_image(view: ReportView, *, dpi: int = RASTER_DPI) -> Image.Image:
    """Rasterize the report (never the export controls) into one RGB image."""
    fig = report_figure(view)
    buf = io.BytesIO()
    try:
        fig.savefig(buf, format="png", dpi=dpi, facecolor="white")
    finally:
        plt.close(fig)
    buf.seek(0)
    img = Image.open(buf)
    img.load()
    return img.convert("RGB")


def image_to_pdf(image: Image.Image, *, page_size: tuple[float, float] = A4_MM) -> bytes:
    """Cut a tall image into page bands and assemble them as a PDF."""
    width, height = image.size
    page_h = page_height_for(width, page_size)
    bands = paginate(height, page_h)

    pages = []
    for band in bands:
        page = Image.new("RGB", (width, page_h), "white")
        page.paste(image.crop((0, band.top, width, band.bottom)), (0, 0))
        pages.append(page)

    # Pixels per inch so one page prints at the physical page width.
    resolution = width / (page_size[0] / 25.4)
    out = io.BytesIO()
    pages[0].save(out, format="PDF", save_all=True, append_images=pages[1:], resolution=resolution)
    logger.info("Exported PDF: %d page(s) from %dx%d raster", len(pages), width, height)
    return out.getvalue()


def build_pdf(view: ReportView, *, dpi: Optional[int] = None) -> bytes:
    try:
        image = render_report_image(view, dpi=dpi or RASTER_DPI)
        return image_to_pdf(image)
    except (OSError, ValueError, UnidentifiedImageError, RuntimeError) as e:
        logger.exception("PDF export failed")
        raise ExportError(f"The PDF could not be generated: {e}") from e
