"""Local exports of an audit: JSON, CSV and paginated PDF."""

from .document import PDF_FILENAME, build_pdf, image_to_pdf, render_report_image
from .paginate import A4_MM, PageBand, page_count, page_height_for, paginate
from .tabular import (
    JSON_FILENAME,
    METRICS_CSV_FILENAME,
    METRICS_HEADER,
    MITIGATION_CSV_FILENAME,
    MITIGATION_HEADER,
    metrics_to_csv,
    mitigation_to_csv,
    to_json,
)

__all__ = [
    "A4_MM",
    "JSON_FILENAME",
    "METRICS_CSV_FILENAME",
    "METRICS_HEADER",
    "MITIGATION_CSV_FILENAME",
    "MITIGATION_HEADER",
    "PDF_FILENAME",
    "PageBand",
    "build_pdf",
    "image_to_pdf",
    "metrics_to_csv",
    "mitigation_to_csv",
    "page_count",
    "page_height_for",
    "paginate",
    "render_report_image",
    "to_json",
]
