from __future__ import annotations

import operator
from dataclasses import dataclass

# Portrait A4 in millimetres (width, height).
A4_MM: tuple[float, float] = (210.0, 297.0)


@dataclass(frozen=True)
class PageBand:
    """Rows [top, bottom) of the tall raster that land on one page."""

    index: int
    top: int
    bottom: int

    @property
    def height(self) -> int:
        return self.bottom - self.top


def _positive_int(value: int, name: str) -> int:
    v = operator.index(value)
    if v <= 0:
        raise ValueError(f"{name} must be positive, got {v}")
    return v


def page_count(total_height: int, page_height: int) -> int:
    total = _positive_int(total_height, "total_height")
    page = _positive_int(page_height, "page_height")
    return -(-total // page)


def paginate(total_height: int, page_height: int) -> list[PageBand]:
    """
    Slice a raster of `total_height` rows into page-sized bands.

    Emits ceil(total / page) bands. The last one may be shorter than a page;
    an exact multiple produces no empty trailing band.
    """
    total = _positive_int(total_height, "total_height")
    page = _positive_int(page_height, "page_height")
    return [
        PageBand(index=i, top=i * page, bottom=min((i + 1) * page, total))
        for i in range(page_count(total, page))
    ]


def page_height_for(width: int, page_size: tuple[float, float] = A4_MM) -> int:
    """Page height in pixels for a raster `width` pixels wide, keeping the page aspect ratio."""
    w = _positive_int(width, "width")
    page_w, page_h = page_size
    if page_w <= 0 or page_h <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, round(w * page_h / page_w))
