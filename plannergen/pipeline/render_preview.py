from __future__ import annotations

from pathlib import Path
from typing import List

import fitz  # PyMuPDF

from .. import config
from ..storage import output_dir


def _render_page_to_png(doc: fitz.Document, page_index: int, out_path: Path, min_px: int = 1600) -> None:
    page = doc.load_page(page_index)

    # 짧은 변이 min_px 이상 나오도록 확대 배율을 잡는다 (72dpi 기준)
    rect = page.rect
    short_side = min(rect.width, rect.height)
    zoom = max(2.0, min_px / float(short_side))
    mat = fitz.Matrix(zoom, zoom)

    pix = page.get_pixmap(matrix=mat, alpha=False)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pix.save(str(out_path))


def render_previews(pdf_path: Path, base_dir: Path | None = None, pages: int = config.PREVIEW_PAGES) -> List[Path]:
    """PNG previews of the first pages of the compiled planner; short PDFs give fewer files."""
    previews: List[Path] = []
    with fitz.open(str(pdf_path)) as doc:
        for index in range(min(pages, doc.page_count)):
            out_path = output_dir(base_dir) / f"preview_{index + 1}.png"
            _render_page_to_png(doc, index, out_path)
            previews.append(out_path)
    return previews
