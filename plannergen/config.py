from __future__ import annotations

from pathlib import Path
from typing import List


BASE_DIR = Path(__file__).resolve().parents[1]
OUT_DIR = BASE_DIR / "out"
LOCALES_DIR = Path(__file__).resolve().parent / "locales"

DEFAULT_TEMPLATE = "mos"
DEFAULT_LOCALE = "en"
BUILTIN_FAMILIES: List[str] = ["mos", "breadcrumb"]

DOCUMENT_EXTENSION = "tex"
ROOT_DOCUMENT = "planner.tex"
LATEX_ENGINE = "pdflatex"
LATEX_RUNS = 2
PREVIEW_PAGES = 3

DOT_SPACING = "5mm"
DEFAULT_DOT_GRID_SIZE = "1cm"


def set_out_dir(path: Path) -> None:
    global OUT_DIR
    OUT_DIR = path
