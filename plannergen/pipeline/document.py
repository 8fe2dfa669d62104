from __future__ import annotations

from pathlib import PurePath
from typing import Dict, Iterable, Tuple

from reportlab.lib.pagesizes import A4, A5, LETTER

from .. import config
from ..models import PlannerConfig, TextDocument
from ..tex.measurement import Measurement
from ..tex.snippets import NL


PAPER_SIZES: Dict[str, Tuple[float, float]] = {
    "a4": A4,
    "a5": A5,
    "letter": LETTER,
}

PACKAGES = [
    "geometry",
    "tabularx",
    "adjustbox",
    "multido",
    "pict2e",
    "graphicx",
    "hyperref",
]


def geometry_options(planner_config: PlannerConfig) -> str:
    width, height = PAPER_SIZES[planner_config.parameters.paper]
    margin = Measurement.parse(planner_config.parameters.margin)
    return f"paperwidth={width:.2f}pt, paperheight={height:.2f}pt, margin={margin}"


def preamble(planner_config: PlannerConfig) -> str:
    lines = [r"\documentclass[9pt]{extarticle}"]
    lines.extend(rf"\usepackage{{{package}}}" for package in PACKAGES)
    lines.extend(
        [
            rf"\geometry{{{geometry_options(planner_config)}}}",
            r"\newcolumntype{Y}{>{\centering\arraybackslash}X}",
            r"\setlength{\unitlength}{1mm}",
            r"\setlength{\parindent}{0pt}",
            r"\pagestyle{empty}",
            r"\hypersetup{hidelinks}",
        ]
    )
    return NL.join(lines)


def build_root_document(planner_config: PlannerConfig, documents: Iterable[TextDocument]) -> TextDocument:
    """planner.tex: preamble plus one \\input per generated section, in config order."""
    inputs = [rf"\input{{{PurePath(document.name).stem}}}" + NL + r"\pagebreak" for document in documents]
    content = NL.join(
        [
            preamble(planner_config),
            "",
            r"\begin{document}",
            "",
            (NL + NL).join(inputs),
            "",
            r"\end{document}",
            "",
        ]
    )
    return TextDocument(name=config.ROOT_DOCUMENT, content=content)
