from __future__ import annotations

from typing import Dict


NL = "\n"
NLNL = "\n\n"
PAGE_BREAK = r"\pagebreak"

# pagination marker the root document relies on between pages of a section
PAGES_GLUE = NL + PAGE_BREAK + NLNL

_LATEX_SPECIALS: Dict[str, str] = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def escape(text: str) -> str:
    return "".join(_LATEX_SPECIALS.get(char, char) for char in str(text))


def adjust_box(content: str, max_width: str = r"\linewidth") -> str:
    return rf"\adjustbox{{max width={max_width}}}{{{content}}}"


def bold(text: str) -> str:
    return rf"\textbf{{{text}}}"


def hyperlink(target: str, text: str) -> str:
    return rf"\hyperlink{{{target}}}{{{text}}}"


def hypertarget(target: str, text: str = "") -> str:
    return rf"\hypertarget{{{target}}}{{{text}}}"
