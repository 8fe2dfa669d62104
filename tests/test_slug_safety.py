from __future__ import annotations

import pytest

from plannergen.storage import safe_document_name


def test_section_document_names_pass() -> None:
    assert safe_document_name("monthly.tex") == "monthly.tex"
    assert safe_document_name("Daily_Log.tex") == "Daily_Log.tex"


@pytest.mark.parametrize("name", ["../monthly.tex", "a/b.tex", "monthly", "month ly.tex", ".tex"])
def test_unsafe_document_names(name: str) -> None:
    with pytest.raises(ValueError):
        safe_document_name(name)
